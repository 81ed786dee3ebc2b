"""Engine configuration."""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Defaults used by the schedule builder and evaluator.

    Every value can be overridden through a ``VESTLIB_``-prefixed environment
    variable (e.g. ``VESTLIB_UNIT_DECIMALS=6``).
    """

    model_config = SettingsConfigDict(
        env_prefix="VESTLIB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    token_precision: int = Field(default=5, ge=0)
    unit_decimals: int = Field(default=18, ge=0)
    amount_decimal_places: int = Field(default=3, ge=0)
    percent_decimal_places: int = Field(default=2, ge=0)

    snap_tolerance_seconds: int = Field(default=100, ge=0)
    snap_tolerance_fraction: float = Field(default=0.0001, ge=0)

    stepped_min_interval_seconds: int = Field(default=86400, gt=0)
    max_curve_points: int = Field(default=2000, gt=1)
    display_decimals: int = Field(default=2, ge=0)


@lru_cache
def get_settings() -> EngineSettings:
    """Return cached settings instance."""
    return EngineSettings()


__all__ = ["EngineSettings", "get_settings"]
