"""Exception types raised by the vesting engine."""

from __future__ import annotations

from typing import Dict, Mapping

# Fields a validation error may populate; "general" is the catch-all.
ERROR_FIELDS = (
    "start_date",
    "end_date",
    "token_amount",
    "cliff_percent",
    "release_frequency",
    "general",
)


class VestingError(RuntimeError):
    """Base exception for vesting engine errors."""


class ValidationError(VestingError):
    """Raised when schedule parameters are not acceptable to the builder.

    Carries a field-keyed mapping of human-readable messages so the caller can
    show each message next to the input that caused it.
    """

    def __init__(self, errors: Mapping[str, str]):
        unknown = set(errors) - set(ERROR_FIELDS)
        if unknown:
            raise ValueError(f"Unknown error fields: {sorted(unknown)}")
        self.errors: Dict[str, str] = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))

    def __contains__(self, field: str) -> bool:
        return field in self.errors

    def __getitem__(self, field: str) -> str:
        return self.errors[field]


class ComputationError(VestingError):
    """Raised when a computation hits a state valid input can never produce."""
