"""Entry points used by a UI layer.

``build`` never raises for bad input; it reports field-keyed messages the way
a form displays them. ``evaluate`` and ``curve`` are total over valid
definitions.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional, Union

from vestlib.config import EngineSettings
from vestlib.conventions.dates import DateLike, to_timestamp
from vestlib.conventions.types import RenderMode
from vestlib.errors import ComputationError, ValidationError
from vestlib.evaluation import VestingCurve, amount_at, generate_curve
from vestlib.schedule import (
    CalculatedClaimSnapshot,
    ScheduleDefinition,
    ScheduleParams,
    build_schedule,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    """Either a definition or the messages explaining why there is none."""

    definition: Optional[ScheduleDefinition] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.definition is not None and not self.errors


def build(params: ScheduleParams, settings: Optional[EngineSettings] = None) -> BuildResult:
    """Build a schedule, reporting validation problems instead of raising."""
    try:
        return BuildResult(definition=build_schedule(params, settings))
    except ValidationError as exc:
        return BuildResult(errors=exc.errors)
    except ComputationError as exc:
        logger.error("Schedule computation failed: %s", exc)
        return BuildResult(errors={"general": str(exc)})


def evaluate(
    definition: ScheduleDefinition,
    timestamp: Optional[Union[int, DateLike]] = None,
) -> CalculatedClaimSnapshot:
    """Claim snapshot at ``timestamp`` (seconds or date-like); defaults to now."""
    if timestamp is None:
        timestamp = to_timestamp(datetime.now(timezone.utc))
    elif not isinstance(timestamp, int):
        timestamp = to_timestamp(timestamp)
    return amount_at(definition, timestamp)


def curve(
    definition: ScheduleDefinition,
    mode: Union[RenderMode, str] = RenderMode.CONTINUOUS,
    settings: Optional[EngineSettings] = None,
) -> VestingCurve:
    return generate_curve(definition, mode, settings)


__all__ = ["BuildResult", "build", "curve", "evaluate"]
