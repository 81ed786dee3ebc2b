# Re-export schedule components
from .builder import (
    build_schedule,
    calculate_schedule_definition,
    release_interval_seconds,
    snap_end_timestamp,
)
from .core import CalculatedClaimSnapshot, CurvePoint, ScheduleDefinition
from .params import ScheduleParams
from .validation import ResolvedParams, collect_errors, resolve_params, validate_schedule

__all__ = [
    "CalculatedClaimSnapshot",
    "CurvePoint",
    "ResolvedParams",
    "ScheduleDefinition",
    "ScheduleParams",
    "build_schedule",
    "calculate_schedule_definition",
    "collect_errors",
    "release_interval_seconds",
    "resolve_params",
    "snap_end_timestamp",
    "validate_schedule",
]
