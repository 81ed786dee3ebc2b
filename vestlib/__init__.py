"""Token Vesting Schedule Engine.

This package turns calendar-level vesting parameters into exact schedules
(absolute timestamps, integer base-unit amounts) and evaluates them.

Key modules:
- schedule: Parameters, validation and the schedule builder
- evaluation: Amounts at an instant and vesting curves
- amounts: Fixed-point token amount arithmetic
- conventions: Release frequencies, cliff durations and calendar arithmetic
- interpolation: Reading drawn curves at arbitrary instants
- api: build / evaluate / curve entry points
"""

from .api import BuildResult, build, curve, evaluate
from .conventions import CliffDuration, ReleaseFrequency, RenderMode
from .errors import ComputationError, ValidationError, VestingError
from .schedule import CalculatedClaimSnapshot, CurvePoint, ScheduleDefinition, ScheduleParams

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "BuildResult",
    "CalculatedClaimSnapshot",
    "CliffDuration",
    "ComputationError",
    "CurvePoint",
    "ReleaseFrequency",
    "RenderMode",
    "ScheduleDefinition",
    "ScheduleParams",
    "ValidationError",
    "VestingError",
    "build",
    "curve",
    "evaluate",
]
