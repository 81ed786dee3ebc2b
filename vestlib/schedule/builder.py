"""
Schedule builder: turns calendar parameters into a ScheduleDefinition.
"""

import logging
from datetime import datetime
from typing import Optional

from vestlib.amounts import split_cliff_amount
from vestlib.config import EngineSettings, get_settings
from vestlib.conventions.dates import EPOCH, to_timestamp
from vestlib.conventions.durations import duration_seconds
from vestlib.conventions.types import ReleaseFrequency
from vestlib.errors import ValidationError

from .core import ScheduleDefinition
from .params import ScheduleParams
from .validation import collect_errors, resolve_params

logger = logging.getLogger(__name__)


def release_interval_seconds(frequency: ReleaseFrequency) -> int:
    """Length of one release interval, resolved from the epoch.

    Months and years therefore have a fixed, approximate length (31 and 365
    days) that does not depend on the schedule's own dates.
    """
    return duration_seconds(frequency.duration(), EPOCH)


def snap_end_timestamp(
    cliff_start_timestamp: int,
    end_timestamp: int,
    interval_seconds: int,
    tolerance_seconds: int = 100,
    tolerance_fraction: float = 0.0001,
) -> int:
    """
    Move an end timestamp onto the nearest whole release interval.

    Args:
        cliff_start_timestamp: Start of linear vesting
        end_timestamp: End requested by the user
        interval_seconds: Length of one release interval
        tolerance_seconds: Largest absolute distance that is snapped
        tolerance_fraction: Largest distance, as a fraction of one interval, that is snapped

    Returns:
        ``cliff_start + n * interval`` (n >= 1) when the requested end lies within
        tolerance of that boundary, otherwise the requested end unchanged.
    """
    if end_timestamp <= cliff_start_timestamp:
        return end_timestamp

    elapsed = end_timestamp - cliff_start_timestamp
    whole, remainder = divmod(elapsed, interval_seconds)
    if 2 * remainder >= interval_seconds:
        nearest, offset = whole + 1, interval_seconds - remainder
    else:
        nearest, offset = whole, remainder

    if offset <= tolerance_seconds or offset <= interval_seconds * tolerance_fraction:
        snapped = cliff_start_timestamp + max(nearest, 1) * interval_seconds
        if snapped != end_timestamp:
            logger.debug(
                "Snapping end %s to %s (%s intervals, %ss off)",
                end_timestamp, snapped, max(nearest, 1), offset,
            )
        return snapped
    return end_timestamp


def calculate_schedule_definition(
    start_time: datetime,
    cliff_start_time: datetime,
    end_time: datetime,
    release_frequency: ReleaseFrequency,
    cliff_amount: int,
    linear_vest_amount: int,
    unit_decimals: int,
    settings: Optional[EngineSettings] = None,
) -> ScheduleDefinition:
    """Assemble a definition from already validated, resolved values."""
    settings = settings or get_settings()
    interval = release_interval_seconds(release_frequency)
    cliff_start_ts = to_timestamp(cliff_start_time)
    end_ts = snap_end_timestamp(
        cliff_start_ts,
        to_timestamp(end_time),
        interval,
        settings.snap_tolerance_seconds,
        settings.snap_tolerance_fraction,
    )

    return ScheduleDefinition(
        start_timestamp=to_timestamp(start_time),
        cliff_start_timestamp=cliff_start_ts,
        end_timestamp=end_ts,
        # the cliff unlocks exactly when linear vesting starts
        cliff_release_timestamp=cliff_start_ts if cliff_amount > 0 else None,
        release_interval_seconds=interval,
        linear_vest_amount=linear_vest_amount,
        cliff_amount=cliff_amount,
        unit_decimals=unit_decimals,
    )


def build_schedule(
    params: ScheduleParams, settings: Optional[EngineSettings] = None
) -> ScheduleDefinition:
    """Validate ``params`` and build the schedule.

    Raises:
        ValidationError: if any parameter is not acceptable.
    """
    settings = settings or get_settings()
    resolved = resolve_params(params, settings)
    errors = collect_errors(resolved, settings)
    if errors:
        raise ValidationError(errors)

    cliff_percent = resolved.cliff_percent if resolved.cliff_duration is not None else None
    cliff_amount, linear_vest_amount = split_cliff_amount(
        resolved.total_amount,
        cliff_percent,
        resolved.unit_decimals,
        resolved.token_precision,
    )

    definition = calculate_schedule_definition(
        start_time=resolved.start,
        cliff_start_time=resolved.cliff_start,
        end_time=resolved.end,
        release_frequency=resolved.release_frequency,
        cliff_amount=cliff_amount,
        linear_vest_amount=linear_vest_amount,
        unit_decimals=resolved.unit_decimals,
        settings=settings,
    )
    logger.info(
        "Built schedule %s..%s every %ss (cliff=%s, linear=%s)",
        definition.cliff_start_timestamp,
        definition.end_timestamp,
        definition.release_interval_seconds,
        definition.cliff_amount,
        definition.linear_vest_amount,
    )
    return definition
