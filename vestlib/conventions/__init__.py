"""
Conventions for vesting schedules: option sets, dates and calendar durations.
"""

from .dates import (
    DATETIME_S_FMT,
    EPOCH,
    format_datetime,
    from_timestamp,
    to_datetime,
    to_timestamp,
)
from .durations import add_duration, duration_seconds, tenor_to_duration
from .types import CliffDuration, ReleaseFrequency, RenderMode

__all__ = [
    # Option sets
    'CliffDuration',
    'ReleaseFrequency',
    'RenderMode',

    # Dates
    'DATETIME_S_FMT',
    'EPOCH',
    'format_datetime',
    'from_timestamp',
    'to_datetime',
    'to_timestamp',

    # Calendar durations
    'add_duration',
    'duration_seconds',
    'tenor_to_duration',
]
