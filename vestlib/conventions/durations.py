"""
Calendar-aware duration arithmetic.

Month and year lengths vary, so durations are kept as ``relativedelta`` values
and only turned into seconds against a concrete anchor date.
"""

import logging
from datetime import datetime
from typing import Union

from dateutil.relativedelta import relativedelta

from .dates import EPOCH, DateLike, to_datetime, to_timestamp

logger = logging.getLogger(__name__)


def tenor_to_duration(tenor: str) -> relativedelta:
    """Convert a tenor string (e.g. '30S', '1MIN', '1H', '1D', '2W', '3M', '1Y') to a duration."""
    t = tenor.upper().strip()
    try:
        if t.endswith("MIN"):
            return relativedelta(minutes=int(t[:-3]))
        if t.endswith("S"):
            return relativedelta(seconds=int(t[:-1]))
        if t.endswith("H"):
            return relativedelta(hours=int(t[:-1]))
        if t.endswith("D"):
            return relativedelta(days=int(t[:-1]))
        if t.endswith("W"):
            return relativedelta(weeks=int(t[:-1]))
        if t.endswith("M"):
            return relativedelta(months=int(t[:-1]))
        if t.endswith("Y"):
            return relativedelta(years=int(t[:-1]))
    except ValueError as exc:
        raise ValueError(f"Unsupported tenor: {tenor}") from exc
    raise ValueError(f"Unsupported tenor: {tenor}")


def add_duration(start: DateLike, duration: Union[relativedelta, str]) -> datetime:
    """Add a calendar duration to a date.

    Adding months keeps the day of month and clamps it to the last day of the
    target month (Jan 31 + 1 month = Feb 29 in a leap year).
    """
    if isinstance(duration, str):
        duration = tenor_to_duration(duration)
    return to_datetime(start) + duration


def duration_seconds(duration: Union[relativedelta, str], anchor: DateLike = EPOCH) -> int:
    """Length of ``duration`` in seconds when resolved from ``anchor``."""
    anchor_dt = to_datetime(anchor)
    seconds = to_timestamp(add_duration(anchor_dt, duration)) - to_timestamp(anchor_dt)
    logger.debug("Resolved %s from %s to %s seconds", duration, anchor_dt, seconds)
    return seconds
