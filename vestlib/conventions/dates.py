"""Date parsing and timestamp conversion helpers."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Union

from dateutil import parser as date_parser
from pandas import Timestamp

DATETIME_S_FMT = "%Y-%m-%d %H:%M:%S"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

DateLike = Union[str, date, datetime, Timestamp]


def to_datetime(date_like: DateLike) -> datetime:
    """
    Convert a date-like value into a timezone-aware datetime.

    Accepts ISO-8601 strings, ``date``, ``datetime`` and ``pandas.Timestamp``.
    Naive values are taken to be UTC; a bare date means midnight.
    """
    if isinstance(date_like, Timestamp):
        dt = date_like.to_pydatetime()
    elif isinstance(date_like, datetime):
        dt = date_like
    elif isinstance(date_like, date):
        dt = datetime.combine(date_like, time())
    elif isinstance(date_like, str):
        text = date_like.strip()
        if not text:
            raise ValueError("Empty date string")
        dt = date_parser.isoparse(text)
    else:
        raise TypeError(f"Unsupported type for date: {type(date_like)}")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def to_timestamp(date_like: DateLike) -> int:
    """Whole seconds since the epoch, rounding any sub-second part up."""
    delta = to_datetime(date_like) - EPOCH
    seconds = delta.days * 86400 + delta.seconds
    if delta.microseconds:
        seconds += 1
    return seconds


def from_timestamp(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def format_datetime(date_like: DateLike) -> str:
    """Format a date-like into 'YYYY-MM-DD HH:MM:SS' (UTC)."""
    return to_datetime(date_like).astimezone(timezone.utc).strftime(DATETIME_S_FMT)
