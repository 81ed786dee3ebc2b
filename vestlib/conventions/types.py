"""
Basic types and enums used across the vesting engine.
"""

from enum import Enum
from typing import Optional, Union

from dateutil.relativedelta import relativedelta


class ReleaseFrequency(Enum):
    """Cadence at which the linearly vesting amount increments."""

    CONTINUOUS = "CONTINUOUS"
    EVERY_MINUTE = "EVERY_MINUTE"
    HOURLY = "HOURLY"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"

    @property
    def label(self) -> str:
        return _RELEASE_LABELS[self]

    def duration(self) -> relativedelta:
        """Calendar duration of one release interval."""
        return _RELEASE_DURATIONS[self]

    @classmethod
    def parse(cls, value: Union["ReleaseFrequency", str]) -> "ReleaseFrequency":
        """Resolve a member from itself, its name, its label or a tenor ("1D", "1M")."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Unsupported release frequency: {value!r}")

        key = _squash(value)
        for member in cls:
            if key in (_squash(member.name), _squash(member.label), _RELEASE_TENORS[member]):
                return member
        raise ValueError(f"Unknown release frequency: {value}")


def _squash(text: str) -> str:
    # "EveryMinute", "Every Minute" and "EVERY_MINUTE" compare equal
    return text.strip().upper().replace(" ", "").replace("_", "").replace("-", "")


_RELEASE_LABELS = {
    ReleaseFrequency.CONTINUOUS: "Continuous",
    ReleaseFrequency.EVERY_MINUTE: "Every Minute",
    ReleaseFrequency.HOURLY: "Hourly",
    ReleaseFrequency.DAILY: "Daily",
    ReleaseFrequency.WEEKLY: "Weekly",
    ReleaseFrequency.MONTHLY: "Monthly",
    ReleaseFrequency.YEARLY: "Yearly",
}

_RELEASE_TENORS = {
    ReleaseFrequency.CONTINUOUS: "1S",
    ReleaseFrequency.EVERY_MINUTE: "1MIN",
    ReleaseFrequency.HOURLY: "1H",
    ReleaseFrequency.DAILY: "1D",
    ReleaseFrequency.WEEKLY: "1W",
    ReleaseFrequency.MONTHLY: "1M",
    ReleaseFrequency.YEARLY: "1Y",
}

_RELEASE_DURATIONS = {
    ReleaseFrequency.CONTINUOUS: relativedelta(seconds=1),
    ReleaseFrequency.EVERY_MINUTE: relativedelta(minutes=1),
    ReleaseFrequency.HOURLY: relativedelta(hours=1),
    ReleaseFrequency.DAILY: relativedelta(days=1),
    ReleaseFrequency.WEEKLY: relativedelta(weeks=1),
    ReleaseFrequency.MONTHLY: relativedelta(months=1),
    ReleaseFrequency.YEARLY: relativedelta(years=1),
}


class CliffDuration(Enum):
    """Cliff periods offered after the schedule start. "No cliff" is ``None``."""

    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    EIGHTEEN_MONTHS = "18M"
    TWO_YEARS = "2Y"

    def months(self) -> int:
        t = self.value
        if t.endswith("Y"):
            return int(t[:-1]) * 12
        return int(t[:-1])

    def duration(self) -> relativedelta:
        return relativedelta(months=self.months())

    @classmethod
    def parse(
        cls, value: Union["CliffDuration", str, None]
    ) -> Optional["CliffDuration"]:
        """Resolve a member from itself, its name or its tenor; "none"/empty means no cliff."""
        if value is None or isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Unsupported cliff duration: {value!r}")

        key = value.strip().upper()
        if key in ("", "NONE", "NO CLIFF", "NO_CLIFF"):
            return None
        if key in cls.__members__:
            return cls[key]
        # "12M" and "1Y" describe the same cliff
        for member in cls:
            if key == member.value or _tenor_months(key) == member.months():
                return member
        raise ValueError(f"Unknown cliff duration: {value}")


def _tenor_months(tenor: str) -> Optional[int]:
    try:
        if tenor.endswith("MO"):
            return int(tenor[:-2])
        if tenor.endswith("M"):
            return int(tenor[:-1])
        if tenor.endswith("Y"):
            return int(tenor[:-1]) * 12
    except ValueError:
        return None
    return None


class RenderMode(Enum):
    """How a caller draws the vesting curve."""

    CONTINUOUS = "CONTINUOUS"
    STEPPED = "STEPPED"
