"""Raw schedule parameters as entered by a user."""

from dataclasses import dataclass
from typing import Optional, Union

from vestlib.conventions.dates import DateLike
from vestlib.conventions.types import CliffDuration, ReleaseFrequency


@dataclass(frozen=True)
class ScheduleParams:
    """Calendar-level input to the schedule builder.

    Values are kept as entered (strings, enum labels); the builder parses and
    validates them.
    """

    start_date: Optional[DateLike]
    token_amount: Optional[str]
    release_frequency: Optional[Union[ReleaseFrequency, str]] = None
    end_date: Optional[DateLike] = None
    cliff_duration: Optional[Union[CliffDuration, str]] = None
    cliff_percent: Optional[str] = None
    unit_decimals: Optional[int] = None
    token_precision: Optional[int] = None
