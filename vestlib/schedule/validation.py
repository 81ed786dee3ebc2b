"""
Validation of raw schedule parameters.

Each field gets at most one message; the first failing rule for a field wins.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Dict, Optional

from vestlib.amounts import decimal_places, normalize_amount, normalize_percent
from vestlib.config import EngineSettings, get_settings
from vestlib.conventions.dates import format_datetime, to_datetime
from vestlib.conventions.durations import add_duration
from vestlib.conventions.types import CliffDuration, ReleaseFrequency

from .params import ScheduleParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedParams:
    """Parsed form of :class:`ScheduleParams`; unparseable values are ``None``."""

    start: Optional[datetime]
    end: Optional[datetime]
    end_given: bool
    release_frequency: Optional[ReleaseFrequency]
    cliff_duration: Optional[CliffDuration]
    total_amount: Optional[Decimal]
    cliff_percent: Optional[Decimal]
    unit_decimals: int
    token_precision: int

    @property
    def cliff_start(self) -> Optional[datetime]:
        """Start of linear vesting: the schedule start pushed back by the cliff."""
        if self.start is None:
            return None
        if self.cliff_duration is None:
            return self.start
        try:
            return add_duration(self.start, self.cliff_duration.duration())
        except (ValueError, OverflowError):
            # cliff end lies past the last representable date
            return None

    def scaled_amounts(self):
        """Total and cliff amounts at ``10**token_precision`` scale, or ``None``."""
        if self.total_amount is None:
            return None, None
        total_scaled = math.floor(self.total_amount.scaleb(self.token_precision))
        if self.cliff_duration is None:
            return total_scaled, 0
        if self.cliff_percent is None:
            return total_scaled, None
        return total_scaled, math.floor(Decimal(total_scaled) * self.cliff_percent / 100)


def _parse_date(value) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return to_datetime(value)
    except (ValueError, OverflowError):
        return None


def _parse_amount(value, parse) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        return parse(value)
    except ValueError:
        return None


def resolve_params(
    params: ScheduleParams, settings: Optional[EngineSettings] = None
) -> ResolvedParams:
    """Parse raw parameters without judging them."""
    settings = settings or get_settings()
    end_given = params.end_date is not None and str(params.end_date).strip() != ""
    frequency = params.release_frequency
    return ResolvedParams(
        start=_parse_date(params.start_date),
        end=_parse_date(params.end_date) if end_given else None,
        end_given=end_given,
        release_frequency=ReleaseFrequency.parse(frequency) if frequency else None,
        cliff_duration=CliffDuration.parse(params.cliff_duration),
        total_amount=_parse_amount(params.token_amount, normalize_amount),
        cliff_percent=_parse_amount(params.cliff_percent, normalize_percent),
        unit_decimals=(
            params.unit_decimals if params.unit_decimals is not None else settings.unit_decimals
        ),
        token_precision=(
            params.token_precision
            if params.token_precision is not None
            else settings.token_precision
        ),
    )


def collect_errors(
    resolved: ResolvedParams, settings: Optional[EngineSettings] = None
) -> Dict[str, str]:
    """Return field-keyed messages for everything wrong with ``resolved``."""
    settings = settings or get_settings()
    errors: Dict[str, str] = {}

    if resolved.start is None:
        errors["start_date"] = "Start date must be set."
    elif resolved.cliff_start is None:
        errors["start_date"] = "Start date is too late for the selected cliff."

    if resolved.release_frequency is None:
        errors["release_frequency"] = "Release frequency must be set."
    elif not resolved.end_given:
        # Don't error on end_date if already errored on release_frequency
        errors["end_date"] = "End date must be set."

    total_scaled, cliff_scaled = resolved.scaled_amounts()
    if total_scaled is None or not resolved.total_amount > 0:
        errors["token_amount"] = "Tokens must be assigned to the schedule."
    elif decimal_places(resolved.total_amount) > settings.amount_decimal_places:
        errors["token_amount"] = "Amount can't have more than three decimal places."
    elif decimal_places(resolved.total_amount) > resolved.unit_decimals:
        errors["token_amount"] = "Amount has more decimal places than the token supports."

    if resolved.cliff_duration is not None:
        percent = resolved.cliff_percent
        if cliff_scaled is None or not cliff_scaled > 0:
            errors["cliff_percent"] = "If using cliff, cliff percent must be set."
        elif decimal_places(percent) > settings.percent_decimal_places:
            errors["cliff_percent"] = "Cliff cannot have more than two decimal places."
        elif percent >= 100:
            errors["cliff_percent"] = "Cliff cannot be more than 100%."

    cliff_start = resolved.cliff_start
    if cliff_start is not None and resolved.release_frequency is not None:
        end = resolved.end
        if end is not None and end < cliff_start:
            if resolved.cliff_duration is not None:
                message = (
                    "Linear vesting end date must be after the start date. "
                    f"Linear vesting starts at {format_datetime(cliff_start)} "
                    "because of the cliff."
                )
            else:
                message = "End date must be after the start date."
            errors["end_date"] = errors["start_date"] = message
        elif end is not None and end < resolved.start:
            errors["end_date"] = errors["start_date"] = "End date must be after the start date."

    if resolved.end_given and resolved.end is None:
        errors["end_date"] = "Invalid end date."

    if errors:
        logger.debug("Schedule parameters rejected: %s", errors)
    return errors


def validate_schedule(
    params: ScheduleParams, settings: Optional[EngineSettings] = None
) -> Dict[str, str]:
    """Validate raw parameters; an empty mapping means the schedule can be built."""
    return collect_errors(resolve_params(params, settings), settings)
