"""
Core data structures for vesting schedules.
"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, NamedTuple, Optional

from vestlib.errors import ComputationError


class CurvePoint(NamedTuple):
    """A (timestamp, cumulative amount) point of a vesting curve."""

    timestamp: int
    amount: int


@dataclass(frozen=True)
class ScheduleDefinition:
    """Canonical vesting schedule in absolute timestamps and base-unit amounts.

    Timestamps are whole seconds since the epoch. Amounts are integers counted
    in the token's smallest unit. A definition is never mutated; ``revoke`` and
    ``with_withdrawn`` return new instances.
    """

    start_timestamp: int
    cliff_start_timestamp: int
    end_timestamp: int
    cliff_release_timestamp: Optional[int]
    release_interval_seconds: int
    linear_vest_amount: int
    cliff_amount: int
    amount_withdrawn: int = 0
    is_active: bool = True
    revoked_timestamp: Optional[int] = None
    unit_decimals: int = 18

    def __post_init__(self):
        if self.release_interval_seconds <= 0:
            raise ComputationError(
                f"Release interval must be positive: {self.release_interval_seconds}"
            )
        if not (self.start_timestamp <= self.cliff_start_timestamp <= self.end_timestamp):
            raise ComputationError(
                "Expected start <= cliff start <= end, got "
                f"{self.start_timestamp}, {self.cliff_start_timestamp}, {self.end_timestamp}"
            )
        if (
            self.cliff_release_timestamp is not None
            and self.cliff_release_timestamp != self.cliff_start_timestamp
        ):
            raise ComputationError("Cliff must be released when linear vesting starts")
        if self.linear_vest_amount < 0 or self.cliff_amount < 0:
            raise ComputationError("Vesting amounts cannot be negative")
        if self.amount_withdrawn < 0:
            raise ComputationError("Withdrawn amount cannot be negative")

    @property
    def total_amount(self) -> int:
        return self.cliff_amount + self.linear_vest_amount

    @property
    def linear_duration_seconds(self) -> int:
        """Seconds between the start of linear vesting and the full vest."""
        return self.end_timestamp - self.cliff_start_timestamp

    @property
    def release_count(self) -> int:
        """Whole release intervals between cliff start and end."""
        return self.linear_duration_seconds // self.release_interval_seconds

    @property
    def tick_count(self) -> int:
        """Release ticks including a trailing partial interval."""
        return -(-self.linear_duration_seconds // self.release_interval_seconds)

    def with_withdrawn(self, amount_withdrawn: int) -> "ScheduleDefinition":
        return replace(self, amount_withdrawn=amount_withdrawn)

    def revoke(self, at: int) -> "ScheduleDefinition":
        """Return a revoked copy whose accrual freezes at ``at``."""
        return replace(self, is_active=False, revoked_timestamp=at)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with integer timestamps and decimal-string amounts."""
        data = asdict(self)
        for key in ("linear_vest_amount", "cliff_amount", "amount_withdrawn"):
            data[key] = str(data[key])
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScheduleDefinition":
        cliff_release = data.get("cliff_release_timestamp")
        revoked = data.get("revoked_timestamp")
        return cls(
            start_timestamp=int(data["start_timestamp"]),
            cliff_start_timestamp=int(data["cliff_start_timestamp"]),
            end_timestamp=int(data["end_timestamp"]),
            # 0 is how "no cliff release" travels over the wire
            cliff_release_timestamp=int(cliff_release) if cliff_release else None,
            release_interval_seconds=int(data["release_interval_seconds"]),
            linear_vest_amount=int(data["linear_vest_amount"]),
            cliff_amount=int(data["cliff_amount"]),
            amount_withdrawn=int(data.get("amount_withdrawn", 0) or 0),
            is_active=bool(data.get("is_active", True)),
            revoked_timestamp=int(revoked) if revoked is not None else None,
            unit_decimals=int(data.get("unit_decimals", 18)),
        )


@dataclass(frozen=True)
class CalculatedClaimSnapshot:
    """Amounts of a schedule as seen at one instant."""

    query_timestamp: int
    streamed_amount: int
    withdrawn_amount: int
    total_planned_vested_amount: int
    can_withdraw_amount: int
    full_amount_vested_timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for key in (
            "streamed_amount",
            "withdrawn_amount",
            "total_planned_vested_amount",
            "can_withdraw_amount",
        ):
            data[key] = str(data[key])
        return data
