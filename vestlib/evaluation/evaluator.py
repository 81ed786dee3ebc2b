"""Point-in-time evaluation of a vesting schedule."""

from __future__ import annotations

import logging

from vestlib.schedule.core import CalculatedClaimSnapshot, ScheduleDefinition

logger = logging.getLogger(__name__)


def _effective_time(definition: ScheduleDefinition, timestamp: int) -> int:
    if definition.revoked_timestamp is not None:
        return min(timestamp, definition.revoked_timestamp)
    return timestamp


def streamed_amount(definition: ScheduleDefinition, timestamp: int) -> int:
    """Cumulative amount vested at ``timestamp``.

    Nothing vests before the cliff start and everything has vested at the end.
    In between, the cliff lump sum plus the linear amount scaled by the whole
    release intervals elapsed; the amount is flat between interval boundaries.
    A revoked schedule stops accruing at its revocation time.
    """
    t = _effective_time(definition, timestamp)

    if t < definition.cliff_start_timestamp:
        return 0
    if t >= definition.end_timestamp:
        return definition.total_amount

    cliff_part = 0
    if definition.cliff_release_timestamp is not None and t >= definition.cliff_release_timestamp:
        cliff_part = definition.cliff_amount

    releases = definition.release_count
    if releases == 0:
        # end falls inside the first interval; the linear part unlocks at the end
        return cliff_part

    elapsed = (t - definition.cliff_start_timestamp) // definition.release_interval_seconds
    linear_part = min(
        definition.linear_vest_amount * elapsed // releases,
        definition.linear_vest_amount,
    )
    return cliff_part + linear_part


def amount_at(definition: ScheduleDefinition, timestamp: int) -> CalculatedClaimSnapshot:
    """Snapshot of streamed, withdrawn and withdrawable amounts at ``timestamp``."""
    streamed = streamed_amount(definition, timestamp)
    withdrawn = definition.amount_withdrawn
    can_withdraw = max(streamed - withdrawn, 0)

    if not definition.is_active and definition.revoked_timestamp is None:
        logger.warning(
            "Schedule is inactive without a revocation time; reporting nothing withdrawable"
        )
        can_withdraw = 0

    full_vest = definition.end_timestamp
    if definition.revoked_timestamp is not None:
        full_vest = min(full_vest, definition.revoked_timestamp)

    return CalculatedClaimSnapshot(
        query_timestamp=timestamp,
        streamed_amount=streamed,
        withdrawn_amount=withdrawn,
        total_planned_vested_amount=streamed_amount(definition, definition.end_timestamp),
        can_withdraw_amount=can_withdraw,
        full_amount_vested_timestamp=full_vest,
    )
