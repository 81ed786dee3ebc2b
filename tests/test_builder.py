from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from vestlib.conventions import ReleaseFrequency
from vestlib.evaluation import streamed_amount
from vestlib.schedule import (
    ScheduleParams,
    build_schedule,
    calculate_schedule_definition,
    release_interval_seconds,
    snap_end_timestamp,
)
from tests.conftest import APR_1_2024, DAY, JAN_1_2024, TOKEN, WEEK

JAN_1 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_daily_schedule_without_cliff(daily_params: ScheduleParams) -> None:
    definition = build_schedule(daily_params)

    assert definition.start_timestamp == JAN_1_2024
    assert definition.cliff_start_timestamp == JAN_1_2024
    assert definition.end_timestamp == JAN_1_2024 + 10 * DAY
    assert definition.cliff_release_timestamp is None
    assert definition.release_interval_seconds == DAY
    assert definition.cliff_amount == 0
    assert definition.linear_vest_amount == 1000 * TOKEN
    assert streamed_amount(definition, JAN_1_2024 + 5 * DAY) == 500 * TOKEN


def test_cliff_schedule(cliff_params: ScheduleParams) -> None:
    definition = build_schedule(cliff_params)

    assert definition.start_timestamp == JAN_1_2024
    assert definition.cliff_start_timestamp == APR_1_2024
    assert definition.cliff_release_timestamp == APR_1_2024
    assert definition.cliff_amount == 200 * TOKEN
    assert definition.linear_vest_amount == 800 * TOKEN
    assert streamed_amount(definition, APR_1_2024 - 1) == 0
    assert streamed_amount(definition, APR_1_2024) == 200 * TOKEN


def test_amounts_are_conserved() -> None:
    params = ScheduleParams(
        start_date="2024-01-01",
        end_date="2024-07-01",
        token_amount="1,234.567",
        release_frequency="Weekly",
        cliff_duration="1M",
        cliff_percent="33.33",
    )
    definition = build_schedule(params)
    assert definition.cliff_amount + definition.linear_vest_amount == 1234567 * 10**15


@pytest.mark.parametrize("drift", [100, -100, 30, -1])
def test_end_snaps_to_interval_boundary(drift: int) -> None:
    end = JAN_1 + timedelta(weeks=10, seconds=drift)
    params = ScheduleParams(
        start_date=JAN_1,
        end_date=end,
        token_amount="10",
        release_frequency="Weekly",
    )
    assert build_schedule(params).end_timestamp == JAN_1_2024 + 10 * WEEK


def test_end_outside_tolerance_is_kept() -> None:
    end = JAN_1 + timedelta(weeks=10, seconds=101)
    params = ScheduleParams(
        start_date=JAN_1,
        end_date=end,
        token_amount="10",
        release_frequency="Weekly",
    )
    assert build_schedule(params).end_timestamp == JAN_1_2024 + 10 * WEEK + 101


def test_snap_end_timestamp() -> None:
    month = 31 * DAY
    # at least one interval
    assert snap_end_timestamp(0, 50, DAY) == DAY
    assert snap_end_timestamp(0, 3 * DAY + 5000, DAY) == 3 * DAY + 5000
    # relative tolerance: 0.01% of a 31-day month is 267.84s
    assert snap_end_timestamp(0, 2 * month + 250, month) == 2 * month
    assert snap_end_timestamp(0, 2 * month + 300, month) == 2 * month + 300
    assert snap_end_timestamp(100, 100, DAY) == 100


def test_snap_uses_configured_tolerance() -> None:
    assert snap_end_timestamp(0, 3 * DAY + 500, DAY, tolerance_seconds=600) == 3 * DAY
    assert snap_end_timestamp(0, 3 * DAY + 50, DAY, tolerance_seconds=0, tolerance_fraction=0) == 3 * DAY + 50


def test_release_interval_seconds() -> None:
    assert release_interval_seconds(ReleaseFrequency.CONTINUOUS) == 1
    assert release_interval_seconds(ReleaseFrequency.EVERY_MINUTE) == 60
    assert release_interval_seconds(ReleaseFrequency.HOURLY) == 3600
    assert release_interval_seconds(ReleaseFrequency.MONTHLY) == 31 * DAY
    assert release_interval_seconds(ReleaseFrequency.YEARLY) == 365 * DAY


def test_build_is_idempotent(cliff_params: ScheduleParams) -> None:
    first = build_schedule(cliff_params)
    second = build_schedule(cliff_params)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_unit_decimals_override() -> None:
    params = ScheduleParams(
        start_date="2024-01-01",
        end_date="2024-01-02",
        token_amount="1.5",
        release_frequency="Hourly",
        unit_decimals=6,
    )
    definition = build_schedule(params)
    assert definition.linear_vest_amount == 1_500_000
    assert definition.unit_decimals == 6


def test_calculate_schedule_definition() -> None:
    cliff_start = JAN_1 + timedelta(days=30)
    definition = calculate_schedule_definition(
        start_time=JAN_1,
        cliff_start_time=cliff_start,
        end_time=cliff_start + timedelta(days=7),
        release_frequency=ReleaseFrequency.DAILY,
        cliff_amount=5,
        linear_vest_amount=70,
        unit_decimals=0,
    )
    assert definition.cliff_start_timestamp == JAN_1_2024 + 30 * DAY
    assert definition.cliff_release_timestamp == definition.cliff_start_timestamp
    assert definition.end_timestamp == definition.cliff_start_timestamp + 7 * DAY
    assert definition.total_amount == 75
