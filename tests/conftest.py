from __future__ import annotations

from datetime import datetime, timezone

import pytest

from vestlib.config import EngineSettings
from vestlib.schedule import ScheduleDefinition, ScheduleParams

DAY = 86400
WEEK = 7 * DAY
JAN_1_2024 = int(datetime(2024, 1, 1, tzinfo=timezone.utc).timestamp())
APR_1_2024 = int(datetime(2024, 4, 1, tzinfo=timezone.utc).timestamp())
TOKEN = 10**18


@pytest.fixture
def settings() -> EngineSettings:
    return EngineSettings()


@pytest.fixture
def daily_params() -> ScheduleParams:
    return ScheduleParams(
        start_date="2024-01-01",
        end_date="2024-01-11",
        token_amount="1000",
        release_frequency="Daily",
    )


@pytest.fixture
def cliff_params() -> ScheduleParams:
    return ScheduleParams(
        start_date="2024-01-01",
        end_date="2025-04-01",
        token_amount="1000",
        release_frequency="Monthly",
        cliff_duration="3M",
        cliff_percent="20%",
    )


def make_definition(**overrides) -> ScheduleDefinition:
    values = dict(
        start_timestamp=1000,
        cliff_start_timestamp=1100,
        end_timestamp=2100,
        cliff_release_timestamp=1100,
        release_interval_seconds=100,
        linear_vest_amount=1000,
        cliff_amount=200,
    )
    values.update(overrides)
    return ScheduleDefinition(**values)


@pytest.fixture
def definition() -> ScheduleDefinition:
    return make_definition()
