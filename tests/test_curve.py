from __future__ import annotations

import numpy as np
import pandas as pd

from vestlib.config import EngineSettings
from vestlib.conventions import RenderMode
from vestlib.evaluation import generate_curve, resolve_render_mode, streamed_amount
from vestlib.schedule import CurvePoint, ScheduleParams, build_schedule
from tests.conftest import DAY, JAN_1_2024, TOKEN, make_definition


def test_stepped_curve_materializes_every_tick(daily_params: ScheduleParams) -> None:
    definition = build_schedule(daily_params)
    curve = generate_curve(definition, RenderMode.STEPPED)

    assert curve.mode is RenderMode.STEPPED
    assert len(curve) == 10
    points = curve.points()
    assert points[0] == CurvePoint(JAN_1_2024, 0)
    assert [p.amount for p in points] == [i * 100 * TOKEN for i in range(10)]
    assert np.all(np.diff(curve.timestamps()) == DAY)


def test_curve_matches_evaluator_on_ticks(daily_params: ScheduleParams) -> None:
    definition = build_schedule(daily_params)
    for point in generate_curve(definition, "stepped"):
        assert streamed_amount(definition, point.timestamp) == point.amount


def test_curve_is_restartable(daily_params: ScheduleParams) -> None:
    curve = generate_curve(build_schedule(daily_params))
    assert list(curve) == list(curve)


def test_sub_daily_interval_falls_back_to_continuous() -> None:
    definition = make_definition()
    assert resolve_render_mode(definition, RenderMode.STEPPED) is RenderMode.CONTINUOUS


def test_too_many_ticks_fall_back_to_continuous(daily_params: ScheduleParams) -> None:
    settings = EngineSettings(max_curve_points=5)
    definition = build_schedule(daily_params)
    curve = generate_curve(definition, RenderMode.STEPPED, settings)

    assert curve.mode is RenderMode.CONTINUOUS
    assert len(curve) <= 5
    assert len(curve.points()) == len(curve)
    assert curve.points()[-1] == CurvePoint(definition.end_timestamp, 1000 * TOKEN)


def test_continuous_per_second_curve_is_bounded() -> None:
    span = 2 * 365 * DAY
    definition = make_definition(
        end_timestamp=1100 + span,
        release_interval_seconds=1,
        linear_vest_amount=10**24,
    )
    curve = generate_curve(definition, RenderMode.CONTINUOUS)

    assert len(curve) <= EngineSettings().max_curve_points
    points = curve.points()
    assert len(points) == len(curve)
    assert points[0] == CurvePoint(1100, 200)
    assert points[-1] == CurvePoint(definition.end_timestamp, definition.total_amount)
    amounts = [p.amount for p in points]
    assert amounts == sorted(amounts)


def test_zero_length_curve() -> None:
    definition = make_definition(end_timestamp=1100, release_interval_seconds=DAY)
    assert generate_curve(definition).points() == [CurvePoint(1100, 1200)]
    assert generate_curve(definition, RenderMode.STEPPED).points() == []


def test_stepped_interpolator(daily_params: ScheduleParams) -> None:
    definition = build_schedule(daily_params)
    interpolator = generate_curve(definition, RenderMode.STEPPED).interpolator()

    assert interpolator.interpolate(JAN_1_2024 - 1) == 0
    assert interpolator.interpolate(JAN_1_2024 + DAY + DAY // 2) == 100 * TOKEN
    assert interpolator.interpolate(definition.end_timestamp) == 1000 * TOKEN


def test_continuous_interpolator(daily_params: ScheduleParams) -> None:
    definition = build_schedule(daily_params)
    interpolator = generate_curve(definition, RenderMode.CONTINUOUS).interpolator()
    assert interpolator.interpolate(JAN_1_2024 + DAY + DAY // 2) == 150 * TOKEN


def test_to_frame(daily_params: ScheduleParams) -> None:
    definition = build_schedule(daily_params)
    frame = generate_curve(definition).to_frame()

    assert list(frame.columns) == ["timestamp", "amount", "tokens"]
    assert len(frame) == 11
    assert frame["timestamp"].iloc[0] == pd.Timestamp("2024-01-01", tz="UTC")
    assert frame["amount"].iloc[-1] == 1000 * TOKEN
    assert str(frame["tokens"].iloc[5]) == "500"


def test_unsnapped_curve_trails_evaluator_on_last_tick(cliff_params: ScheduleParams) -> None:
    definition = build_schedule(cliff_params)
    assert definition.release_count == 11
    last_tick = generate_curve(definition, RenderMode.STEPPED).points()[-1]

    assert last_tick.timestamp == definition.cliff_start_timestamp + 11 * 31 * DAY
    assert last_tick.amount == 200 * TOKEN + 800 * TOKEN * 341 // 365
    assert streamed_amount(definition, last_tick.timestamp) == 1000 * TOKEN
