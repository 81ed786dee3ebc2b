"""
Discretized vesting curves for charting.
"""

import logging
from typing import Iterator, List, Optional, Union

import numpy as np
import pandas as pd

from vestlib.amounts import units_to_decimal
from vestlib.config import EngineSettings, get_settings
from vestlib.conventions.dates import from_timestamp
from vestlib.conventions.types import RenderMode
from vestlib.interpolation import Interpolator, create_interpolator
from vestlib.schedule.core import CurvePoint, ScheduleDefinition

logger = logging.getLogger(__name__)


def resolve_render_mode(
    definition: ScheduleDefinition,
    requested: Union[RenderMode, str] = RenderMode.CONTINUOUS,
    settings: Optional[EngineSettings] = None,
) -> RenderMode:
    """Render mode actually used for ``definition``.

    A stepped curve needs every tick materialized, so it is only granted for
    intervals of at least a day and at most ``max_curve_points`` ticks.
    """
    settings = settings or get_settings()
    mode = requested if isinstance(requested, RenderMode) else RenderMode(str(requested).upper())
    if mode is RenderMode.CONTINUOUS:
        return mode

    if definition.release_interval_seconds < settings.stepped_min_interval_seconds:
        logger.debug(
            "Interval %ss is below %ss; drawing continuous curve",
            definition.release_interval_seconds,
            settings.stepped_min_interval_seconds,
        )
        return RenderMode.CONTINUOUS
    if definition.tick_count > settings.max_curve_points:
        logger.warning(
            "Stepped curve would need %s points (limit %s); falling back to continuous",
            definition.tick_count,
            settings.max_curve_points,
        )
        return RenderMode.CONTINUOUS
    return RenderMode.STEPPED


class VestingCurve:
    """Lazy, finite sequence of (timestamp, cumulative amount) points.

    Ticks sit at ``cliff_start + i * interval`` and carry the cliff amount plus
    the linear amount in proportion to elapsed time. A stepped curve yields every
    tick; a continuous curve yields every ``stride``-th tick followed by the
    terminal point ``(end, total)``. Iterating again restarts the sequence.

    Tick amounts scale with ``elapsed / linear_duration`` rather than whole
    releases over ``release_count``. When the end was not snapped onto an
    interval boundary the two differ, and a tick can sit below
    :func:`~vestlib.evaluation.streamed_amount` at the same instant (a monthly
    schedule ending 2025-04-01 draws 947.39 at its last tick where the
    evaluator already reports 1000). Use the evaluator for claimable amounts.
    """

    def __init__(
        self,
        definition: ScheduleDefinition,
        mode: RenderMode,
        max_points: int,
    ):
        self.definition = definition
        self.mode = mode
        self.ticks = definition.tick_count
        if mode is RenderMode.STEPPED:
            self.stride = 1
        else:
            # leave room for the terminal point
            self.stride = max(1, -(-self.ticks // max(max_points - 1, 1)))

    def _tick_point(self, i: int) -> CurvePoint:
        d = self.definition
        elapsed = i * d.release_interval_seconds
        return CurvePoint(
            timestamp=d.cliff_start_timestamp + elapsed,
            amount=d.cliff_amount + d.linear_vest_amount * elapsed // d.linear_duration_seconds,
        )

    @property
    def terminal_point(self) -> CurvePoint:
        return CurvePoint(self.definition.end_timestamp, self.definition.total_amount)

    def __iter__(self) -> Iterator[CurvePoint]:
        for i in range(0, self.ticks, self.stride):
            yield self._tick_point(i)
        if self.mode is RenderMode.CONTINUOUS:
            yield self.terminal_point

    def __len__(self) -> int:
        sampled = -(-self.ticks // self.stride)
        return sampled + 1 if self.mode is RenderMode.CONTINUOUS else sampled

    def points(self) -> List[CurvePoint]:
        return list(self)

    def timestamps(self) -> np.ndarray:
        return np.fromiter((p.timestamp for p in self), dtype=np.int64, count=len(self))

    def amounts(self) -> List[int]:
        return [p.amount for p in self]

    def interpolator(self) -> Interpolator:
        """Interpolator reading the drawn curve at any instant.

        It follows the drawn points, so between an unsnapped schedule's last
        tick and its end it can trail ``streamed_amount``.
        """
        points = self.points()
        if not points or points[-1].timestamp != self.definition.end_timestamp:
            points.append(self.terminal_point)
        return create_interpolator(
            self.mode,
            [p.timestamp for p in points],
            [p.amount for p in points],
            left_value=0,
        )

    def to_frame(self) -> pd.DataFrame:
        """Curve as a DataFrame with UTC datetimes, base units and token amounts."""
        points = self.points()
        decimals = self.definition.unit_decimals
        return pd.DataFrame(
            {
                "timestamp": pd.to_datetime([from_timestamp(p.timestamp) for p in points], utc=True),
                "amount": pd.Series([p.amount for p in points], dtype=object),
                "tokens": [units_to_decimal(p.amount, decimals) for p in points],
            }
        )

    def __repr__(self) -> str:
        return f"VestingCurve(mode={self.mode.value}, points={len(self)})"


def generate_curve(
    definition: ScheduleDefinition,
    render_mode: Union[RenderMode, str] = RenderMode.CONTINUOUS,
    settings: Optional[EngineSettings] = None,
) -> VestingCurve:
    """Build the curve of ``definition`` in the requested (or fallback) mode."""
    settings = settings or get_settings()
    mode = resolve_render_mode(definition, render_mode, settings)
    curve = VestingCurve(definition, mode, settings.max_curve_points)
    logger.debug("Generated %r", curve)
    return curve
