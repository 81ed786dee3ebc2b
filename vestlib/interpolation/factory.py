"""
Factory for creating interpolators by render mode.
"""
from typing import Optional, Sequence, Union

from vestlib.conventions.types import RenderMode

from .base import Interpolator
from .linear import LinearAmountInterpolator
from .step import SteppedAmountInterpolator


def create_interpolator(mode: Union[RenderMode, str],
                        pillars: Sequence[int],
                        values: Sequence[int],
                        left_value: Optional[int] = None) -> Interpolator:
    """
    Create an interpolator matching how the curve is drawn.

    Args:
        mode: Render mode (or its name)
        pillars: Point timestamps
        values: Cumulative amounts at the points
        left_value: Amount before the first point

    Returns:
        Configured interpolator
    """
    mode_upper = mode.value if isinstance(mode, RenderMode) else str(mode).upper()

    if mode_upper == RenderMode.CONTINUOUS.value:
        return LinearAmountInterpolator(pillars, values, left_value)
    elif mode_upper == RenderMode.STEPPED.value:
        return SteppedAmountInterpolator(pillars, values, left_value)
    else:
        raise ValueError(f"Unknown interpolation method: {mode}. "
                         f"Available: CONTINUOUS, STEPPED")
