"""
Linear interpolation for continuous vesting curves.
"""
import numpy as np

from .base import Interpolator


class LinearAmountInterpolator(Interpolator):
    """Straight line between neighbouring points, floored to whole base units.

    Matches a curve drawn as a smooth ramp through sparse points.
    """

    def interpolate(self, t: int) -> int:
        # Extrapolation
        if t < self.pillars[0] or t >= self.pillars[-1]:
            return self._extrapolate_flat(t)

        # Find surrounding points
        i = int(np.searchsorted(self.pillars, t, side='right')) - 1

        t1, t2 = int(self.pillars[i]), int(self.pillars[i + 1])
        v1, v2 = self.values[i], self.values[i + 1]
        return v1 + (v2 - v1) * (t - t1) // (t2 - t1)
