"""
Step interpolation for stepped vesting curves.
"""
import numpy as np

from .base import Interpolator


class SteppedAmountInterpolator(Interpolator):
    """Piecewise constant amounts.

    The amount jumps at each point and stays flat until the next one, which is
    how a release frequency unlocks tokens.
    """

    def interpolate(self, t: int) -> int:
        if t < self.pillars[0] or t >= self.pillars[-1]:
            return self._extrapolate_flat(t)

        # Find the interval and return left endpoint value
        i = int(np.searchsorted(self.pillars, t, side='right')) - 1
        return self.values[i]
