"""
Base class for vesting curve interpolation.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import numpy as np


class Interpolator(ABC):
    """Reads a cumulative amount at any instant from sparse curve points.

    Pillars are integer timestamps and values integer base-unit amounts. Values
    stay Python ints since token amounts overflow 64-bit integers.
    """

    def __init__(
        self,
        pillars: Sequence[int],
        values: Sequence[int],
        left_value: Optional[int] = None,
    ):
        """
        Initialize interpolator.

        Args:
            pillars: Timestamps of the curve points
            values: Cumulative amounts at the pillars
            left_value: Amount before the first pillar (defaults to the first value)
        """
        if len(pillars) != len(values):
            raise ValueError("Pillars and values must have same length")
        if len(pillars) < 1:
            raise ValueError("Need at least 1 point for interpolation")

        # Sort by pillars
        sorted_pairs = sorted(zip(pillars, values, strict=True))
        self.pillars = np.array([int(p[0]) for p in sorted_pairs], dtype=np.int64)
        self.values: List[int] = [int(p[1]) for p in sorted_pairs]
        self.left_value = self.values[0] if left_value is None else left_value

        # Check for duplicates
        if len(np.unique(self.pillars)) != len(self.pillars):
            raise ValueError("Duplicate pillar timestamps not allowed")

    @abstractmethod
    def interpolate(self, t: int) -> int:
        """Interpolate amount at timestamp t."""
        pass

    def interpolate_many(self, times: Sequence[int]) -> List[int]:
        """Interpolate amounts at multiple timestamps."""
        return [self.interpolate(t) for t in times]

    def _extrapolate_flat(self, t: int) -> int:
        """Flat extrapolation beyond pillar range."""
        if t < self.pillars[0]:
            return self.left_value
        elif t >= self.pillars[-1]:
            return self.values[-1]
        else:
            raise ValueError("Time is within pillar range, use interpolation")
