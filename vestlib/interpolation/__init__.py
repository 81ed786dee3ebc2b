"""
Interpolation of vesting curves.

Reads the cumulative amount at any instant from the sparse points a curve
materializes, either as a ramp (continuous) or as flat steps (stepped).
"""

# Base classes
from .base import Interpolator

# Factory
from .factory import create_interpolator

# Interpolation methods
from .linear import LinearAmountInterpolator
from .step import SteppedAmountInterpolator

__all__ = [
    # Base classes
    'Interpolator',

    # Interpolation methods
    'LinearAmountInterpolator',
    'SteppedAmountInterpolator',

    # Factory
    'create_interpolator',
]
