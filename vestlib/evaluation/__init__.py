"""
Schedule evaluation: amounts at an instant and curves over the schedule.
"""

from .curve import VestingCurve, generate_curve, resolve_render_mode
from .evaluator import amount_at, streamed_amount

__all__ = [
    'VestingCurve',
    'amount_at',
    'generate_curve',
    'resolve_render_mode',
    'streamed_amount',
]
