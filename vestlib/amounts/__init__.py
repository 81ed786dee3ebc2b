"""Fixed-point token amount helpers."""

from .fixed_point import (
    decimal_places,
    format_token_amount,
    format_units,
    normalize_amount,
    normalize_percent,
    parse_units,
    split_cliff_amount,
    units_to_decimal,
)

__all__ = [
    'decimal_places',
    'format_token_amount',
    'format_units',
    'normalize_amount',
    'normalize_percent',
    'parse_units',
    'split_cliff_amount',
    'units_to_decimal',
]
