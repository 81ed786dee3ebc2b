"""Fixed-point token amount arithmetic.

Token amounts are integers counted in base units (``amount * 10**decimals``).
Decimal strings entered by users go through :class:`decimal.Decimal` only; no
amount ever passes through a float.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Optional, Tuple, Union

import logging

from vestlib.config import get_settings

logger = logging.getLogger(__name__)

AmountLike = Union[str, int, Decimal]


def _to_decimal(value: AmountLike) -> Decimal:
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValueError(f"Invalid amount: {value!r}") from exc
    else:
        raise TypeError(f"Unsupported amount type: {type(value)}")
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite: {value!r}")
    return amount


def _precision_for(amount: Decimal, shift: int) -> int:
    return len(amount.as_tuple().digits) + abs(amount.as_tuple().exponent) + abs(shift) + 2


def normalize_amount(text: AmountLike) -> Decimal:
    """Parse a user-entered amount, dropping thousands separators ("1,000.5")."""
    if isinstance(text, str):
        text = text.replace(",", "")
    return _to_decimal(text)


def normalize_percent(text: AmountLike) -> Decimal:
    """Parse a user-entered percentage; a trailing '%' is allowed ("20%")."""
    if isinstance(text, str):
        text = text.replace("%", "")
    return _to_decimal(text)


def decimal_places(value: AmountLike) -> int:
    """Number of significant decimal places (trailing zeros do not count)."""
    _, digits, exponent = _to_decimal(value).as_tuple()
    digits = list(digits)
    while exponent < 0 and len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    if exponent < 0 and digits == [0]:
        return 0
    return max(0, -exponent)


def parse_units(value: AmountLike, decimals: int) -> int:
    """Convert a decimal token amount into integer base units.

    Raises ``ValueError`` if ``value`` has more decimal places than ``decimals``
    since the result would not be exact.
    """
    amount = _to_decimal(value)
    if decimal_places(amount) > decimals:
        raise ValueError(
            f"Amount {value} has more than {decimals} decimal places"
        )
    with localcontext() as ctx:
        ctx.prec = _precision_for(amount, decimals)
        return int(amount.scaleb(decimals))


def format_units(amount: int, decimals: int) -> str:
    """Convert integer base units into a plain decimal string ("1000", "0.25")."""
    with localcontext() as ctx:
        ctx.prec = len(str(abs(amount))) + decimals + 2
        value = Decimal(amount).scaleb(-decimals)
    text = f"{value:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text if text not in ("", "-0") else "0"


def units_to_decimal(amount: int, decimals: int) -> Decimal:
    return Decimal(format_units(amount, decimals))


def _rescale(scaled: int, from_decimals: int, to_decimals: int) -> int:
    if to_decimals >= from_decimals:
        return scaled * 10 ** (to_decimals - from_decimals)
    return scaled // 10 ** (from_decimals - to_decimals)


def split_cliff_amount(
    total: AmountLike,
    cliff_percent: Optional[AmountLike],
    unit_decimals: int,
    token_precision: int = 5,
) -> Tuple[int, int]:
    """Split a total into ``(cliff_amount, linear_vest_amount)`` base units.

    The cliff share is floored at ``10**token_precision`` scale before being
    widened to base units; the linear part is whatever remains, so the two
    always add up to the total.
    """
    total_amount = _to_decimal(total)
    total_units = parse_units(total_amount, unit_decimals)

    cliff_scaled = 0
    if cliff_percent is not None:
        percent = _to_decimal(cliff_percent)
        with localcontext() as ctx:
            ctx.prec = _precision_for(total_amount, token_precision) + _precision_for(percent, 2)
            total_scaled = math.floor(total_amount.scaleb(token_precision))
            cliff_scaled = math.floor(Decimal(total_scaled) * percent / 100)
        cliff_scaled = max(cliff_scaled, 0)

    cliff_units = _rescale(cliff_scaled, token_precision, unit_decimals)
    linear_units = total_units - cliff_units
    logger.debug(
        "Split %s at %s%%: cliff=%s linear=%s", total, cliff_percent, cliff_units, linear_units
    )
    return cliff_units, linear_units


def format_token_amount(
    amount: int,
    unit_decimals: int = 18,
    output_decimals: Optional[int] = None,
    symbol: Optional[str] = None,
) -> str:
    """Human readable amount with thousands separators ("1,000.00 TOK").

    ``output_decimals`` defaults to the configured ``display_decimals``.
    """
    if output_decimals is None:
        output_decimals = get_settings().display_decimals
    value = units_to_decimal(amount, unit_decimals)
    with localcontext() as ctx:
        ctx.prec = len(value.as_tuple().digits) + output_decimals + 2
        rounded = value.quantize(Decimal(1).scaleb(-output_decimals), rounding=ROUND_HALF_UP)
    text = f"{rounded:,.{output_decimals}f}"
    return f"{text} {symbol}" if symbol else text
