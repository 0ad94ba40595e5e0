from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from ..core.constants import MONEY_PRECISION

CENT = Decimal(1).scaleb(-MONEY_PRECISION)


def parse_decimal(value: Any) -> Optional[Decimal]:
    """Coerce a wire/DB value into a finite Decimal, or None if it is not numeric.

    Floats go through their shortest string form so ``0.1`` stays ``0.1``.
    Booleans are rejected even though they are ints in Python.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        d = value
    elif isinstance(value, int):
        d = Decimal(value)
    elif isinstance(value, float):
        d = Decimal(repr(value))
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        try:
            d = Decimal(s)
        except InvalidOperation:
            return None
    else:
        return None
    return d if d.is_finite() else None


def fractional_digits(value: Decimal) -> int:
    """Significant digits after the decimal point, read off the digit tuple.

    No context arithmetic: huge exponents cannot overflow and long fractions
    are never rounded away before they are counted.
    """
    _, digits, exponent = value.as_tuple()
    if not isinstance(exponent, int):
        return 0
    trailing_zeros = len(digits) - len("".join(map(str, digits)).rstrip("0"))
    if trailing_zeros == len(digits):
        return 0
    return max(0, -(exponent + trailing_zeros))


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    """Render a money amount with exactly two fractional digits."""
    return f"{quantize_money(value):.{MONEY_PRECISION}f}"
