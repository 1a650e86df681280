"""
Decimal helpers for money values.

All prices are two-decimal amounts. Floats are never accepted directly since
their binary value would leak into the decimal; pass strings or ints.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

MoneyLike = Union[Decimal, str, int]


def to_money(value: MoneyLike) -> Decimal:
    """
    Convert a value to a Decimal rounded to whole cents.

    Args:
        value: Decimal, numeric string or int

    Returns:
        Decimal quantized to two places (ROUND_HALF_UP)

    Raises:
        TypeError: If value is a float
    """
    if isinstance(value, float):
        raise TypeError("Money values must not be floats; use a string or Decimal")
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[MoneyLike]) -> Decimal:
    """Sum money values exactly and round the result to cents."""
    total = ZERO
    for value in values:
        total += Decimal(value)
    return to_money(total)


def format_amount(value: MoneyLike) -> str:
    """Render an amount as a plain two-decimal string, e.g. '0.98'."""
    return f"{to_money(value):.2f}"
