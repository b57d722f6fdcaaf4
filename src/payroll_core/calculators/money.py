"""Decimal conversion and output rounding.

Rounding:
- Currency to 2 decimals, half away from zero, at output boundaries only
- Intermediate products keep full Decimal precision
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")
OUTPUT_PRECISION = Decimal("0.01")


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(amount: Number) -> Decimal:
    """Round amount to 2 decimal places (cents), half away from zero.

    Decimal's ROUND_HALF_UP rounds ties away from zero for negative
    amounts too, so -0.125 becomes -0.13.
    """
    return to_decimal(amount).quantize(OUTPUT_PRECISION, rounding=ROUND_HALF_UP)


def round_hours(hours: Number) -> Decimal:
    """Round an hour figure to 2 decimal places."""
    return round_money(hours)
