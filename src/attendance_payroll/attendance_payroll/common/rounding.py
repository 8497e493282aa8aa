from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[int, float, Decimal, str]

CENTS = Decimal("0.01")
UNITS = Decimal("1")


def to_decimal(value: Number) -> Decimal:
    """Exact decimal of the value as written (floats go through ``repr``)."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round2(value: Number) -> Decimal:
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def round_units(value: Number) -> int:
    return int(to_decimal(value).quantize(UNITS, rounding=ROUND_HALF_UP))
