from __future__ import annotations

from decimal import Decimal

from ..common.datetime_utils import parse_clock
from ..common.rounding import Number, round2, to_decimal
from ..core.constants import MINUTES_PER_DAY


def compute_duration(check_in: str, check_out: str) -> float:
    """Hours between two ``HH:MM`` clock values, rounded to 2 decimals.

    A check-out at or before the check-in is an overnight shift, so a full
    day is added before subtracting.
    """
    start = parse_clock(check_in)
    end = parse_clock(check_out)
    if end <= start:
        end += MINUTES_PER_DAY
    return float(round2(Decimal(end - start) / Decimal(60)))


def compute_worked_hours(check_in: str, check_out: str, break_deduction_hours: Number = 0) -> float:
    """Duration minus an unpaid break, never below zero."""
    duration = to_decimal(compute_duration(check_in, check_out))
    worked = duration - to_decimal(break_deduction_hours)
    return float(max(Decimal(0), round2(worked)))
