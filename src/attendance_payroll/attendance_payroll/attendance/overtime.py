from __future__ import annotations

from decimal import Decimal

from ..common.rounding import Number, round2, to_decimal
from ..core.constants import DEFAULT_FIXED_OT_THRESHOLD_HOURS
from ..core.enums import OvertimeThresholdPolicy
from ..employees.model import Employee


def compute_overtime(worked_hours: Number, daily_threshold: Number) -> float:
    """Hours worked beyond the daily threshold, rounded to 2 decimals."""
    extra = to_decimal(worked_hours) - to_decimal(daily_threshold)
    return float(max(Decimal(0), round2(extra)))


def resolve_ot_threshold(
    employee: Employee,
    policy: OvertimeThresholdPolicy = OvertimeThresholdPolicy.EMPLOYEE_SHIFT,
    *,
    fixed_hours: float = DEFAULT_FIXED_OT_THRESHOLD_HOURS,
) -> float:
    if OvertimeThresholdPolicy(policy) == OvertimeThresholdPolicy.FIXED:
        return float(fixed_hours)
    return float(employee.daily_work_hours)
