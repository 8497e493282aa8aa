from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..common.rounding import round2, round_units, to_decimal
from ..common.validators import require_positive, require_status
from ..core.constants import DEFAULT_HOURLY_BASE_DIVISOR, FULL_DAY_DEDUCTION, HALF_DAY_DEDUCTION
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee, validate_employee
from .model import PayrollSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayEffect:
    """How one day of a given status counts toward payroll."""

    present: int = 0
    half: int = 0
    absent: int = 0
    paid_leave: int = 0
    paid_off: int = 0
    deduction_days: Decimal = Decimal(0)
    accrues_ot: bool = False


_PAID_LEAVE = DayEffect(paid_leave=1)
_PAID_OFF = DayEffect(paid_off=1)
_UNPAID = DayEffect(absent=1, deduction_days=Decimal(FULL_DAY_DEDUCTION))

DAY_EFFECTS: dict[AttendanceStatus, DayEffect] = {
    AttendanceStatus.DUTY: DayEffect(present=1, accrues_ot=True),
    AttendanceStatus.HALF_DAY: DayEffect(half=1, deduction_days=Decimal(HALF_DAY_DEDUCTION), accrues_ot=True),
    AttendanceStatus.ABSENT: _UNPAID,
    AttendanceStatus.UNPAID: _UNPAID,
    AttendanceStatus.SL: _PAID_LEAVE,
    AttendanceStatus.PL: _PAID_LEAVE,
    AttendanceStatus.CL: _PAID_LEAVE,
    AttendanceStatus.HOLIDAY: _PAID_OFF,
    AttendanceStatus.WEEKLY_OFF: _PAID_OFF,
}


def day_effect(record: AttendanceRecord) -> DayEffect:
    return DAY_EFFECTS[require_status(record.status)]


def _ot_hours(record: AttendanceRecord) -> Decimal:
    if not record.ot_hours:
        return Decimal(0)
    hours = to_decimal(record.ot_hours)
    if hours < 0:
        raise ValidationError(f"Negative ot_hours on {record.date.isoformat()}: {record.ot_hours}")
    return hours


def aggregate_payroll(
    records: Iterable[AttendanceRecord],
    employee: Employee,
    *,
    hourly_base_divisor: int = DEFAULT_HOURLY_BASE_DIVISOR,
) -> PayrollSummary:
    """Fold one employee's records for one period into a PayrollSummary.

    The caller restricts ``records`` to the billing period. Every status is
    classified; an unknown one raises UnknownStatusError. Sums are exact
    decimals so the result does not depend on record order.
    """
    validate_employee(employee)
    require_positive(hourly_base_divisor, "hourly_base_divisor")

    present = half = absent = paid_leave = paid_off = 0
    deduction_days = Decimal(0)
    ot_hours = Decimal(0)

    for r in records:
        effect = day_effect(r)
        present += effect.present
        half += effect.half
        absent += effect.absent
        paid_leave += effect.paid_leave
        paid_off += effect.paid_off
        deduction_days += effect.deduction_days
        if effect.accrues_ot:
            ot_hours += _ot_hours(r)

    monthly_salary = to_decimal(employee.monthly_salary)
    daily_salary = monthly_salary / to_decimal(employee.working_days_per_month)
    hourly_base = daily_salary / to_decimal(hourly_base_divisor)
    ot_rate = round2(to_decimal(employee.ot_rate) if employee.ot_rate > 0 else hourly_base)

    total_ot_hours = round2(ot_hours)
    deductions = round2(deduction_days * daily_salary)
    ot_earnings = round2(total_ot_hours * ot_rate)
    net_salary = max(0, round_units(monthly_salary - deductions + ot_earnings))

    logger.debug(
        "payroll employee=%s present=%d half=%d absent=%d ot=%s net=%d",
        employee.employee_id,
        present,
        half,
        absent,
        total_ot_hours,
        net_salary,
    )

    return PayrollSummary(
        present_days=present,
        half_days=half,
        absent_days=absent,
        paid_leave_days=paid_leave,
        paid_off_days=paid_off,
        deduction_days=float(deduction_days),
        total_ot_hours=float(total_ot_hours),
        monthly_salary=float(monthly_salary),
        daily_salary=float(round2(daily_salary)),
        ot_rate=float(round2(ot_rate)),
        deductions=float(deductions),
        ot_earnings=float(ot_earnings),
        net_salary=net_salary,
    )
