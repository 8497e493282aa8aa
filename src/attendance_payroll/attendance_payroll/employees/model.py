from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.validators import require_non_negative, require_positive, require_weekdays
from ..core.enums import LeaveType


@dataclass(frozen=True)
class LeaveQuotas:
    """Yearly paid-leave allowance per leave type (days)."""

    sl: float = 0
    pl: float = 0
    cl: float = 0

    def for_type(self, leave_type: LeaveType) -> float:
        return {
            LeaveType.SL: self.sl,
            LeaveType.PL: self.pl,
            LeaveType.CL: self.cl,
        }.get(leave_type, 0)


@dataclass(frozen=True)
class Employee:
    """Domain entity: pay terms and working pattern of one employee.

    Note: Plain configuration data owned by an administrator; the engine only
    reads it.
    """

    employee_id: str
    name: str
    monthly_salary: float
    ot_rate: float = 0
    daily_work_hours: float = 8
    working_days_per_month: int = 26
    weekly_offs: frozenset[int] = field(default_factory=lambda: frozenset({0}))
    quotas: LeaveQuotas = field(default_factory=LeaveQuotas)
    role: Optional[str] = None
    notes: Optional[str] = None


def validate_employee(employee: Employee) -> Employee:
    """Raise InvalidConfigurationError when the pay terms cannot be computed on."""
    require_non_negative(employee.monthly_salary, "monthly_salary")
    require_non_negative(employee.ot_rate, "ot_rate")
    require_positive(employee.daily_work_hours, "daily_work_hours")
    require_positive(employee.working_days_per_month, "working_days_per_month")
    require_weekdays(employee.weekly_offs, "weekly_offs")
    require_non_negative(employee.quotas.sl, "quotas.sl")
    require_non_negative(employee.quotas.pl, "quotas.pl")
    require_non_negative(employee.quotas.cl, "quotas.cl")
    return employee
