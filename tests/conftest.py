from __future__ import annotations

from datetime import date

import pytest

from attendance_payroll.attendance.model import AttendanceRecord
from attendance_payroll.core.enums import AttendanceStatus
from attendance_payroll.employees.holidays import Holiday
from attendance_payroll.employees.model import Employee, LeaveQuotas


@pytest.fixture
def employee() -> Employee:
    return Employee(
        employee_id="E001",
        name="Asha",
        monthly_salary=30000,
        ot_rate=200,
        daily_work_hours=8,
        working_days_per_month=26,
        weekly_offs=frozenset({0}),
        quotas=LeaveQuotas(sl=6, pl=12, cl=0),
    )


@pytest.fixture
def holidays() -> list[Holiday]:
    return [
        Holiday(date=date(2025, 1, 26), name="Republic Day"),
        Holiday(date=date(2025, 3, 14), name="Holi"),
    ]


@pytest.fixture
def make_record():
    def _make(day: date, status=AttendanceStatus.DUTY, *, employee_id: str = "E001", **kwargs) -> AttendanceRecord:
        return AttendanceRecord(employee_id=employee_id, date=day, status=status, **kwargs)

    return _make
