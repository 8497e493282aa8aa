from dataclasses import replace
from datetime import date

import pytest

from attendance_payroll.attendance.status_resolver import resolve_default_status
from attendance_payroll.core.enums import AttendanceStatus
from attendance_payroll.core.exceptions import InvalidConfigurationError
from attendance_payroll.employees.holidays import Holiday


def test_holiday_wins_over_weekly_off(employee):
    # 2025-01-26 is a Sunday and the employee is off on Sundays
    holidays = [Holiday(date=date(2025, 1, 26), name="Republic Day")]

    assert resolve_default_status(date(2025, 1, 26), employee, holidays) == AttendanceStatus.HOLIDAY


def test_weekly_off_uses_sunday_zero(employee, holidays):
    assert resolve_default_status(date(2025, 1, 5), employee, holidays) == AttendanceStatus.WEEKLY_OFF
    assert resolve_default_status(date(2025, 1, 6), employee, holidays) is None


def test_holiday_on_working_day(employee, holidays):
    assert resolve_default_status("2025-03-14", employee, holidays) == AttendanceStatus.HOLIDAY


def test_saturday_is_six(employee):
    saturday_off = replace(employee, weekly_offs=frozenset({6}))

    assert resolve_default_status(date(2025, 1, 4), saturday_off, []) == AttendanceStatus.WEEKLY_OFF
    assert resolve_default_status(date(2025, 1, 5), saturday_off, []) is None


def test_duplicate_holiday_dates_rejected(employee):
    holidays = [
        Holiday(date=date(2025, 8, 15), name="Independence Day"),
        Holiday(date=date(2025, 8, 15), name="Another"),
    ]

    with pytest.raises(InvalidConfigurationError):
        resolve_default_status(date(2025, 8, 15), employee, holidays)


def test_out_of_range_weekly_offs_rejected(employee):
    broken = replace(employee, weekly_offs=frozenset({7, -1}))

    with pytest.raises(InvalidConfigurationError):
        resolve_default_status(date(2025, 1, 6), broken, [])
