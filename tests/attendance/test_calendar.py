from dataclasses import replace
from datetime import date

import pytest

from attendance_payroll.attendance.calendar import build_month_calendar, records_for_period
from attendance_payroll.core.enums import AttendanceStatus
from attendance_payroll.core.exceptions import InvalidConfigurationError, ValidationError


def test_records_for_period_filters_and_sorts(make_record):
    records = [
        make_record(date(2025, 2, 3)),
        make_record(date(2025, 1, 31)),
        make_record(date(2025, 1, 2)),
        make_record(date(2025, 1, 3), employee_id="E002"),
    ]

    january = records_for_period(records, 2025, 1, employee_id="E001")

    assert [r.date for r in january] == [date(2025, 1, 2), date(2025, 1, 31)]


def test_month_calendar_record_overrides_default(employee, holidays, make_record):
    records = [
        make_record(date(2025, 1, 5), check_in="10:00", notes="Punched on Weekly Off"),
        make_record(date(2025, 1, 7), AttendanceStatus.SL),
    ]

    days = build_month_calendar(2025, 1, employee, records, holidays)
    by_date = {d.date: d for d in days}

    assert len(days) == 31
    assert by_date[date(2025, 1, 5)].default_status == AttendanceStatus.WEEKLY_OFF
    assert by_date[date(2025, 1, 5)].effective_status == AttendanceStatus.DUTY
    assert by_date[date(2025, 1, 7)].effective_status == AttendanceStatus.SL
    assert by_date[date(2025, 1, 26)].effective_status == AttendanceStatus.HOLIDAY
    assert by_date[date(2025, 1, 8)].effective_status is None


def test_month_calendar_february_leap_year(employee):
    assert len(build_month_calendar(2024, 2, employee, [], [])) == 29


def test_month_calendar_rejects_duplicate_records(employee, make_record):
    records = [make_record(date(2025, 1, 6)), make_record(date(2025, 1, 6), AttendanceStatus.ABSENT)]

    with pytest.raises(ValidationError):
        build_month_calendar(2025, 1, employee, records, [])


def test_month_calendar_rejects_out_of_range_weekly_offs(employee):
    with pytest.raises(InvalidConfigurationError):
        build_month_calendar(2025, 1, replace(employee, weekly_offs=frozenset({7})), [], [])
