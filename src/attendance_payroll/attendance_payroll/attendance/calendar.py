from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import month_days
from ..common.validators import require_status
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..employees.holidays import Holiday, index_holidays
from ..employees.model import Employee
from .model import AttendanceRecord
from .status_resolver import resolve_default_status


@dataclass(frozen=True)
class CalendarDay:
    date: date
    record: Optional[AttendanceRecord]
    default_status: Optional[AttendanceStatus]

    @property
    def effective_status(self) -> Optional[AttendanceStatus]:
        if self.record is not None:
            return require_status(self.record.status)
        return self.default_status


def records_for_period(
    records: Iterable[AttendanceRecord],
    year: int,
    month: int,
    employee_id: Optional[str] = None,
) -> list[AttendanceRecord]:
    """Records falling in one calendar month, ordered by date."""
    selected = [
        r
        for r in records
        if r.date.year == int(year)
        and r.date.month == int(month)
        and (employee_id is None or r.employee_id == employee_id)
    ]
    selected.sort(key=lambda r: (r.date, r.employee_id))
    return selected


def build_month_calendar(
    year: int,
    month: int,
    employee: Employee,
    records: Iterable[AttendanceRecord],
    holidays: Iterable[Holiday],
) -> list[CalendarDay]:
    holiday_map = index_holidays(holidays)

    by_date: dict[date, AttendanceRecord] = {}
    for r in records_for_period(records, year, month, employee_id=employee.employee_id):
        if r.date in by_date:
            raise ValidationError(f"Duplicate record for {employee.employee_id} on {r.date.isoformat()}")
        by_date[r.date] = r

    return [
        CalendarDay(
            date=day,
            record=by_date.get(day),
            default_status=resolve_default_status(day, employee, holiday_map),
        )
        for day in month_days(year, month)
    ]
