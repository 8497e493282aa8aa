from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional, Union

from ..common.datetime_utils import DateLike, as_date, sunday_weekday
from ..common.validators import require_weekdays
from ..core.enums import AttendanceStatus
from ..employees.holidays import Holiday, index_holidays
from ..employees.model import Employee

HolidaysArg = Union[Iterable[Holiday], Mapping[date, Holiday]]


def _holiday_map(holidays: HolidaysArg) -> Mapping[date, Holiday]:
    if isinstance(holidays, Mapping):
        return holidays
    return index_holidays(holidays)


def resolve_default_status(day: DateLike, employee: Employee, holidays: HolidaysArg) -> Optional[AttendanceStatus]:
    """Status that applies to a date with no explicit record.

    A holiday always wins over a weekly off falling on the same date. ``None``
    means the day is unmarked and the caller's policy decides.
    """
    day = as_date(day)
    weekly_offs = require_weekdays(employee.weekly_offs, "weekly_offs")
    if day in _holiday_map(holidays):
        return AttendanceStatus.HOLIDAY
    if sunday_weekday(day) in weekly_offs:
        return AttendanceStatus.WEEKLY_OFF
    return None
