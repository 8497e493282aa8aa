from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta
from typing import Iterator, Union

from ..core.exceptions import MalformedTimeError, ValidationError

DateLike = Union[date, str]

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}") from None


def as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def parse_clock(value: str) -> int:
    """Convert an ``HH:MM`` clock value into minutes since midnight."""
    if not isinstance(value, str):
        raise MalformedTimeError(f"Clock value must be a string, got {type(value).__name__}")

    match = _CLOCK_RE.match(value.strip())
    if not match:
        raise MalformedTimeError(f"Invalid clock value: {value!r}")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise MalformedTimeError(f"Clock value out of range: {value!r}")
    return hours * 60 + minutes


def sunday_weekday(day: date) -> int:
    """Weekday number with Sunday=0 ... Saturday=6."""
    return (day.weekday() + 1) % 7


def month_days(year: int, month: int) -> Iterator[date]:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Invalid month: {month}")
    last = calendar.monthrange(int(year), int(month))[1]
    for day in range(1, last + 1):
        yield date(int(year), int(month), day)


def date_range(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
