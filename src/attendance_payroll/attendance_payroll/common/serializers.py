"""Snapshot (de)serialization for the JSON controllers.

Keys are accepted in snake_case or in the camelCase used by the record store.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from ..attendance.calendar import CalendarDay
from ..attendance.model import AttendanceRecord
from ..core.enums import LeaveRequestStatus, LeaveType
from ..core.exceptions import InvalidConfigurationError, ValidationError
from ..employees.holidays import Holiday
from ..employees.model import Employee, LeaveQuotas
from ..leaves.model import LeaveBalance, LeaveRequest
from .datetime_utils import as_date
from .validators import require_non_empty

_MISSING = object()


def _camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.title() for part in rest)


def _get(data: Mapping[str, Any], key: str, default: Any = _MISSING) -> Any:
    if key in data:
        return data[key]
    camel = _camel(key)
    if camel in data:
        return data[camel]
    if default is _MISSING:
        raise ValidationError(f"Missing field: {key}")
    return default


def _number(data: Mapping[str, Any], key: str, default: Any = _MISSING) -> float:
    value = _get(data, key, default)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidConfigurationError(f"{key} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise InvalidConfigurationError(f"{key} must be finite, got {value!r}")
    return number


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Expected a number, got {value!r}") from None


def _quota(quotas: Mapping[str, Any], leave_type: str) -> float:
    data = {leave_type: quotas.get(leave_type, quotas.get(leave_type.lower(), 0)) or 0}
    return _number(data, leave_type)


def employee_from_dict(data: Mapping[str, Any]) -> Employee:
    quotas = _get(data, "quotas", {}) or {}
    if not isinstance(quotas, Mapping):
        raise InvalidConfigurationError("quotas must be an object of leave type to days")
    working_days = _number(data, "working_days_per_month", 26)
    if working_days != int(working_days):
        raise InvalidConfigurationError(f"working_days_per_month must be whole days, got {working_days}")
    weekly_offs = _get(data, "weekly_offs", [0]) or []
    if not isinstance(weekly_offs, (list, tuple, set, frozenset)):
        raise InvalidConfigurationError("weekly_offs must be a list of weekdays")

    return Employee(
        employee_id=require_non_empty(str(_get(data, "employee_id", _get(data, "id", ""))), "employee_id"),
        name=str(_get(data, "name", "")),
        monthly_salary=_number(data, "monthly_salary"),
        ot_rate=_number(data, "ot_rate", 0),
        daily_work_hours=_number(data, "daily_work_hours", 8),
        working_days_per_month=int(working_days),
        weekly_offs=frozenset(weekly_offs),
        quotas=LeaveQuotas(
            sl=_quota(quotas, "SL"),
            pl=_quota(quotas, "PL"),
            cl=_quota(quotas, "CL"),
        ),
        role=_get(data, "role", None),
        notes=_get(data, "notes", None),
    )


def holiday_from_dict(data: Mapping[str, Any]) -> Holiday:
    return Holiday(date=as_date(_get(data, "date")), name=str(_get(data, "name", "")))


def record_from_dict(data: Mapping[str, Any]) -> AttendanceRecord:
    """Status is kept as given; classification rejects unknown values later."""
    return AttendanceRecord(
        employee_id=str(_get(data, "employee_id")),
        date=as_date(_get(data, "date")),
        status=_get(data, "status"),
        check_in=_get(data, "check_in", None) or None,
        check_out=_get(data, "check_out", None) or None,
        total_hours=_optional_float(_get(data, "total_hours", None)),
        ot_hours=_optional_float(_get(data, "ot_hours", None)),
        notes=_get(data, "notes", "") or "",
    )


def record_to_dict(record: AttendanceRecord) -> dict:
    status = record.status
    return {
        "employee_id": record.employee_id,
        "date": record.date.isoformat(),
        "status": getattr(status, "value", status),
        "check_in": record.check_in,
        "check_out": record.check_out,
        "total_hours": record.total_hours,
        "ot_hours": record.ot_hours,
        "notes": record.notes,
    }


def leave_request_from_dict(data: Mapping[str, Any]) -> LeaveRequest:
    leave_type = _get(data, "leave_type", _get(data, "type", None))
    status = _get(data, "status", LeaveRequestStatus.PENDING.value)
    try:
        leave_type = LeaveType(leave_type)
        status = LeaveRequestStatus(status)
    except ValueError as e:
        raise ValidationError(str(e)) from None

    return LeaveRequest(
        request_id=str(_get(data, "request_id", _get(data, "id", ""))),
        employee_id=str(_get(data, "employee_id")),
        leave_type=leave_type,
        start_date=as_date(_get(data, "start_date")),
        end_date=as_date(_get(data, "end_date")),
        reason=str(_get(data, "reason", "")),
        status=status,
    )


def calendar_day_to_dict(day: CalendarDay) -> dict:
    effective = day.effective_status
    return {
        "date": day.date.isoformat(),
        "record": record_to_dict(day.record) if day.record else None,
        "default_status": day.default_status.value if day.default_status else None,
        "effective_status": effective.value if effective else None,
    }


def balance_to_dict(balance: LeaveBalance) -> dict:
    return {
        "leave_type": balance.leave_type.value,
        "quota": balance.quota,
        "used": balance.used,
        "remaining": balance.remaining,
    }
