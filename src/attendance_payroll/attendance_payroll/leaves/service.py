from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import date_range
from ..common.validators import require_status
from ..core.enums import LeaveRequestStatus, LeaveType
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from .model import LeaveBalance, LeaveRequest

logger = logging.getLogger(__name__)

PAID_LEAVE_TYPES = (LeaveType.PL, LeaveType.SL, LeaveType.CL)
_LEAVE_VALUES = frozenset(t.value for t in LeaveType)


def validate_leave_request(request: LeaveRequest) -> LeaveRequest:
    try:
        leave_type = LeaveType(request.leave_type)
    except ValueError:
        raise ValidationError(f"Unknown leave type: {request.leave_type!r}") from None
    if request.start_date > request.end_date:
        raise ValidationError("Leave start date is after its end date")
    return replace(request, leave_type=leave_type)


def _transition(request: LeaveRequest, status: LeaveRequestStatus) -> LeaveRequest:
    if request.status != LeaveRequestStatus.PENDING:
        raise ValidationError(f"Leave request {request.request_id} is already {LeaveRequestStatus(request.status).value}")
    return replace(validate_leave_request(request), status=status)


def approve_leave(request: LeaveRequest) -> LeaveRequest:
    return _transition(request, LeaveRequestStatus.APPROVED)


def reject_leave(request: LeaveRequest) -> LeaveRequest:
    return _transition(request, LeaveRequestStatus.REJECTED)


def expand_leave(request: LeaveRequest) -> list[AttendanceRecord]:
    """One record per covered day, carrying the leave type as status."""
    if request.status != LeaveRequestStatus.APPROVED:
        raise ValidationError(f"Leave request {request.request_id} is not approved")
    request = validate_leave_request(request)

    return [
        AttendanceRecord(
            employee_id=request.employee_id,
            date=day,
            status=request.leave_type.status,
            notes=f"Approved Leave: {request.reason}",
        )
        for day in date_range(request.start_date, request.end_date)
    ]


def apply_leave(records: Iterable[AttendanceRecord], request: LeaveRequest) -> list[AttendanceRecord]:
    """Replace the employee's records on the covered dates with leave days."""
    leave_records = expand_leave(request)
    covered = {r.key for r in leave_records}
    records = list(records)
    kept = [r for r in records if r.key not in covered]
    logger.debug(
        "apply leave %s employee=%s days=%d replaced=%d",
        request.request_id,
        request.employee_id,
        len(leave_records),
        len(records) - len(kept),
    )
    return kept + leave_records


def leave_usage(records: Iterable[AttendanceRecord], year: int) -> dict[LeaveType, int]:
    """Days recorded per leave type within one calendar year."""
    usage = {t: 0 for t in LeaveType}
    for r in records:
        if r.date.year != int(year):
            continue
        status = require_status(r.status)
        if status.value in _LEAVE_VALUES:
            usage[LeaveType(status.value)] += 1
    return usage


def leave_balance(records: Iterable[AttendanceRecord], employee: Employee, year: int) -> dict[LeaveType, LeaveBalance]:
    own = [r for r in records if r.employee_id == employee.employee_id]
    usage = leave_usage(own, year)
    return {
        t: LeaveBalance(leave_type=t, quota=employee.quotas.for_type(t), used=usage[t])
        for t in PAID_LEAVE_TYPES
    }


def available_leave_types(employee: Employee) -> list[LeaveType]:
    """Paid types with a quota, always followed by Unpaid."""
    types = [t for t in PAID_LEAVE_TYPES if employee.quotas.for_type(t) > 0]
    types.append(LeaveType.UNPAID)
    return types
