from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.datetime_utils import DateLike, as_date, parse_clock
from ..common.rounding import Number
from ..common.validators import require_status
from ..core.constants import DEFAULT_BREAK_DEDUCTION_HOURS, DEFAULT_FIXED_OT_THRESHOLD_HOURS
from ..core.enums import WORKED_STATUSES, AttendanceStatus, OvertimeThresholdPolicy
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from .model import AttendanceRecord
from .overtime import compute_overtime, resolve_ot_threshold
from .status_resolver import HolidaysArg, resolve_default_status
from .time_arithmetic import compute_worked_hours

logger = logging.getLogger(__name__)


def build_record(
    employee: Employee,
    day: DateLike,
    status,
    check_in: Optional[str] = None,
    check_out: Optional[str] = None,
    notes: str = "",
    *,
    ot_threshold: Number,
    break_deduction_hours: Number = 0,
) -> AttendanceRecord:
    """Build a complete record, deriving hours for worked days.

    Punches are kept only for Duty / Half-Day; other statuses drop them.
    """
    status = require_status(status)
    record = AttendanceRecord(employee_id=employee.employee_id, date=as_date(day), status=status, notes=notes or "")

    if status not in WORKED_STATUSES:
        return record
    if check_in:
        parse_clock(check_in)
    if check_out:
        parse_clock(check_out)
        if not check_in:
            raise ValidationError(f"Check-out without check-in on {record.date.isoformat()}")
    if check_in and check_out:
        return _with_hours(
            replace(record, check_in=check_in),
            check_out,
            ot_threshold=ot_threshold,
            break_deduction_hours=break_deduction_hours,
        )
    return replace(record, check_in=check_in or None)


def punch_in(
    employee: Employee,
    day: DateLike,
    clock: str,
    holidays: HolidaysArg,
    existing: Optional[AttendanceRecord] = None,
) -> AttendanceRecord:
    """Start a Duty record; punching on an off day leaves a note about it."""
    day = as_date(day)
    parse_clock(clock)
    if existing is not None and existing.check_in:
        raise ValidationError(f"Already punched in on {day.isoformat()}")

    default = resolve_default_status(day, employee, holidays)
    notes = f"Punched on {default.value}" if default else ""
    logger.debug("punch in employee=%s date=%s at %s", employee.employee_id, day, clock)
    return AttendanceRecord(
        employee_id=employee.employee_id,
        date=day,
        status=AttendanceStatus.DUTY,
        check_in=clock,
        notes=notes,
    )


def punch_out(
    record: Optional[AttendanceRecord],
    clock: str,
    *,
    ot_threshold: Number,
    break_deduction_hours: Number = 0,
) -> AttendanceRecord:
    if record is None or not record.check_in:
        raise ValidationError("No check-in to punch out from")
    if record.check_out:
        raise ValidationError(f"Already punched out on {record.date.isoformat()}")

    logger.debug("punch out employee=%s date=%s at %s", record.employee_id, record.date, clock)
    return _with_hours(record, clock, ot_threshold=ot_threshold, break_deduction_hours=break_deduction_hours)


def _with_hours(
    record: AttendanceRecord,
    check_out: str,
    *,
    ot_threshold: Number,
    break_deduction_hours: Number,
) -> AttendanceRecord:
    total = compute_worked_hours(record.check_in, check_out, break_deduction_hours)
    return replace(
        record,
        check_out=check_out,
        total_hours=total,
        ot_hours=compute_overtime(total, ot_threshold),
    )


class AttendanceService:
    """Record building bound to one overtime / break policy."""

    def __init__(
        self,
        *,
        ot_policy: OvertimeThresholdPolicy = OvertimeThresholdPolicy.EMPLOYEE_SHIFT,
        fixed_ot_hours: float = DEFAULT_FIXED_OT_THRESHOLD_HOURS,
        break_deduction_hours: float = DEFAULT_BREAK_DEDUCTION_HOURS,
    ):
        self._ot_policy = OvertimeThresholdPolicy(ot_policy)
        self._fixed_ot_hours = float(fixed_ot_hours)
        self._break_hours = float(break_deduction_hours)

    def threshold_for(self, employee: Employee) -> float:
        return resolve_ot_threshold(employee, self._ot_policy, fixed_hours=self._fixed_ot_hours)

    def build_record(
        self,
        employee: Employee,
        day: DateLike,
        status,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
        notes: str = "",
    ) -> AttendanceRecord:
        return build_record(
            employee,
            day,
            status,
            check_in,
            check_out,
            notes,
            ot_threshold=self.threshold_for(employee),
            break_deduction_hours=self._break_hours,
        )

    def punch_in(
        self,
        employee: Employee,
        day: DateLike,
        clock: str,
        holidays: HolidaysArg,
        existing: Optional[AttendanceRecord] = None,
    ) -> AttendanceRecord:
        return punch_in(employee, day, clock, holidays, existing)

    def punch_out(self, employee: Employee, record: Optional[AttendanceRecord], clock: str) -> AttendanceRecord:
        if record is not None and record.employee_id != employee.employee_id:
            raise ValidationError("Record belongs to a different employee")
        return punch_out(
            record,
            clock,
            ot_threshold=self.threshold_for(employee),
            break_deduction_hours=self._break_hours,
        )
