from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Closed set of day statuses stored on attendance records."""

    DUTY = "Duty"
    SL = "SL"
    PL = "PL"
    CL = "CL"
    UNPAID = "Unpaid"
    HALF_DAY = "Half-Day"
    WEEKLY_OFF = "Weekly Off"
    HOLIDAY = "Holiday"
    ABSENT = "Absent"


# Statuses that carry check-in / check-out punches.
WORKED_STATUSES = frozenset({AttendanceStatus.DUTY, AttendanceStatus.HALF_DAY})


class LeaveType(str, Enum):
    SL = "SL"
    PL = "PL"
    CL = "CL"
    UNPAID = "Unpaid"

    @property
    def status(self) -> AttendanceStatus:
        return AttendanceStatus(self.value)


class LeaveRequestStatus(str, Enum):
    """Approval workflow states of a leave request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class OvertimeThresholdPolicy(str, Enum):
    """Where the daily overtime threshold comes from."""

    EMPLOYEE_SHIFT = "employee_shift"
    FIXED = "fixed"
