from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import LeaveRequestStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    """Domain entity: a leave application covering an inclusive date range."""

    request_id: str
    employee_id: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str = ""
    status: LeaveRequestStatus = LeaveRequestStatus.PENDING


@dataclass(frozen=True)
class LeaveBalance:
    leave_type: LeaveType
    quota: float
    used: int

    @property
    def remaining(self) -> float:
        return max(0, self.quota - self.used)
