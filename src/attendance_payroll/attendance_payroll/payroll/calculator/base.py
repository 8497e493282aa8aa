from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...attendance.model import AttendanceRecord
from ...employees.model import Employee
from ..model import PayrollSummary


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def summarize(self, records: Iterable[AttendanceRecord], employee: Employee) -> PayrollSummary:
        raise NotImplementedError
