from __future__ import annotations

from typing import Iterable

from ...attendance.model import AttendanceRecord
from ...core.constants import DEFAULT_HOURLY_BASE_DIVISOR
from ...employees.model import Employee
from ..aggregator import aggregate_payroll
from ..model import PayrollSummary
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: salary - (absent + 0.5 * half days) * daily rate + OT."""

    def __init__(self, *, hourly_base_divisor: int = DEFAULT_HOURLY_BASE_DIVISOR):
        self._hourly_base_divisor = hourly_base_divisor

    def summarize(self, records: Iterable[AttendanceRecord], employee: Employee) -> PayrollSummary:
        return aggregate_payroll(records, employee, hourly_base_divisor=self._hourly_base_divisor)
