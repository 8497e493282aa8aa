from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..attendance.calendar import records_for_period
from ..attendance.model import AttendanceRecord
from ..common.validators import require_status
from ..employees.model import Employee
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollSummary


@dataclass(frozen=True)
class ReportData:
    period: str
    rows: list[dict]
    summary: PayrollSummary


class PayrollReportService:
    def __init__(self, *, calculator: Optional[PayrollCalculator] = None):
        self._calculator = calculator or StandardPayrollCalculator()

    def summarize_month(
        self,
        employee: Employee,
        records: Iterable[AttendanceRecord],
        *,
        year: int,
        month: int,
    ) -> PayrollSummary:
        monthly = records_for_period(records, year, month, employee_id=employee.employee_id)
        return self._calculator.summarize(monthly, employee)

    def build_monthly_report(
        self,
        employee: Employee,
        records: Iterable[AttendanceRecord],
        *,
        year: int,
        month: int,
    ) -> ReportData:
        monthly = records_for_period(records, year, month, employee_id=employee.employee_id)
        summary = self._calculator.summarize(monthly, employee)

        out_rows: list[dict] = []
        for r in monthly:
            out_rows.append(
                {
                    "date": r.date.strftime("%Y-%m-%d"),
                    "status": require_status(r.status).value,
                    "check_in": r.check_in or "-",
                    "check_out": r.check_out or "-",
                    "total_hours": r.total_hours or 0,
                    "ot_hours": r.ot_hours or 0,
                    "notes": r.notes or "",
                }
            )

        return ReportData(period=f"{int(year):04d}-{int(month):02d}", rows=out_rows, summary=summary)
