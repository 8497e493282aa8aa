from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class PayrollSummary:
    """Value object: one employee's payroll for one billing period.

    Recomputed wholesale from a record snapshot, never updated in place.
    """

    present_days: int
    half_days: int
    absent_days: int
    paid_leave_days: int
    paid_off_days: int
    deduction_days: float
    total_ot_hours: float
    monthly_salary: float
    daily_salary: float
    ot_rate: float
    deductions: float
    ot_earnings: float
    net_salary: int

    def to_dict(self) -> dict:
        return asdict(self)
