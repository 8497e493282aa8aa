from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .core.enums import OvertimeThresholdPolicy
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class EngineSettings:
    ot_threshold_policy: OvertimeThresholdPolicy = OvertimeThresholdPolicy.EMPLOYEE_SHIFT
    fixed_ot_threshold_hours: float = 8.0
    break_deduction_hours: float = 0.0
    hourly_base_divisor: int = 8


@dataclass(frozen=True)
class Container:
    settings: EngineSettings

    attendance_service: AttendanceService
    payroll_report_service: PayrollReportService


def load_engine_settings(settings) -> EngineSettings:
    return EngineSettings(
        ot_threshold_policy=OvertimeThresholdPolicy(getattr(settings, "OT_THRESHOLD_POLICY", "employee_shift")),
        fixed_ot_threshold_hours=float(getattr(settings, "FIXED_OT_THRESHOLD_HOURS", 8)),
        break_deduction_hours=float(getattr(settings, "BREAK_DEDUCTION_HOURS", 0)),
        hourly_base_divisor=int(getattr(settings, "HOURLY_BASE_DIVISOR", 8)),
    )


def build_container(*, engine_settings: EngineSettings) -> Container:
    attendance_service = AttendanceService(
        ot_policy=engine_settings.ot_threshold_policy,
        fixed_ot_hours=engine_settings.fixed_ot_threshold_hours,
        break_deduction_hours=engine_settings.break_deduction_hours,
    )
    payroll_report_service = PayrollReportService(
        calculator=StandardPayrollCalculator(hourly_base_divisor=engine_settings.hourly_base_divisor),
    )

    return Container(
        settings=engine_settings,
        attendance_service=attendance_service,
        payroll_report_service=payroll_report_service,
    )
