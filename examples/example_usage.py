"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the computation lives in the services.
"""

import importlib
from datetime import date

from attendance_payroll.config import get_settings_module
from attendance_payroll.container import build_container, load_engine_settings
from attendance_payroll.employees.holidays import Holiday
from attendance_payroll.employees.model import Employee


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(engine_settings=load_engine_settings(settings))

    employee = Employee(employee_id="E001", name="Asha", monthly_salary=30000, ot_rate=200)
    holidays = [Holiday(date=date(2025, 1, 26), name="Republic Day")]

    svc = container.attendance_service
    records = [
        svc.build_record(employee, date(2025, 1, 2), "Duty", "09:00", "18:30"),
        svc.build_record(employee, date(2025, 1, 3), "Half-Day", "09:00", "13:00"),
        svc.build_record(employee, date(2025, 1, 4), "Absent"),
    ]
    opened = svc.punch_in(employee, date(2025, 1, 6), "21:45", holidays)
    records.append(svc.punch_out(employee, opened, "07:15"))

    report = container.payroll_report_service.build_monthly_report(employee, records, year=2025, month=1)
    for row in report.rows:
        print(row)
    print(report.summary)


if __name__ == "__main__":
    main()
