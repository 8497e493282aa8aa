from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import as_date
from ..common.http import int_field, json_body
from ..common.serializers import (
    calendar_day_to_dict,
    employee_from_dict,
    holiday_from_dict,
    record_from_dict,
    record_to_dict,
)
from ..container import Container
from .calendar import build_month_calendar
from .status_resolver import resolve_default_status
from .time_arithmetic import compute_duration


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/duration", methods=["POST"], endpoint="attendance_duration")
    def attendance_duration():
        payload = json_body()
        total = compute_duration(payload.get("check_in"), payload.get("check_out"))
        return jsonify({"total_hours": total})

    @app.route("/api/attendance/default-status", methods=["POST"], endpoint="attendance_default_status")
    def attendance_default_status():
        payload = json_body()
        employee = employee_from_dict(payload.get("employee") or {})
        holidays = [holiday_from_dict(h) for h in payload.get("holidays") or []]

        status = resolve_default_status(as_date(payload.get("date")), employee, holidays)
        return jsonify({"status": status.value if status else None})

    @app.route("/api/attendance/records", methods=["POST"], endpoint="attendance_build_record")
    def attendance_build_record():
        payload = json_body()
        employee = employee_from_dict(payload.get("employee") or {})

        record = container.attendance_service.build_record(
            employee,
            as_date(payload.get("date")),
            payload.get("status"),
            check_in=payload.get("check_in") or None,
            check_out=payload.get("check_out") or None,
            notes=payload.get("notes") or "",
        )
        return jsonify(record_to_dict(record))

    @app.route("/api/attendance/calendar", methods=["POST"], endpoint="attendance_calendar")
    def attendance_calendar():
        payload = json_body()
        employee = employee_from_dict(payload.get("employee") or {})
        records = [record_from_dict(r) for r in payload.get("records") or []]
        holidays = [holiday_from_dict(h) for h in payload.get("holidays") or []]

        days = build_month_calendar(
            int_field(payload, "year"),
            int_field(payload, "month"),
            employee,
            records,
            holidays,
        )
        return jsonify({"days": [calendar_day_to_dict(d) for d in days]})
