from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import int_field, json_body
from ..common.serializers import employee_from_dict, record_from_dict
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _snapshot(payload: dict):
        employee = employee_from_dict(payload.get("employee") or {})
        records = [record_from_dict(r) for r in payload.get("records") or []]
        return employee, records

    @app.route("/api/payroll/summary", methods=["POST"], endpoint="payroll_summary")
    def payroll_summary():
        payload = json_body()
        employee, records = _snapshot(payload)

        summary = container.payroll_report_service.summarize_month(
            employee,
            records,
            year=int_field(payload, "year"),
            month=int_field(payload, "month"),
        )
        return jsonify(summary.to_dict())

    @app.route("/api/payroll/report", methods=["POST"], endpoint="payroll_report")
    def payroll_report():
        payload = json_body()
        employee, records = _snapshot(payload)

        report = container.payroll_report_service.build_monthly_report(
            employee,
            records,
            year=int_field(payload, "year"),
            month=int_field(payload, "month"),
        )
        return jsonify({"period": report.period, "rows": report.rows, "summary": report.summary.to_dict()})
