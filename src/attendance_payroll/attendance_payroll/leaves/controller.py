from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import int_field, json_body
from ..common.serializers import balance_to_dict, employee_from_dict, leave_request_from_dict, record_from_dict, record_to_dict
from ..container import Container
from .service import expand_leave, leave_balance


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves/balance", methods=["POST"], endpoint="leaves_balance")
    def leaves_balance():
        payload = json_body()
        employee = employee_from_dict(payload.get("employee") or {})
        records = [record_from_dict(r) for r in payload.get("records") or []]

        balances = leave_balance(records, employee, int_field(payload, "year"))
        return jsonify({"balances": [balance_to_dict(b) for b in balances.values()]})

    @app.route("/api/leaves/expand", methods=["POST"], endpoint="leaves_expand")
    def leaves_expand():
        payload = json_body()
        leave = leave_request_from_dict(payload.get("request") or {})

        return jsonify({"records": [record_to_dict(r) for r in expand_leave(leave)]})
