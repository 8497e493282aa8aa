from __future__ import annotations

import pytest

from attendance_payroll.main import create_app

EMPLOYEE = {
    "employeeId": "E001",
    "name": "Asha",
    "monthlySalary": 30000,
    "otRate": 200,
    "dailyWorkHours": 8,
    "workingDaysPerMonth": 26,
    "weeklyOffs": [0],
    "quotas": {"SL": 6, "PL": 12, "CL": 0},
}


@pytest.fixture
def client():
    app = create_app("attendance_payroll.config.testing")
    return app.test_client()


def _month_records():
    records = [{"employeeId": "E001", "date": f"2025-01-{d:02d}", "status": "Duty"} for d in range(1, 21)]
    records += [
        {"employeeId": "E001", "date": "2025-01-21", "status": "Absent"},
        {"employeeId": "E001", "date": "2025-01-22", "status": "Absent"},
        {"employeeId": "E001", "date": "2025-01-23", "status": "Half-Day"},
        {"employeeId": "E001", "date": "2025-02-01", "status": "Absent"},
    ]
    return records


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_duration(client):
    resp = client.post("/api/attendance/duration", json={"check_in": "22:00", "check_out": "06:00"})

    assert resp.status_code == 200
    assert resp.get_json() == {"total_hours": 8.0}


def test_malformed_time_is_400(client):
    resp = client.post("/api/attendance/duration", json={"check_in": "25:00", "check_out": "06:00"})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "MalformedTime"


def test_default_status(client):
    resp = client.post(
        "/api/attendance/default-status",
        json={"employee": EMPLOYEE, "date": "2025-01-26", "holidays": [{"date": "2025-01-26", "name": "Republic Day"}]},
    )

    assert resp.get_json() == {"status": "Holiday"}


def test_build_record(client):
    resp = client.post(
        "/api/attendance/records",
        json={"employee": EMPLOYEE, "date": "2025-01-06", "status": "Duty", "check_in": "09:00", "check_out": "18:30"},
    )

    body = resp.get_json()
    assert body["total_hours"] == 9.5
    assert body["ot_hours"] == 1.5
    assert body["status"] == "Duty"


def test_calendar(client):
    resp = client.post(
        "/api/attendance/calendar",
        json={"employee": EMPLOYEE, "year": 2025, "month": 1, "records": _month_records(), "holidays": []},
    )

    days = resp.get_json()["days"]
    assert len(days) == 31
    assert days[0]["effective_status"] == "Duty"
    assert days[25]["effective_status"] == "Weekly Off"


def test_payroll_summary(client):
    resp = client.post("/api/payroll/summary", json={"employee": EMPLOYEE, "year": 2025, "month": 1, "records": _month_records()})

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["net_salary"] == 27115
    assert body["deductions"] == 2884.62
    assert body["daily_salary"] == 1153.85


def test_payroll_report(client):
    resp = client.post("/api/payroll/report", json={"employee": EMPLOYEE, "year": 2025, "month": 1, "records": _month_records()})

    body = resp.get_json()
    assert body["period"] == "2025-01"
    assert len(body["rows"]) == 23
    assert body["summary"]["half_days"] == 1


def test_unknown_status_is_400(client):
    records = [{"employeeId": "E001", "date": "2025-01-02", "status": "Comp-Off"}]
    resp = client.post("/api/payroll/summary", json={"employee": EMPLOYEE, "year": 2025, "month": 1, "records": records})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "UnknownStatus"


def test_invalid_configuration_is_400(client):
    employee = dict(EMPLOYEE, workingDaysPerMonth=0)
    resp = client.post("/api/payroll/summary", json={"employee": employee, "year": 2025, "month": 1, "records": []})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "InvalidConfiguration"


def test_leave_balance(client):
    records = [{"employeeId": "E001", "date": "2025-03-03", "status": "SL"}]
    resp = client.post("/api/leaves/balance", json={"employee": EMPLOYEE, "year": 2025, "records": records})

    balances = {b["leave_type"]: b for b in resp.get_json()["balances"]}
    assert balances["SL"]["remaining"] == 5
    assert balances["CL"]["quota"] == 0


def test_leave_expand(client):
    leave = {
        "id": "L1",
        "employeeId": "E001",
        "type": "CL",
        "startDate": "2025-03-03",
        "endDate": "2025-03-04",
        "reason": "wedding",
        "status": "Approved",
    }
    resp = client.post("/api/leaves/expand", json={"request": leave})

    records = resp.get_json()["records"]
    assert [r["date"] for r in records] == ["2025-03-03", "2025-03-04"]
    assert records[0]["notes"] == "Approved Leave: wedding"


def test_non_json_body_is_400(client):
    resp = client.post("/api/payroll/summary", data="nope", content_type="text/plain")

    assert resp.status_code == 400


def test_non_object_quotas_is_400(client):
    employee = dict(EMPLOYEE, quotas=[6, 12, 0])
    resp = client.post("/api/payroll/summary", json={"employee": employee, "year": 2025, "month": 1, "records": []})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "InvalidConfiguration"


@pytest.mark.parametrize("value", ["NaN", "Infinity"])
def test_non_finite_working_days_is_400(client, value):
    body = (
        '{"year": 2025, "month": 1, "records": [], '
        '"employee": {"employeeId": "E001", "monthlySalary": 30000, "workingDaysPerMonth": %s}}' % value
    )
    resp = client.post("/api/payroll/summary", data=body, content_type="application/json")

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "InvalidConfiguration"
