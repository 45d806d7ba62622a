from __future__ import annotations

from datetime import timedelta

import pytest

from src.time_clock.time_clock.main import create_app
from src.time_clock.time_clock.container import wire_container


@pytest.fixture
def container(employees, sessions, clock, mailer):
    return wire_container(
        employees_repo=employees,
        sessions_repo=sessions,
        clock=clock,
        mailer=mailer,
        admin={"user": "admin", "password": "admin-pass", "email": "admin@example.com"},
    )


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()


@pytest.fixture
def sara(employees):
    return employees.add(name="Sara", employee_code="E001", email="sara@example.com")


def test_health_without_database(client):
    assert client.get("/health").get_json()["status"] == "healthy"


def test_employee_login(client, sara):
    ok = client.post("/api/auth/login", json={"code": "E001"})
    bad = client.post("/api/auth/login", json={"code": "nope"})

    assert ok.status_code == 200
    assert ok.get_json()["user"]["employeeCode"] == "E001"
    assert ok.get_json()["isAdmin"] is False
    assert bad.status_code == 401


def test_admin_login(client):
    assert client.post("/api/auth/admin/login", json={"username": "admin", "password": "admin-pass"}).status_code == 200
    assert client.post("/api/auth/admin/login", json={"username": "admin", "password": "x"}).status_code == 401


def test_employee_crud(client):
    created = client.post("/api/employees", json={"name": "Omar", "email": "omar@example.com", "employeeCode": "E002"})
    assert created.status_code == 201
    emp_id = created.get_json()["id"]

    dup = client.post("/api/employees", json={"name": "Omar", "email": "omar@example.com", "employeeCode": "E002"})
    assert dup.status_code == 400

    assert [e["employeeCode"] for e in client.get("/api/employees").get_json()] == ["E002"]
    assert client.delete(f"/api/employees/{emp_id}").status_code == 200
    assert client.get("/api/employees").get_json() == []
    assert client.delete(f"/api/employees/{emp_id}").status_code == 404


def test_clock_in_out_cycle(client, sara, clock, fixed_now):
    first = client.post("/api/time/clock-in", json={"employeeId": sara.employee_id})
    assert first.status_code == 200
    assert first.get_json()["clockOut"] is None
    assert first.get_json()["date"] == "2024-03-15"

    again = client.post("/api/time/clock-in", json={"employeeId": sara.employee_id})
    assert again.status_code == 409

    assert client.get(f"/api/time/active/{sara.employee_id}").get_json() is True

    clock.current = fixed_now + timedelta(hours=8, minutes=29, seconds=59)
    closed = client.post("/api/time/clock-out", json={"employeeId": sara.employee_id})
    assert closed.get_json()["duration"] == 509

    assert client.post("/api/time/clock-out", json={"employeeId": sara.employee_id}).get_json() is None
    assert client.get(f"/api/time/active/{sara.employee_id}").get_json() is False

    history = client.get(f"/api/time/{sara.employee_id}?date=2024-03-15").get_json()
    assert len(history) == 1


def test_clock_in_unknown_employee(client):
    assert client.post("/api/time/clock-in", json={"employeeId": 42}).status_code == 400
    assert client.post("/api/time/clock-in", json={}).status_code == 400


def test_report_endpoint_resolves_range(client, sara):
    client.post("/api/time/clock-in", json={"employeeId": sara.employee_id})

    body = client.get("/api/reports?date=2024-03-15&type=weekly").get_json()

    assert body["range"] == {"start": "2024-03-11", "end": "2024-03-17"}
    assert body["rows"][0]["employeeCode"] == "E001"


def test_report_endpoint_rejects_bad_input(client):
    assert client.get("/api/reports?date=2024-03-15&type=yearly").status_code == 400
    assert client.get("/api/reports?date=2024-13-01&type=daily").status_code == 400


def test_report_export_returns_workbook(client, sara):
    client.post("/api/time/clock-in", json={"employeeId": sara.employee_id})

    resp = client.get("/api/reports/export?date=2024-03-15&type=daily")

    assert resp.status_code == 200
    assert resp.mimetype.endswith("spreadsheetml.sheet")
    assert "time-report-2024-03-15-daily.xlsx" in resp.headers["Content-Disposition"]
    assert resp.data[:2] == b"PK"


def test_send_report(client, sara, mailer):
    empty = client.post("/api/email/send-report", json={"date": "2024-03-14", "type": "daily"})
    assert empty.status_code == 404

    client.post("/api/time/clock-in", json={"employeeId": sara.employee_id})
    sent = client.post("/api/email/send-report", json={"date": "2024-03-15", "type": "daily"})

    assert sent.get_json() == {"success": True}
    assert mailer.sent[0]["recipient"] == "admin@example.com"
