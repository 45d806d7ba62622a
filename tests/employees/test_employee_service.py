from __future__ import annotations

from datetime import datetime

import pytest

from src.time_clock.time_clock.common.datetime_utils import FIXED_TZ
from src.time_clock.time_clock.core.exceptions import AuthenticationError, ValidationError
from src.time_clock.time_clock.employees.service import AuthService, EmployeeService
from src.time_clock.time_clock.sessions.tracker import SessionTracker


def test_add_employee_trims_and_returns_created(employees):
    svc = EmployeeService(employees)

    emp = svc.add_employee(name="  Sara ", email="sara@example.com", employee_code=" E001 ")

    assert emp.name == "Sara"
    assert emp.employee_code == "E001"
    assert employees.get_by_code("E001") is not None


@pytest.mark.parametrize(
    "name, email, code",
    [
        ("", "sara@example.com", "E001"),
        ("Sara", "not-an-email", "E001"),
        ("Sara", "sara@example.com", "   "),
    ],
)
def test_add_employee_validation(employees, name, email, code):
    with pytest.raises(ValidationError):
        EmployeeService(employees).add_employee(name=name, email=email, employee_code=code)


def test_duplicate_code_rejected(employees):
    employees.add(name="Sara", employee_code="E001")

    with pytest.raises(ValidationError):
        EmployeeService(employees).add_employee(name="Omar", email="omar@example.com", employee_code="E001")


def test_remove_employee_is_soft_delete(employees):
    emp = employees.add(name="Sara", employee_code="E001")
    svc = EmployeeService(employees)

    svc.remove_employee(emp.employee_id)

    assert employees.get_by_id(emp.employee_id).deleted
    assert svc.list_roster() == []
    with pytest.raises(ValidationError):
        svc.remove_employee(emp.employee_id)


def test_roster_reports_active_flag(employees, sessions):
    sara = employees.add(name="Sara", employee_code="E001")
    employees.add(name="Omar", employee_code="E002")
    SessionTracker(sessions).open_session(sara.employee_id, datetime(2024, 3, 15, 9, 0, tzinfo=FIXED_TZ))

    roster = {e.employee_code: e.active for e in EmployeeService(employees).list_roster()}

    assert roster == {"E001": True, "E002": False}


def test_login_by_code(employees):
    employees.add(name="Sara", employee_code="E001")
    employees.add(name="Gone", employee_code="E999", deleted=True)
    auth = AuthService(employees)

    assert auth.login_by_code(" E001 ").name == "Sara"
    with pytest.raises(AuthenticationError):
        auth.login_by_code("E999")
    with pytest.raises(AuthenticationError):
        auth.login_by_code("")


def test_admin_login(employees):
    auth = AuthService(employees, admin_user="admin", admin_pass="secret", admin_email="admin@example.com")

    assert auth.login_admin("admin", "secret").email == "admin@example.com"
    with pytest.raises(AuthenticationError):
        auth.login_admin("admin", "wrong")


def test_admin_login_disabled_without_credentials(employees):
    with pytest.raises(AuthenticationError):
        AuthService(employees).login_admin("", "")
