from __future__ import annotations

import hmac
import logging
from typing import Optional, Sequence

from ..common.validators import require_email, require_non_empty
from ..core.exceptions import AuthenticationError, ValidationError
from .model import AdminUser, Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: employee code login and admin login (no hardening)."""

    def __init__(
        self,
        employees: EmployeeRepository,
        *,
        admin_user: str = "",
        admin_pass: str = "",
        admin_email: Optional[str] = None,
    ):
        self._employees = employees
        self._admin_user = admin_user
        self._admin_pass = admin_pass
        self._admin_email = admin_email

    def login_by_code(self, code: str) -> Employee:
        code = (code or "").strip()
        employee = self._employees.get_by_code(code) if code else None
        if not employee or employee.deleted:
            logger.info("Rejected employee login for code %r", code)
            raise AuthenticationError("Invalid employee code")
        return employee

    def login_admin(self, username: str, password: str) -> AdminUser:
        if not self._admin_user or not self._admin_pass:
            raise AuthenticationError("Invalid credentials")

        user_ok = hmac.compare_digest(str(username or ""), self._admin_user)
        pass_ok = hmac.compare_digest(str(password or ""), self._admin_pass)
        if not (user_ok and pass_ok):
            logger.info("Rejected admin login for %r", username)
            raise AuthenticationError("Invalid credentials")
        return AdminUser(username=self._admin_user, email=self._admin_email)


class EmployeeService:
    """Use case: manage the employee roster (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_roster(self) -> Sequence[Employee]:
        return self._employees.list_roster()

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee or employee.deleted:
            raise ValidationError("Employee not found")
        return employee

    def add_employee(self, *, name: str, email: str, employee_code: str) -> Employee:
        name = require_non_empty(name, "Name")
        email = require_email(email)
        employee_code = require_non_empty(employee_code, "Employee code")

        if self._employees.get_by_code(employee_code):
            raise ValidationError("Employee code already exists")

        employee_id = self._employees.create_employee(name=name, email=email, employee_code=employee_code)
        logger.info("Added employee %s (%s)", employee_id, employee_code)

        created = self._employees.get_by_id(employee_id)
        if created is None:
            raise ValidationError("Failed to add employee")
        return created

    def remove_employee(self, employee_id: int) -> None:
        self.get(employee_id)
        if not self._employees.soft_delete(employee_id):
            raise ValidationError("Failed to delete employee")
        logger.info("Soft-deleted employee %s", employee_id)
