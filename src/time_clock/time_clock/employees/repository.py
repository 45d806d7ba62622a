from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Note: services depend on this protocol, not on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_code(self, employee_code: str) -> Optional[Employee]:
        raise NotImplementedError

    def create_employee(self, *, name: str, email: str, employee_code: str) -> int:
        raise NotImplementedError

    def soft_delete(self, employee_id: int) -> bool:
        raise NotImplementedError

    def list_roster(self) -> Sequence[Employee]:
        raise NotImplementedError
