from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee who clocks in with a short code."""

    employee_id: int
    employee_code: str
    name: str
    email: Optional[str]
    created_at: Optional[datetime] = None
    deleted: bool = False
    active: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "employeeCode": self.employee_code,
            "name": self.name,
            "email": self.email,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "active": self.active,
        }


@dataclass(frozen=True)
class AdminUser:
    username: str
    email: Optional[str]

    def to_dict(self) -> dict:
        return {"id": 0, "username": self.username, "email": self.email}
