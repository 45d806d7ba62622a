from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import from_storage
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["id"]),
        employee_code=r["employee_code"],
        name=r["name"],
        email=r.get("email"),
        created_at=from_storage(r.get("created_at")),
        deleted=bool(r.get("deleted", False)),
        active=bool(r.get("active", False)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_code, name, email, created_at, deleted
                FROM employees
                WHERE id=%s
                """,
                (employee_id,),
            )
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def get_by_code(self, employee_code: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_code, name, email, created_at, deleted
                FROM employees
                WHERE employee_code=%s
                """,
                (employee_code,),
            )
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def create_employee(self, *, name: str, email: str, employee_code: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, email, employee_code, created_at)
                VALUES(%s,%s,%s,NOW())
                """,
                (name, email, employee_code),
            )
            return int(cur.lastrowid)

    def soft_delete(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employees SET deleted=TRUE WHERE id=%s AND deleted=FALSE", (employee_id,))
            return cur.rowcount > 0

    def list_roster(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.id, e.employee_code, e.name, e.email, e.created_at, e.deleted,
                       EXISTS(
                           SELECT 1 FROM time_records tr
                           WHERE tr.employee_id = e.id AND tr.clock_out IS NULL
                       ) AS active
                FROM employees e
                WHERE e.deleted = FALSE
                ORDER BY e.name ASC
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]
