from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from src.time_clock.time_clock.core.exceptions import PersistenceError, SessionAlreadyOpenError
from src.time_clock.time_clock.employees.model import Employee
from src.time_clock.time_clock.sessions.model import AttendanceReportRow, AttendanceSession


class InMemoryEmployees:
    def __init__(self, sessions: Optional["InMemorySessions"] = None):
        self._by_id: dict[int, Employee] = {}
        self._id = 0
        self._sessions = sessions

    def add(self, *, name: str, employee_code: str, email: str = "x@example.com", deleted: bool = False) -> Employee:
        self._id += 1
        emp = Employee(employee_id=self._id, employee_code=employee_code, name=name, email=email, deleted=deleted)
        self._by_id[self._id] = emp
        return emp

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def get_by_code(self, employee_code: str) -> Optional[Employee]:
        for emp in self._by_id.values():
            if emp.employee_code == employee_code:
                return emp
        return None

    def create_employee(self, *, name: str, email: str, employee_code: str) -> int:
        return self.add(name=name, employee_code=employee_code, email=email).employee_id

    def soft_delete(self, employee_id: int) -> bool:
        emp = self._by_id.get(employee_id)
        if not emp or emp.deleted:
            return False
        self._by_id[employee_id] = replace(emp, deleted=True)
        return True

    def list_roster(self):
        out = []
        for emp in self._by_id.values():
            if emp.deleted:
                continue
            active = bool(self._sessions and self._sessions.find_open_session(emp.employee_id))
            out.append(replace(emp, active=active))
        return out


class InMemorySessions:
    """Enforces one open session per employee on insert, like the unique key."""

    def __init__(self, employees: Optional[InMemoryEmployees] = None):
        self._by_id: dict[int, AttendanceSession] = {}
        self._id = 0
        self.employees = employees

    def all(self) -> list[AttendanceSession]:
        return list(self._by_id.values())

    def find_open_session(self, employee_id: int) -> Optional[AttendanceSession]:
        for s in self._by_id.values():
            if s.employee_id == employee_id and s.clock_out is None:
                return s
        return None

    def insert_session(self, session: AttendanceSession) -> int:
        if session.clock_out is None and InMemorySessions.find_open_session(self, session.employee_id):
            raise SessionAlreadyOpenError(f"Employee {session.employee_id} already has an open session")
        self._id += 1
        self._by_id[self._id] = replace(session, session_id=self._id)
        return self._id

    def update_session(self, session_id: int, *, clock_out: datetime, duration_minutes: int) -> bool:
        s = self._by_id.get(session_id)
        if not s or s.clock_out is not None:
            return False
        self._by_id[session_id] = replace(s, clock_out=clock_out, duration_minutes=duration_minutes)
        return True

    def list_for_employee(self, employee_id: int, *, work_date: Optional[date] = None, limit: int = 100):
        items = [
            s
            for s in self._by_id.values()
            if s.employee_id == employee_id and (work_date is None or s.work_date == work_date)
        ]
        items.sort(key=lambda s: s.clock_in, reverse=True)
        return items[:limit]

    def query_by_date_range(self, start_date: date, end_date: date):
        rows = []
        for s in self._by_id.values():
            if not (start_date <= s.work_date <= end_date):
                continue
            emp = self.employees.get_by_id(s.employee_id) if self.employees else None
            rows.append(
                AttendanceReportRow(
                    employee_code=emp.employee_code if emp else str(s.employee_id),
                    name=emp.name if emp else "",
                    work_date=s.work_date,
                    clock_in=s.clock_in,
                    clock_out=s.clock_out,
                    duration_minutes=s.duration_minutes,
                )
            )
        return rows


class StaleReadSessions(InMemorySessions):
    """Simulates a racing clock-in: the pre-check never sees the open row."""

    def find_open_session(self, employee_id: int) -> Optional[AttendanceSession]:
        return None


class StaleCloseSessions(InMemorySessions):
    """Simulates a racing clock-out: the pre-check keeps returning the row it first saw."""

    def __init__(self, employees: Optional[InMemoryEmployees] = None):
        super().__init__(employees)
        self._seen: dict[int, AttendanceSession] = {}

    def find_open_session(self, employee_id: int) -> Optional[AttendanceSession]:
        if employee_id not in self._seen:
            current = super().find_open_session(employee_id)
            if current is None:
                return None
            self._seen[employee_id] = current
        return self._seen[employee_id]


class BrokenSessions(InMemorySessions):
    def find_open_session(self, employee_id: int) -> Optional[AttendanceSession]:
        raise PersistenceError("connection lost")


class FakeMailer:
    def __init__(self):
        self.sent: list[dict] = []

    def send_report(self, *, recipient: str, subject: str, filename: str, content: bytes) -> None:
        self.sent.append({"recipient": recipient, "subject": subject, "filename": filename, "content": content})


class FakeCursor:
    """Scripted DB-API cursor: queued fetchone rows, optional error on matching SQL."""

    def __init__(self, *, rows=None, fail_on: str = "", error: Optional[Exception] = None, rowcount: int = 1):
        self.executed: list[tuple] = []
        self._rows = list(rows or [])
        self._fail_on = fail_on
        self._error = error
        self.rowcount = rowcount
        self.lastrowid = 7
        self.closed = False

    def execute(self, sql: str, params=None) -> None:
        self.executed.append((sql, params))
        if self._error is not None and self._fail_on in sql:
            raise self._error

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def fetchall(self):
        rows, self._rows = self._rows, []
        return rows

    def close(self) -> None:
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary: bool = False) -> FakeCursor:
        return self._cursor

    def commit(self) -> None:
        self.committed = True

    def rollback(self) -> None:
        self.rolled_back = True

    def close(self) -> None:
        self.closed = True


class FakeConnectionFactory:
    """Stands in for DatabaseConnection; hands out one scripted connection."""

    def __init__(self, cursor: Optional[FakeCursor] = None, *, connect_error: Optional[Exception] = None):
        self.cursor = cursor or FakeCursor()
        self.connection = FakeConnection(self.cursor)
        self._connect_error = connect_error

    def connect(self, *, with_database: bool = True) -> FakeConnection:
        if self._connect_error is not None:
            raise self._connect_error
        return self.connection
