from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceReportRow, AttendanceSession


class SessionRepository(Protocol):
    """Storage contract for attendance sessions.

    insert_session must reject a second open session for the same employee with
    SessionAlreadyOpenError; implementations serialise that check per employee.
    """

    def find_open_session(self, employee_id: int) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def insert_session(self, session: AttendanceSession) -> int:
        raise NotImplementedError

    def update_session(self, session_id: int, *, clock_out: datetime, duration_minutes: int) -> bool:
        raise NotImplementedError

    def list_for_employee(
        self, employee_id: int, *, work_date: Optional[date] = None, limit: int = 100
    ) -> Sequence[AttendanceSession]:
        raise NotImplementedError

    def query_by_date_range(self, start_date: date, end_date: date) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError
