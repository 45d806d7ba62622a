from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

import mysql.connector

from ..common.datetime_utils import from_storage, to_storage
from ..core.exceptions import SessionAlreadyOpenError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import AttendanceReportRow, AttendanceSession
from .repository import SessionRepository

_SESSION_COLUMNS = "id, employee_id, clock_in, clock_out, duration, date"


def _to_session(r: dict) -> AttendanceSession:
    return AttendanceSession(
        session_id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        clock_in=from_storage(r["clock_in"]),
        clock_out=from_storage(r.get("clock_out")),
        duration_minutes=int(r["duration"]) if r.get("duration") is not None else None,
        work_date=r["date"],
    )


class MySQLSessionRepository(SessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_open_session(self, employee_id: int) -> Optional[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SESSION_COLUMNS}
                FROM time_records
                WHERE employee_id=%s AND clock_out IS NULL
                ORDER BY clock_in DESC
                LIMIT 1
                """,
                (employee_id,),
            )
            r = fetchone(cur)
            return _to_session(r) if r else None

    def insert_session(self, session: AttendanceSession) -> int:
        # Check and insert share one transaction; the row lock plus the
        # uq_one_open_session key keep a racing clock-in from slipping through.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id FROM time_records WHERE employee_id=%s AND clock_out IS NULL FOR UPDATE",
                (session.employee_id,),
            )
            if fetchone(cur):
                raise SessionAlreadyOpenError(f"Employee {session.employee_id} already has an open session")
            try:
                cur.execute(
                    """
                    INSERT INTO time_records(employee_id, clock_in, clock_out, duration, date)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (
                        session.employee_id,
                        to_storage(session.clock_in),
                        to_storage(session.clock_out),
                        session.duration_minutes,
                        session.work_date,
                    ),
                )
            except mysql.connector.IntegrityError as exc:
                if is_duplicate_key(exc):
                    raise SessionAlreadyOpenError(
                        f"Employee {session.employee_id} already has an open session"
                    ) from exc
                raise
            return int(cur.lastrowid)

    def update_session(self, session_id: int, *, clock_out: datetime, duration_minutes: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE time_records
                SET clock_out=%s, duration=%s
                WHERE id=%s AND clock_out IS NULL
                """,
                (to_storage(clock_out), int(duration_minutes), int(session_id)),
            )
            return cur.rowcount > 0

    def list_for_employee(
        self, employee_id: int, *, work_date: Optional[date] = None, limit: int = 100
    ) -> Sequence[AttendanceSession]:
        clauses = ["employee_id=%s"]
        params: list[object] = [employee_id]
        if work_date is not None:
            clauses.append("date=%s")
            params.append(work_date)
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SESSION_COLUMNS}
                FROM time_records
                WHERE {" AND ".join(clauses)}
                ORDER BY clock_in DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [_to_session(r) for r in fetchall(cur)]

    def query_by_date_range(self, start_date: date, end_date: date) -> Sequence[AttendanceReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.employee_code, e.name, tr.date, tr.clock_in, tr.clock_out, tr.duration
                FROM time_records tr
                JOIN employees e ON e.id = tr.employee_id
                WHERE tr.date BETWEEN %s AND %s
                ORDER BY tr.date ASC, e.employee_code ASC, tr.clock_in ASC
                """,
                (start_date, end_date),
            )
            return [
                AttendanceReportRow(
                    employee_code=r["employee_code"],
                    name=r["name"],
                    work_date=r["date"],
                    clock_in=from_storage(r["clock_in"]),
                    clock_out=from_storage(r.get("clock_out")),
                    duration_minutes=int(r["duration"]) if r.get("duration") is not None else None,
                )
                for r in fetchall(cur)
            ]
