from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..common.clock import Clock, SystemClock
from ..common.datetime_utils import calendar_date_of, to_fixed_offset
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import SessionAlreadyOpenError
from .model import AttendanceSession
from .repository import SessionRepository

logger = logging.getLogger(__name__)

_ONE_MINUTE = timedelta(minutes=1)


def duration_minutes(clock_in: datetime, clock_out: datetime) -> int:
    """Whole minutes between two instants, floored (09:00:00 -> 17:29:59 is 509).

    Clock skew is not clamped: clock_out before clock_in yields a negative value.
    """
    return (to_fixed_offset(clock_out) - to_fixed_offset(clock_in)) // _ONE_MINUTE


class SessionTracker:
    """Keeps at most one open attendance session per employee."""

    def __init__(self, sessions: SessionRepository, *, clock: Optional[Clock] = None):
        self._sessions = sessions
        self._clock = clock or SystemClock()

    def open_session(self, employee_id: int, now: Optional[datetime] = None) -> AttendanceSession:
        now = to_fixed_offset(now or self._clock.now())

        if self._sessions.find_open_session(employee_id) is not None:
            raise SessionAlreadyOpenError(f"Employee {employee_id} is already clocked in")

        session = AttendanceSession(
            session_id=None,
            employee_id=employee_id,
            clock_in=now,
            work_date=calendar_date_of(now),
        )
        # insert_session repeats the check atomically; a lost race raises there.
        session_id = self._sessions.insert_session(session)
        logger.info("Employee %s clocked in at %s", employee_id, now.isoformat())
        return replace(session, session_id=session_id)

    def close_session(self, employee_id: int, now: Optional[datetime] = None) -> Optional[AttendanceSession]:
        now = to_fixed_offset(now or self._clock.now())

        current = self._sessions.find_open_session(employee_id)
        if current is None:
            logger.info("Employee %s has no open session to close", employee_id)
            return None

        minutes = duration_minutes(current.clock_in, now)
        if minutes < 0:
            logger.warning(
                "Negative duration for session %s: clock-out %s precedes clock-in %s",
                current.session_id,
                now.isoformat(),
                current.clock_in.isoformat(),
            )

        if not self._sessions.update_session(current.session_id, clock_out=now, duration_minutes=minutes):
            logger.info(
                "Session %s was closed concurrently; ignoring clock-out for employee %s", current.session_id, employee_id
            )
            return None

        logger.info("Employee %s clocked out after %s minutes", employee_id, minutes)
        return replace(current, clock_out=now, duration_minutes=minutes)

    def is_active(self, employee_id: int) -> bool:
        return self._sessions.find_open_session(employee_id) is not None

    def history(
        self, employee_id: int, *, work_date: Optional[date] = None, limit: int = DEFAULT_HISTORY_LIMIT
    ) -> Sequence[AttendanceSession]:
        return self._sessions.list_for_employee(employee_id, work_date=work_date, limit=limit)
