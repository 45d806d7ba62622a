from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceSession:
    """Domain entity: one clock-in/clock-out cycle of an employee.

    A session is OPEN while clock_out is None. duration_minutes is set together
    with clock_out and never on its own. work_date is the UTC+3 calendar date of
    clock_in and is not recomputed when the session spans midnight.
    """

    session_id: Optional[int]
    employee_id: int
    clock_in: datetime
    work_date: date
    clock_out: Optional[datetime] = None
    duration_minutes: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.clock_out is None

    def to_dict(self) -> dict:
        return {
            "id": self.session_id,
            "employeeId": self.employee_id,
            "clockIn": self.clock_in.isoformat(),
            "clockOut": self.clock_out.isoformat() if self.clock_out else None,
            "duration": self.duration_minutes,
            "date": self.work_date.isoformat(),
        }


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for reports/exports: a session joined with its employee."""

    employee_code: str
    name: str
    work_date: date
    clock_in: datetime
    clock_out: Optional[datetime]
    duration_minutes: Optional[int]
