from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Sequence

from ..core.enums import ReportType
from ..sessions.model import AttendanceReportRow


@dataclass(frozen=True)
class ReportRange:
    """Inclusive calendar-date window used to filter attendance rows."""

    start_date: date
    end_date: date

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def contains(self, value: date) -> bool:
        return self.start_date <= value <= self.end_date

    def dates(self) -> list[date]:
        return [self.start_date + timedelta(days=i) for i in range(self.days)]

    def label(self) -> str:
        if self.start_date == self.end_date:
            return self.start_date.isoformat()
        return f"{self.start_date.isoformat()}-to-{self.end_date.isoformat()}"

    def to_dict(self) -> dict:
        return {"start": self.start_date.isoformat(), "end": self.end_date.isoformat()}


@dataclass(frozen=True)
class ReportData:
    report_type: ReportType
    range: ReportRange
    rows: Sequence[AttendanceReportRow] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.rows
