from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..model import ReportRange
from .base import RangeStrategy


class WeeklyStrategy(RangeStrategy):
    """ISO week (Monday..Sunday) containing the reference day."""

    def resolve(self, reference: date, custom_end: Optional[date] = None) -> ReportRange:
        monday = reference - timedelta(days=reference.isoweekday() - 1)
        return ReportRange(start_date=monday, end_date=monday + timedelta(days=6))
