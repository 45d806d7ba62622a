from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..model import ReportRange
from .base import RangeStrategy


class MonthlyStrategy(RangeStrategy):
    """First to last calendar day of the reference month."""

    def resolve(self, reference: date, custom_end: Optional[date] = None) -> ReportRange:
        first = reference.replace(day=1)
        if first.month == 12:
            next_first = first.replace(year=first.year + 1, month=1)
        else:
            next_first = first.replace(month=first.month + 1)
        return ReportRange(start_date=first, end_date=next_first - timedelta(days=1))
