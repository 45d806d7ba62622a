from __future__ import annotations

from datetime import date
from typing import Optional

from ..model import ReportRange
from .base import RangeStrategy


class DailyStrategy(RangeStrategy):
    """The reference day only."""

    def resolve(self, reference: date, custom_end: Optional[date] = None) -> ReportRange:
        return ReportRange(start_date=reference, end_date=reference)
