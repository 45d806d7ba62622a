from __future__ import annotations

from datetime import date
from typing import Optional

from ...core.exceptions import InvalidDateError
from ..model import ReportRange
from .base import RangeStrategy


class CustomStrategy(RangeStrategy):
    """Reference day through an explicit end day; a missing end means one day."""

    def resolve(self, reference: date, custom_end: Optional[date] = None) -> ReportRange:
        end = custom_end or reference
        if end < reference:
            raise InvalidDateError(f"End date {end.isoformat()} is before start date {reference.isoformat()}")
        return ReportRange(start_date=reference, end_date=end)
