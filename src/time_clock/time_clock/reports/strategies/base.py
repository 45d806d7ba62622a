from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from ..model import ReportRange


class RangeStrategy(ABC):
    """Strategy Pattern: one date-range rule per report type."""

    @abstractmethod
    def resolve(self, reference: date, custom_end: Optional[date] = None) -> ReportRange:
        raise NotImplementedError
