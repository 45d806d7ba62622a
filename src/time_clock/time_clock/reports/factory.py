from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ReportType
from ..core.exceptions import InvalidReportTypeError
from .strategies.base import RangeStrategy
from .strategies.custom_strategy import CustomStrategy
from .strategies.daily_strategy import DailyStrategy
from .strategies.monthly_strategy import MonthlyStrategy
from .strategies.weekly_strategy import WeeklyStrategy


@dataclass
class RangeStrategyFactory:
    """Factory Pattern: map each report type to its range strategy."""

    def for_type(self, report_type: ReportType) -> RangeStrategy:
        if report_type is ReportType.DAILY:
            return DailyStrategy()
        if report_type is ReportType.WEEKLY:
            return WeeklyStrategy()
        if report_type is ReportType.MONTHLY:
            return MonthlyStrategy()
        if report_type is ReportType.CUSTOM:
            return CustomStrategy()
        raise InvalidReportTypeError(f"Unsupported report type: {report_type!r}")
