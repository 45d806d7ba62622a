from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import coerce_date
from ..core.enums import ReportType
from .factory import RangeStrategyFactory
from .model import ReportRange


class ReportRangeResolver:
    """Map (reference date, report type, optional end) to an inclusive date range.

    Works on pure calendar dates; no clock or storage access happens here.
    """

    def __init__(self, *, strategy_factory: Optional[RangeStrategyFactory] = None):
        self._factory = strategy_factory or RangeStrategyFactory()

    def resolve(
        self,
        reference_date: date | str,
        report_type: ReportType | str,
        custom_end_date: date | str | None = None,
    ) -> ReportRange:
        kind = ReportType.parse(report_type)
        reference = coerce_date(reference_date)
        custom_end = None
        if kind is ReportType.CUSTOM and custom_end_date not in (None, ""):
            custom_end = coerce_date(custom_end_date)
        return self._factory.for_type(kind).resolve(reference, custom_end)
