from __future__ import annotations

from enum import Enum

from .exceptions import InvalidReportTypeError


class ReportType(str, Enum):
    """Kinds of attendance report; each maps to one date-range rule."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: "ReportType | str") -> "ReportType":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidReportTypeError(f"Unsupported report type: {value!r}")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise InvalidReportTypeError(f"Unsupported report type: {value!r}") from None
