from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional

from ..core.constants import FIXED_UTC_OFFSET_HOURS
from ..core.exceptions import InvalidDateError

FIXED_TZ = timezone(timedelta(hours=FIXED_UTC_OFFSET_HOURS), name="AST")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise InvalidDateError(f"Invalid date: {value!r}") from None


def coerce_date(value: date | str) -> date:
    """Accept a date, a datetime (date part) or an ISO string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value)
    raise InvalidDateError(f"Invalid date: {value!r}")


def to_fixed_offset(value: datetime) -> datetime:
    """Attach or convert to UTC+3. Naive values are taken as UTC+3 wall clock."""
    if value.tzinfo is None:
        return value.replace(tzinfo=FIXED_TZ)
    return value.astimezone(FIXED_TZ)


def calendar_date_of(value: datetime) -> date:
    return to_fixed_offset(value).date()


def to_storage(value: Optional[datetime]) -> Optional[datetime]:
    """MySQL DATETIME columns hold naive UTC+3 wall-clock values."""
    if value is None:
        return None
    return to_fixed_offset(value).replace(tzinfo=None)


def from_storage(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    return to_fixed_offset(value)


def format_clock_time(value: Optional[datetime]) -> str:
    """12-hour clock in UTC+3, e.g. '09:05 AM'."""
    if value is None:
        return ""
    return to_fixed_offset(value).strftime("%I:%M %p")


def format_duration(minutes: Optional[int]) -> str:
    if minutes is None:
        return ""
    minutes = int(minutes)
    sign = "-" if minutes < 0 else ""
    hours, rest = divmod(abs(minutes), 60)
    return f"{sign}{hours}h {rest:02d}m"


def weekday_name(value: date) -> str:
    return value.strftime("%A")
