from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from .datetime_utils import FIXED_TZ, to_fixed_offset


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    """Current wall-clock time in UTC+3, independent of the host timezone."""

    def now(self) -> datetime:
        return datetime.now(FIXED_TZ)


@dataclass
class FixedClock:
    """Clock pinned to one instant; handy for scripts and tests."""

    current: datetime

    def now(self) -> datetime:
        return to_fixed_offset(self.current)
