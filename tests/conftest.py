from __future__ import annotations

from datetime import datetime

import pytest

from src.time_clock.time_clock.common.clock import FixedClock
from src.time_clock.time_clock.common.datetime_utils import FIXED_TZ

from tests.fakes import FakeMailer, InMemoryEmployees, InMemorySessions


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 0, 0, tzinfo=FIXED_TZ)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def employees() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def sessions(employees) -> InMemorySessions:
    repo = InMemorySessions(employees)
    employees._sessions = repo
    return repo


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()
