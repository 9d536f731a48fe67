from datetime import datetime, timezone

import pytest

from timecalc import clock
from timecalc.fields import BrokenDownTime

# Saturday 2024-06-15, mid-afternoon UTC
PINNED_NOW = datetime(2024, 6, 15, 14, 30, 5, tzinfo=timezone.utc).timestamp()


@pytest.fixture(autouse=True)
def pinned_today():
    """Pin the process-wide today snapshot for every test."""
    clock.reset_today()
    snapshot = clock.init_today(clock=lambda: PINNED_NOW)
    yield snapshot
    clock.reset_today()


@pytest.fixture
def today() -> BrokenDownTime:
    return BrokenDownTime(year_offset=124, month=5, day_of_month=15)
