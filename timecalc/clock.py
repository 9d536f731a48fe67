"""Process-wide "today" snapshot.

The snapshot is the current UTC date with the time of day cleared. It is
taken once by :func:`init_today` before any token is parsed and is read-only
afterwards.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Callable

from timecalc.errors import ClockError, InvariantViolation
from timecalc.fields import EPOCH_YEAR, BrokenDownTime

logger = logging.getLogger(__name__)

_today: BrokenDownTime | None = None


def snapshot_from_timestamp(timestamp: float) -> BrokenDownTime:
    """Truncate a Unix timestamp to its UTC calendar date."""
    if timestamp < 0:
        raise ClockError(f"time value overflow (clock returned {timestamp})")
    try:
        now = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise ClockError(f"time value overflow (clock returned {timestamp})") from exc
    return BrokenDownTime(
        year_offset=now.year - EPOCH_YEAR,
        month=now.month - 1,
        day_of_month=now.day,
    )


def init_today(clock: Callable[[], float] = time.time) -> BrokenDownTime:
    """Capture the snapshot. Later calls keep the first value."""
    global _today
    if _today is None:
        _today = snapshot_from_timestamp(clock())
        logger.debug("today snapshot: %s", _today)
    return _today


def today() -> BrokenDownTime:
    if _today is None:
        raise InvariantViolation(
            "today snapshot read before init_today() was called"
        )
    return _today


def reset_today() -> None:
    """Forget the snapshot so the next init_today() reads the clock again."""
    global _today
    _today = None
