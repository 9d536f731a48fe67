"""Rendering of computation results.

Dates are normalized (out-of-range fields carried into a valid UTC
timestamp) and shown in the asctime layout. Durations are shown raw, one field
per line, since their fields are independent deltas.
"""

import logging
from datetime import datetime, timezone

from dateutil.relativedelta import relativedelta

from timecalc.errors import TimeOverflowError
from timecalc.fields import EPOCH_YEAR, BrokenDownTime
from timecalc.operand import Date, Duration, Operand

logger = logging.getLogger(__name__)

_EPOCH = datetime(EPOCH_YEAR, 1, 1, tzinfo=timezone.utc)
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Fixed English names, independent of the locale
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# (label, field) in display order
DURATION_LABELS = (
    ("year", "year_offset"),
    ("mont", "month"),
    ("days", "day_of_month"),
    ("hour", "hour"),
    ("mins", "minute"),
    ("secs", "second"),
)


def normalize_as_date(value: BrokenDownTime) -> datetime:
    """Carry out-of-range fields into a valid UTC datetime.

    Months carry into years first; then days, hours, minutes and seconds are
    added as a span from the first of the resulting month, so ``month=13``
    is February of the next year and ``day_of_month=0`` is the last day of the
    previous month.

    Raises:
        TimeOverflowError: If the result is before the 1970 epoch or past
            year 9999
    """
    try:
        month_start = _EPOCH + relativedelta(years=value.year_offset, months=value.month)
        result = month_start + relativedelta(
            days=value.day_of_month - 1,
            hours=value.hour,
            minutes=value.minute,
            seconds=value.second,
        )
    except (OverflowError, ValueError) as exc:
        raise TimeOverflowError(f"time value overflow ({value})") from exc
    if result < _UNIX_EPOCH:
        raise TimeOverflowError(f"time value overflow ({value} is before 1970)")
    logger.debug("normalized %s to %s", value, result.isoformat())
    return result


def format_asctime(moment: datetime) -> str:
    """Format in the asctime layout, ``Thu Jan 11 00:00:00 2024\\n``.

    The day is space-padded, the year is not padded, and the text ends with a
    newline, as C's asctime() does.
    """
    weekday = _WEEKDAYS[moment.weekday()]
    month = _MONTHS[moment.month - 1]
    return f"{weekday} {month}{moment.day:3d} {moment:%H:%M:%S} {moment.year}\n"


def render_date(value: BrokenDownTime) -> str:
    return f"date: {format_asctime(normalize_as_date(value))}"


def render_duration(value: BrokenDownTime) -> str:
    lines = ["DURATION:"]
    lines.extend(f"{label}: {getattr(value, name)}" for label, name in DURATION_LABELS)
    return "\n".join(lines)


def render(result: Operand) -> str:
    """Render a computation result for display.

    Raises:
        TimeOverflowError: If a date result cannot be normalized
    """
    if isinstance(result, Date):
        return render_date(result.value)
    if isinstance(result, Duration):
        return render_duration(result.value)
    raise TypeError(f"Expected Date or Duration, got {type(result).__name__!r}")
