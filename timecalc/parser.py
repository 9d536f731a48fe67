"""Operand and operator grammars.

Dates::

    DATE := [YYYY-MM-DD] [[hh:mm:ss] [(+|-)hh:mm]]
          | TODAY

At least one of the date and time portions must be present. A missing date
portion defaults to the today snapshot. Text after the last recognized
portion is ignored.

Durations::

    DURATION := (<signed int><unit>)+
    unit     := years | months | weeks | days | hours | mins | secs

Repeated units add up. Text after the last recognized pair is ignored.
"""

import logging
from dataclasses import replace

from timecalc import clock
from timecalc.errors import IllformedOperandError, IllformedOperatorError
from timecalc.fields import DAYS_PER_WEEK, EPOCH_YEAR, FIELD_NAMES, BrokenDownTime
from timecalc.operand import Date, Duration, Operand, Operator
from timecalc.scanner import Scanner

logger = logging.getLogger(__name__)

TODAY = "TODAY"

# Tested in this order; the first keyword that prefixes the rest wins
_UNITS: dict[str, tuple[str, int]] = {
    "years": ("year_offset", 1),
    "months": ("month", 1),
    "weeks": ("day_of_month", DAYS_PER_WEEK),
    "days": ("day_of_month", 1),
    "hours": ("hour", 1),
    "mins": ("minute", 1),
    "secs": ("second", 1),
}


def _snapshot(today: BrokenDownTime | None) -> BrokenDownTime:
    return clock.today() if today is None else today


def _take_calendar_date(scanner: Scanner) -> tuple[int, int, int] | None:
    """Consume ``YYYY-MM-DD``; returns (year_offset, month0, day)."""
    start = scanner.pos
    year = scanner.take_number(4, 0, 9999)
    if year is not None and scanner.take_literal("-"):
        month = scanner.take_number(2, 1, 12)
        if month is not None and scanner.take_literal("-"):
            day = scanner.take_number(2, 1, 31)
            if day is not None:
                return year - EPOCH_YEAR, month - 1, day
    scanner.pos = start
    return None


def _take_time_of_day(scanner: Scanner) -> tuple[int, int, int] | None:
    """Consume ``HH:MM:SS``."""
    start = scanner.pos
    hour = scanner.take_number(2, 0, 23)
    if hour is not None and scanner.take_literal(":"):
        minute = scanner.take_number(2, 0, 59)
        if minute is not None and scanner.take_literal(":"):
            # 60 and 61 leave room for leap seconds
            second = scanner.take_number(2, 0, 61)
            if second is not None:
                return hour, minute, second
    scanner.pos = start
    return None


def _take_utc_offset(scanner: Scanner) -> tuple[int, int] | None:
    """Consume ``Z``, ``±HH``, ``±HHMM`` or ``±HH:MM``; returns signed (hours, minutes)."""
    start = scanner.pos
    scanner.skip_spaces()
    if scanner.take_literal("Z"):
        return 0, 0
    sign = scanner.take_keyword(("+", "-"))
    hours = scanner.take_digits(2, min_digits=2) if sign else None
    if hours is None:
        scanner.pos = start
        return None

    minutes = "00"
    after_hours = scanner.pos
    scanner.take_literal(":")
    taken = scanner.take_digits(2, min_digits=2)
    if taken is not None and int(taken) <= 59:
        minutes = taken
    else:
        scanner.pos = after_hours

    if sign == "-":
        return -int(hours), -int(minutes)
    return int(hours), int(minutes)


def parse_date(token: str, today: BrokenDownTime | None = None) -> Date | None:
    """Parse ``token`` as a date, or return ``None`` if it is not one.

    Args:
        token: Command-line token
        today: Snapshot used for ``TODAY`` and for a missing date portion
            (defaults to the process-wide snapshot)
    """
    if token == TODAY:
        return Date(_snapshot(today))

    scanner = Scanner(token)
    calendar_date = _take_calendar_date(scanner)
    time_of_day = _take_time_of_day(scanner)
    if calendar_date is None and time_of_day is None:
        return None

    if calendar_date is None:
        value = _snapshot(today).date_part()
    else:
        year_offset, month, day = calendar_date
        value = BrokenDownTime(year_offset=year_offset, month=month, day_of_month=day)

    if time_of_day is not None:
        hour, minute, second = time_of_day
        value = replace(value, hour=hour, minute=minute, second=second)

    offset = _take_utc_offset(scanner)
    if offset is not None:
        # Local time minus its offset is UTC; carrying happens on rendering
        hours, minutes = offset
        value = replace(value, hour=value.hour - hours, minute=value.minute - minutes)

    if not scanner.at_end():
        logger.debug("date %r: ignoring trailing %r", token, scanner.rest)
    return Date(value)


def parse_duration(token: str) -> Duration | None:
    """Parse ``token`` as a sum of ``<n><unit>`` pairs, or return ``None``."""
    scanner = Scanner(token)
    totals = dict.fromkeys(FIELD_NAMES, 0)
    pairs = 0

    while not scanner.at_end():
        start = scanner.pos
        amount = scanner.take_signed_int()
        unit = scanner.take_keyword(_UNITS) if amount is not None else None
        if amount is None or unit is None:
            scanner.pos = start
            break
        name, scale = _UNITS[unit]
        totals[name] += amount * scale
        pairs += 1

    if pairs == 0:
        return None
    if not scanner.at_end():
        logger.debug("duration %r: ignoring trailing %r", token, scanner.rest)
    return Duration(BrokenDownTime(**totals))


def parse_operand(token: str, today: BrokenDownTime | None = None) -> Operand:
    """Parse a date, falling back to a duration.

    Raises:
        IllformedOperandError: If the token matches neither grammar
    """
    operand: Operand | None = parse_date(token, today)
    if operand is None:
        operand = parse_duration(token)
    if operand is None:
        raise IllformedOperandError(token)
    logger.debug("parsed %r as %s", token, operand)
    return operand


def parse_operator(token: str) -> Operator:
    """Map ``+``/``-`` to an :class:`Operator`.

    Raises:
        IllformedOperatorError: For any other token
    """
    try:
        return Operator(token)
    except ValueError:
        raise IllformedOperatorError(token) from None
