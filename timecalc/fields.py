"""Broken-down time fields shared by dates and durations.

A :class:`BrokenDownTime` holds six signed integers. Nothing bounds them to
calendar ranges: a date may carry ``hour=30`` until it is rendered, and a
duration is a plain bag of per-unit deltas.
"""

from dataclasses import dataclass, fields, replace
from typing import Callable

# Years are counted from this epoch, matching the broken-down convention
EPOCH_YEAR = 1900

FIELD_NAMES = ("year_offset", "month", "day_of_month", "hour", "minute", "second")

DAYS_PER_WEEK = 7


@dataclass(frozen=True, kw_only=True)
class BrokenDownTime:
    year_offset: int = 0
    month: int = 0
    day_of_month: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0

    @property
    def year(self) -> int:
        """Calendar year (``year_offset`` counted from 1900)."""
        return self.year_offset + EPOCH_YEAR

    def date_part(self) -> "BrokenDownTime":
        """Copy with the time-of-day fields cleared."""
        return replace(self, hour=0, minute=0, second=0)

    def __str__(self) -> str:
        parts = ", ".join(f"{f.name}={getattr(self, f.name)}" for f in fields(self))
        return f"BrokenDownTime({parts})"


def _fieldwise(
    lhs: BrokenDownTime, rhs: BrokenDownTime, fn: Callable[[int, int], int]
) -> BrokenDownTime:
    return BrokenDownTime(
        **{name: fn(getattr(lhs, name), getattr(rhs, name)) for name in FIELD_NAMES}
    )


def add_fields(lhs: BrokenDownTime, rhs: BrokenDownTime) -> BrokenDownTime:
    """Field-wise sum. No carrying between fields."""
    return _fieldwise(lhs, rhs, lambda a, b: a + b)


def subtract_fields(lhs: BrokenDownTime, rhs: BrokenDownTime) -> BrokenDownTime:
    """Field-wise difference. No borrowing between fields."""
    return _fieldwise(lhs, rhs, lambda a, b: a - b)


def negate_fields(value: BrokenDownTime) -> BrokenDownTime:
    return subtract_fields(BrokenDownTime(), value)
