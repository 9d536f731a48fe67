"""Tests for operand combination rules."""

import pytest

from timecalc.arithmetic import combine
from timecalc.errors import CombineError, UsageError
from timecalc.fields import BrokenDownTime, negate_fields
from timecalc.operand import Date, Duration, Operator
from timecalc.parser import parse_operand

NEW_YEAR = Date(BrokenDownTime(year_offset=124, month=0, day_of_month=1))
MARCH = Date(BrokenDownTime(year_offset=124, month=2, day_of_month=1))
LATE = Date(
    BrokenDownTime(
        year_offset=125, month=10, day_of_month=3, hour=18, minute=5, second=59
    )
)
SPAN = Duration(
    BrokenDownTime(year_offset=1, month=-2, day_of_month=40, hour=-3, second=75)
)


def test_date_plus_duration():
    """Test that date + duration adds field-wise and stays a date."""
    result = combine(NEW_YEAR, Operator.ADD, Duration(BrokenDownTime(day_of_month=10)))

    assert result == Date(BrokenDownTime(year_offset=124, month=0, day_of_month=11))


def test_date_minus_duration_does_not_borrow():
    """Test that subtracting days below 1 leaves the month untouched."""
    result = combine(NEW_YEAR, Operator.SUBTRACT, Duration(BrokenDownTime(day_of_month=5)))

    assert result == Date(BrokenDownTime(year_offset=124, month=0, day_of_month=-4))


def test_date_minus_date_is_raw_field_difference():
    """Test that date - date subtracts fields without calendar normalization."""
    result = combine(MARCH, Operator.SUBTRACT, NEW_YEAR)

    assert result == Duration(BrokenDownTime(month=2))


def test_date_minus_date_can_have_negative_fields():
    """Test that a later month with an earlier day gives mixed signs."""
    lhs = parse_operand("2024-03-01")
    rhs = parse_operand("2024-01-31 12:00:00")

    result = combine(lhs, Operator.SUBTRACT, rhs)

    assert result == Duration(BrokenDownTime(month=2, day_of_month=-30, hour=-12))


def test_date_minus_date_is_antisymmetric():
    """Test that swapping operands negates every field."""
    forward = combine(LATE, Operator.SUBTRACT, NEW_YEAR)
    backward = combine(NEW_YEAR, Operator.SUBTRACT, LATE)

    assert isinstance(backward, Duration)
    assert negate_fields(backward.value) == forward.value


@pytest.mark.parametrize("date", [NEW_YEAR, MARCH, LATE])
def test_add_then_subtract_restores_date(date):
    """Test that (date + d) - d gives back the raw fields exactly."""
    there = combine(date, Operator.ADD, SPAN)
    back = combine(there, Operator.SUBTRACT, SPAN)

    assert back == date


def test_duration_plus_and_minus_duration():
    """Test duration arithmetic is field-wise."""
    a = Duration(BrokenDownTime(day_of_month=9, hour=1))
    b = Duration(BrokenDownTime(day_of_month=2, minute=30))

    assert combine(a, Operator.ADD, b) == Duration(
        BrokenDownTime(day_of_month=11, hour=1, minute=30)
    )
    assert combine(a, Operator.SUBTRACT, b) == Duration(
        BrokenDownTime(day_of_month=7, hour=1, minute=-30)
    )


@pytest.mark.parametrize("lhs, rhs", [(NEW_YEAR, MARCH), (LATE, LATE), (MARCH, NEW_YEAR)])
def test_adding_dates_fails(lhs, rhs):
    """Test that date + date is always rejected."""
    with pytest.raises(CombineError, match="can't add dates"):
        combine(lhs, Operator.ADD, rhs)


@pytest.mark.parametrize("op", [Operator.ADD, Operator.SUBTRACT])
def test_duration_with_date_fails(op):
    """Test that a duration cannot be on the left of a date."""
    with pytest.raises(
        CombineError, match="can't do arithmetic between duration and date"
    ):
        combine(SPAN, op, NEW_YEAR)


def test_combine_errors_are_usage_errors():
    """Test that combination errors are recoverable usage errors."""
    assert issubclass(CombineError, UsageError)
