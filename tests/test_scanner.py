"""Tests for the token scanner."""

from timecalc.scanner import Scanner


def test_take_number_respects_width_and_range():
    """Test that numeric fields stop at max width and check bounds."""
    scanner = Scanner("20245")
    assert scanner.take_number(4, 0, 9999) == 2024
    assert scanner.rest == "5"

    scanner = Scanner("13")
    assert scanner.take_number(2, 1, 12) is None
    assert scanner.pos == 0


def test_take_number_skips_leading_spaces():
    """Test that whitespace before a number is consumed with it."""
    scanner = Scanner("  07:")
    assert scanner.take_number(2, 0, 23) == 7
    assert scanner.rest == ":"


def test_failed_take_leaves_cursor():
    """Test that a failed take does not move the cursor."""
    scanner = Scanner(" -x")
    assert scanner.take_signed_int() is None
    assert scanner.pos == 0


def test_take_signed_int():
    """Test signed integers with either sign."""
    scanner = Scanner("-12+3 4")
    assert scanner.take_signed_int() == -12
    assert scanner.take_signed_int() == 3
    assert scanner.take_signed_int() == 4
    assert scanner.at_end()


def test_take_keyword_uses_given_order():
    """Test that the first matching keyword in order wins."""
    scanner = Scanner("months")
    assert scanner.take_keyword(["mins", "mon", "months"]) == "mon"
    assert scanner.rest == "ths"


def test_take_signed_int_past_conversion_limit():
    """Test that a number too long to convert is not consumed."""
    scanner = Scanner(" " + "9" * 5000 + "days")

    assert scanner.take_signed_int() is None
    assert scanner.pos == 0
