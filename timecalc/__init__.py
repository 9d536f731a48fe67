from .arithmetic import combine
from .clock import init_today, today
from .errors import (
    ClockError,
    CombineError,
    IllformedOperandError,
    IllformedOperatorError,
    InvariantViolation,
    ParseError,
    TimecalcError,
    TimeOverflowError,
    UsageError,
)
from .fields import BrokenDownTime, add_fields, negate_fields, subtract_fields
from .operand import Date, Duration, Operand, Operator
from .parser import parse_date, parse_duration, parse_operand, parse_operator
from .presentation import normalize_as_date, render

__all__ = [
    "BrokenDownTime",
    "Date",
    "Duration",
    "Operand",
    "Operator",
    "add_fields",
    "subtract_fields",
    "negate_fields",
    "init_today",
    "today",
    "parse_date",
    "parse_duration",
    "parse_operand",
    "parse_operator",
    "combine",
    "normalize_as_date",
    "render",
    "TimecalcError",
    "UsageError",
    "ParseError",
    "IllformedOperandError",
    "IllformedOperatorError",
    "CombineError",
    "InvariantViolation",
    "ClockError",
    "TimeOverflowError",
]
