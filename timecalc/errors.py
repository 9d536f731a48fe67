"""Error taxonomy for timecalc.

Two tiers:

- :class:`UsageError` covers everything a user can cause (bad tokens, a
  disallowed operand/operator combination). The CLI reports it and exits 1.
- :class:`InvariantViolation` covers conditions that should never happen in
  practice (unreadable clock, a date that cannot be represented). The CLI
  hands these to :func:`abort`, which terminates the process abruptly.
"""

import logging
import os
import sys
from typing import NoReturn

logger = logging.getLogger(__name__)


class TimecalcError(Exception):
    pass


class UsageError(TimecalcError):
    pass


class ParseError(UsageError, ValueError):
    """A token did not match any accepted grammar."""

    def __init__(self, token: str, message: str):
        super().__init__(message)
        self.token: str = token


class IllformedOperandError(ParseError):
    def __init__(self, token: str):
        super().__init__(
            token,
            f"Operand {token!r} is neither a date nor a duration.\n"
            f"Dates look like: 2024-01-31, 12:30:00, 2024-01-31 12:30:00+02:00, TODAY\n"
            f"Durations look like: 3days, 1years-2months, 90mins",
        )


class IllformedOperatorError(ParseError):
    def __init__(self, token: str):
        super().__init__(token, f"Operator must be '+' or '-', got {token!r}")


class CombineError(UsageError):
    """The operand kinds cannot be combined with the requested operator."""


class InvariantViolation(TimecalcError):
    pass


class ClockError(InvariantViolation):
    pass


class TimeOverflowError(InvariantViolation, OverflowError):
    pass


def abort(message: str) -> NoReturn:
    """Report an invariant violation and terminate without cleanup."""
    logger.debug("invariant violation: %s", message)
    sys.stderr.write(f"assertion error: {message}\n")
    sys.stderr.flush()
    os.abort()
