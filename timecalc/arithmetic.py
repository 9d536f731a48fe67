"""Combination rules for operands.

All arithmetic is field-wise over the six broken-down fields, with no carrying
or borrowing. The result of a date computation is only brought back into
calendar range when it is rendered (see :mod:`timecalc.presentation`).

=========  =========  ========  ==================================
lhs        rhs        op        result
=========  =========  ========  ==================================
Date       Date       ``+``     error
Date       Date       ``-``     Duration, lhs - rhs
Date       Duration   ``+/-``   Date
Duration   Date       ``+/-``   error
Duration   Duration   ``+/-``   Duration
=========  =========  ========  ==================================
"""

import logging

from timecalc.errors import CombineError
from timecalc.fields import BrokenDownTime, add_fields, subtract_fields
from timecalc.operand import Date, Duration, Operand, Operator

logger = logging.getLogger(__name__)


def _apply(op: Operator, lhs: BrokenDownTime, rhs: BrokenDownTime) -> BrokenDownTime:
    if op is Operator.ADD:
        return add_fields(lhs, rhs)
    return subtract_fields(lhs, rhs)


def combine(lhs: Operand, op: Operator, rhs: Operand) -> Operand:
    """Apply ``op`` to two operands.

    Example:
        >>> start = Date(BrokenDownTime(year_offset=124, month=0, day_of_month=1))
        >>> combine(start, Operator.ADD, Duration(BrokenDownTime(day_of_month=10)))
        Date(value=BrokenDownTime(year_offset=124, month=0, day_of_month=11, hour=0, minute=0, second=0))

    Raises:
        CombineError: For date + date, and for a duration on the left of a date
    """
    if isinstance(lhs, Date):
        if isinstance(rhs, Date):
            if op is Operator.ADD:
                raise CombineError("can't add dates")
            logger.debug("date - date -> duration")
            return Duration(subtract_fields(lhs.value, rhs.value))
        logger.debug("date %s duration -> date", op.value)
        return Date(_apply(op, lhs.value, rhs.value))

    if isinstance(rhs, Date):
        raise CombineError("can't do arithmetic between duration and date")
    logger.debug("duration %s duration -> duration", op.value)
    return Duration(_apply(op, lhs.value, rhs.value))
