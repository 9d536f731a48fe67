from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from timecalc.fields import BrokenDownTime


@dataclass(frozen=True)
class Date:
    """An absolute calendar value. Fields are carried only when rendered."""

    value: BrokenDownTime

    def __str__(self) -> str:
        return f"Date({self.value})"


@dataclass(frozen=True)
class Duration:
    """A relative value: each field is an independent signed delta."""

    value: BrokenDownTime

    def __str__(self) -> str:
        return f"Duration({self.value})"


Operand: TypeAlias = Date | Duration


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
