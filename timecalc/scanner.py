"""A cursor over a token, consuming recognized prefixes of the remaining text.

Every ``take_*`` method either consumes input and returns what it read, or
returns ``None`` and leaves the cursor where it was.
"""

from collections.abc import Iterable


class Scanner:
    def __init__(self, text: str, pos: int = 0):
        self.text: str = text
        self.pos: int = pos

    @property
    def rest(self) -> str:
        return self.text[self.pos :]

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_spaces(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def take_literal(self, literal: str) -> str | None:
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return literal
        return None

    def take_keyword(self, keywords: Iterable[str]) -> str | None:
        """Consume the first keyword, in the given order, that prefixes the rest."""
        for keyword in keywords:
            if self.take_literal(keyword) is not None:
                return keyword
        return None

    def take_digits(self, max_digits: int, min_digits: int = 1) -> str | None:
        end = self.pos
        limit = min(len(self.text), self.pos + max_digits)
        while end < limit and self.text[end] in "0123456789":
            end += 1
        if end - self.pos < min_digits:
            return None
        digits = self.text[self.pos : end]
        self.pos = end
        return digits

    def take_number(self, max_digits: int, lo: int, hi: int) -> int | None:
        """Consume an unsigned field of up to ``max_digits`` digits in [lo, hi].

        Leading whitespace is skipped, as numeric conversions in strptime do.
        """
        start = self.pos
        self.skip_spaces()
        digits = self.take_digits(max_digits)
        if digits is None or not lo <= int(digits) <= hi:
            self.pos = start
            return None
        return int(digits)

    def take_signed_int(self) -> int | None:
        """Consume ``[spaces][+|-]digits`` of any length."""
        start = self.pos
        self.skip_spaces()
        sign = self.take_keyword(("+", "-"))
        digits = self.take_digits(len(self.text))
        if digits is None:
            self.pos = start
            return None
        try:
            value = int(digits)
        except ValueError:
            # Beyond the interpreter's integer conversion limit
            self.pos = start
            return None
        return -value if sign == "-" else value
