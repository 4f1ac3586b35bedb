"""
Sign — Знак десятичного целого

Ноль — отдельное состояние знака, а не "неотрицательное" значение.
Порядок: NEGATIVE < ZERO < POSITIVE.
"""

from enum import Enum


class Sign(str, Enum):
    """Знак BigDecimalInt"""

    NEGATIVE = "negative"
    ZERO = "zero"
    POSITIVE = "positive"

    @property
    def rank(self) -> int:
        """Порядковый ранг знака: -1 / 0 / +1"""
        return _SIGN_RANK[self]

    def toggled(self) -> "Sign":
        """
        Противоположный знак.

        ZERO остаётся ZERO (отрицательного нуля не существует).
        """
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        if self is Sign.NEGATIVE:
            return Sign.POSITIVE
        return Sign.ZERO

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.rank >= other.rank


_SIGN_RANK = {
    Sign.NEGATIVE: -1,
    Sign.ZERO: 0,
    Sign.POSITIVE: 1,
}
