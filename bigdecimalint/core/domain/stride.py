"""
Stride — Расстояние, сдвиг и итерация по целочисленной прямой

distance(a, b) = b - a
advanced(a, d) = a + d

stride()/stride_through() — аналог range() для BigDecimalInt:
    stride(0, 10, 3)          → 0, 3, 6, 9
    stride_through(0, 9, 3)   → 0, 3, 6, 9
    stride(5, 0, -2)          → 5, 3, 1
"""

from typing import Iterator, Union

from bigdecimalint.core.domain.big_decimal_int import BigDecimalInt

IntLike = Union[BigDecimalInt, int, str]


def distance(start: IntLike, end: IntLike) -> BigDecimalInt:
    """
    Знаковое расстояние от start до end.

    Returns:
        end - start
    """
    return BigDecimalInt.coerce(start).distance_to(BigDecimalInt.coerce(end))


def advanced(start: IntLike, step: IntLike) -> BigDecimalInt:
    """
    Значение, сдвинутое на step.

    Returns:
        start + step
    """
    return BigDecimalInt.coerce(start).advanced_by(BigDecimalInt.coerce(step))


def _iterate(start: IntLike, stop: IntLike, step: IntLike, inclusive: bool) -> Iterator[BigDecimalInt]:
    current = BigDecimalInt.coerce(start)
    limit = BigDecimalInt.coerce(stop)
    delta = BigDecimalInt.coerce(step)

    if delta.is_zero:
        raise ValueError("stride step must not be zero")

    def in_range(value: BigDecimalInt) -> bool:
        if delta.is_positive:
            return value <= limit if inclusive else value < limit
        return value >= limit if inclusive else value > limit

    while in_range(current):
        yield current
        current = current.advanced_by(delta)


def stride(start: IntLike, stop: IntLike, step: IntLike) -> Iterator[BigDecimalInt]:
    """
    Последовательность start, start+step, ... строго до stop (не включая).

    Raises:
        ValueError: Если step == 0
    """
    return _iterate(start, stop, step, inclusive=False)


def stride_through(start: IntLike, stop: IntLike, step: IntLike) -> Iterator[BigDecimalInt]:
    """
    Последовательность start, start+step, ... до stop включительно.

    Raises:
        ValueError: Если step == 0
    """
    return _iterate(start, stop, step, inclusive=True)
