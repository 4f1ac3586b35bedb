"""
Digit Arithmetic — Школьные алгоритмы над строками цифр

Модуль реализует поразрядную арифметику над неотрицательными магнитудами,
заданными строками десятичных цифр (старший разряд первым):
- Выравнивание двух магнитуд по правому краю (padding ведущими нулями)
- Сравнение магнитуд без учёта ведущих нулей
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow), всегда "большее минус меньшее"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. На вход принимаются только строки из цифр 0-9 (иначе
   MagnitudeContractViolation — ошибка вызывающего кода, не данных)
2. Результат всегда нормализован (без ведущих нулей, ноль = "0")
3. Знак результата определяется вызывающим кодом, здесь знаков нет
"""

from typing import Final, Literal, NamedTuple

from bigdecimalint.core.text.string_validation import (
    DECIMAL_RADIX,
    ZERO_DIGIT,
    is_valid_positive_decimal,
    strip_leading_zeros,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================


class MagnitudeContractViolation(Exception):
    """
    Нарушение контракта: в digit-хелпер передана невалидная магнитуда.

    Отрицательная, пустая или содержащая не-цифры строка означает баг
    вызывающего кода. Значение никогда не приводится молча.
    """

    pass


def _require_magnitude(value: str, name: str) -> None:
    if not isinstance(value, str) or not is_valid_positive_decimal(value):
        raise MagnitudeContractViolation(
            f"{name} must be a non-negative decimal digit string, got {value!r}"
        )


# =============================================================================
# СРАВНЕНИЕ И ВЫРАВНИВАНИЕ
# =============================================================================


class AlignedMagnitudes(NamedTuple):
    """Две магнитуды одинаковой длины, старший разряд первым."""

    greater: tuple[int, ...]
    lesser: tuple[int, ...]
    greater_side: Literal["left", "right", "equal"]


def compare_magnitudes(left: str, right: str) -> int:
    """
    Сравнение двух магнитуд.

    Сначала по длине (после удаления ведущих нулей), затем
    лексикографически — для строк одинаковой длины из цифр это совпадает
    с числовым порядком.

    Args:
        left: Магнитуда (строка цифр)
        right: Магнитуда (строка цифр)

    Returns:
        -1 если left < right, 0 если равны, +1 если left > right

    Raises:
        MagnitudeContractViolation: Если аргумент не является магнитудой

    Examples:
        >>> compare_magnitudes("99", "100")
        -1
        >>> compare_magnitudes("0042", "42")
        0
    """
    _require_magnitude(left, "left")
    _require_magnitude(right, "right")

    left_norm = strip_leading_zeros(left)
    right_norm = strip_leading_zeros(right)

    if len(left_norm) != len(right_norm):
        return -1 if len(left_norm) < len(right_norm) else 1

    if left_norm == right_norm:
        return 0

    return -1 if left_norm < right_norm else 1


def align_magnitudes(left: str, right: str) -> AlignedMagnitudes:
    """
    Выравнивание магнитуд по правому краю.

    Более короткая магнитуда дополняется ведущими нулями. Роль "greater"
    определяется числовым порядком, а не порядком аргументов.

    Args:
        left: Магнитуда (строка цифр)
        right: Магнитуда (строка цифр)

    Returns:
        AlignedMagnitudes с массивами цифр равной длины

    Examples:
        >>> align_magnitudes("7", "123")
        AlignedMagnitudes(greater=(1, 2, 3), lesser=(0, 0, 7), greater_side='right')
    """
    order = compare_magnitudes(left, right)

    if order >= 0:
        greater, lesser = left, right
        side: Literal["left", "right", "equal"] = "left" if order > 0 else "equal"
    else:
        greater, lesser = right, left
        side = "right"

    width = max(len(greater), len(lesser))

    return AlignedMagnitudes(
        greater=tuple(int(ch) for ch in greater.rjust(width, ZERO_DIGIT)),
        lesser=tuple(int(ch) for ch in lesser.rjust(width, ZERO_DIGIT)),
        greater_side=side,
    )


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_positive_magnitudes(left: str, right: str) -> str:
    """
    Сложение магнитуд "в столбик".

    Проход от младшего разряда к старшему, перенос распространяется влево;
    финальный перенос добавляет новый старший разряд.

    Args:
        left: Магнитуда (строка цифр)
        right: Магнитуда (строка цифр)

    Returns:
        Нормализованная магнитуда суммы

    Raises:
        MagnitudeContractViolation: Если аргумент не является магнитудой

    Examples:
        >>> add_positive_magnitudes("123", "456")
        '579'
        >>> add_positive_magnitudes("999", "1")
        '1000'
    """
    aligned = align_magnitudes(left, right)

    sums: list[str] = []
    carry = 0

    for top, bottom in zip(reversed(aligned.greater), reversed(aligned.lesser)):
        total = top + bottom + carry
        carry, digit = divmod(total, DECIMAL_RADIX)
        sums.append(str(digit))

    if carry > 0:
        sums.append(str(carry))

    return strip_leading_zeros("".join(reversed(sums)))


def subtract_positive_magnitudes(left: str, right: str) -> str:
    """
    Вычитание магнитуд "в столбик": |left - right|.

    Меньшая магнитуда всегда вычитается из большей независимо от порядка
    аргументов. Знак результата определяет вызывающий код.

    Args:
        left: Магнитуда (строка цифр)
        right: Магнитуда (строка цифр)

    Returns:
        Нормализованная магнитуда разности (>= 0)

    Raises:
        MagnitudeContractViolation: Если аргумент не является магнитудой

    Examples:
        >>> subtract_positive_magnitudes("1000", "1")
        '999'
        >>> subtract_positive_magnitudes("1", "1000")
        '999'
    """
    aligned = align_magnitudes(left, right)

    diffs: list[str] = []
    borrow = 0

    for top, bottom in zip(reversed(aligned.greater), reversed(aligned.lesser)):
        result = top - (bottom + borrow)

        if result >= 0:
            borrow = 0
        else:
            result += DECIMAL_RADIX
            borrow = 1

        diffs.append(str(result))

    # greater >= lesser → заём после старшего разряда невозможен
    if borrow != 0:
        raise MagnitudeContractViolation(
            f"borrow left over after subtracting {right!r} from {left!r}"
        )

    return strip_leading_zeros("".join(reversed(diffs)))


# =============================================================================
# КОНВЕРСИЯ int <-> МАГНИТУДА
# =============================================================================

# Размер блока цифр при конверсии int ↔ строка.
# str(int) / int(str) ограничены sys.int_max_str_digits (4300 цифр в 3.11+),
# поэтому конверсия идёт блоками, каждый из которых далеко ниже лимита.
INT_CHUNK_DIGITS: Final[int] = 18

_INT_CHUNK_BASE: Final[int] = DECIMAL_RADIX**INT_CHUNK_DIGITS


def int_to_magnitude(value: int) -> str:
    """
    Магнитуда неотрицательного int любой длины.

    Args:
        value: Неотрицательное целое

    Returns:
        Нормализованная строка цифр

    Raises:
        MagnitudeContractViolation: Если value отрицательное или не int

    Examples:
        >>> int_to_magnitude(1234567890123456789012345)
        '1234567890123456789012345'
        >>> len(int_to_magnitude(10**5000))
        5001
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MagnitudeContractViolation(
            f"value must be a non-negative int, got {type(value).__name__}"
            + (" < 0" if isinstance(value, int) and value < 0 else "")
        )

    if value == 0:
        return ZERO_DIGIT

    chunks: list[int] = []
    while value:
        value, chunk = divmod(value, _INT_CHUNK_BASE)
        chunks.append(chunk)

    # Старший блок без ведущих нулей, остальные дополнены до INT_CHUNK_DIGITS
    head = str(chunks[-1])
    tail = "".join(str(chunk).zfill(INT_CHUNK_DIGITS) for chunk in reversed(chunks[:-1]))
    return head + tail


def magnitude_to_int(digits: str) -> int:
    """
    Значение магнитуды как int (без ограничения на число цифр).

    Raises:
        MagnitudeContractViolation: Если digits не является магнитудой
    """
    _require_magnitude(digits, "digits")

    head_len = len(digits) % INT_CHUNK_DIGITS or INT_CHUNK_DIGITS
    result = int(digits[:head_len])

    for start in range(head_len, len(digits), INT_CHUNK_DIGITS):
        result = result * _INT_CHUNK_BASE + int(digits[start : start + INT_CHUNK_DIGITS])

    return result
