"""
StringValidation — Валидация и нормализация десятичного текста

Модуль содержит переиспользуемые предикаты и хелперы для текстового
представления десятичных целых:
- Посимвольный доступ по индексу (char_at)
- Проверка signed/positive десятичной записи
- Удаление незначащих ведущих нулей (нормализация)

ГРАММАТИКА:
    signed   := "-"? digit+
    positive := digit+
    digit    := "0" | "1" | ... | "9"

Пробелы, "+", разделители и пустая строка НЕ допускаются.
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ ДЕСЯТИЧНОЙ ЗАПИСИ
# =============================================================================

# Основание системы счисления (другие основания не поддерживаются)
DECIMAL_RADIX: Final[int] = 10

# Допустимые цифры магнитуды
DECIMAL_DIGITS: Final[str] = "0123456789"

# Единственная цифра канонического нуля
ZERO_DIGIT: Final[str] = "0"

# Префикс отрицательного числа
NEGATIVE_SIGN_CHAR: Final[str] = "-"


# =============================================================================
# ИНДЕКСНЫЙ ДОСТУП
# =============================================================================


def char_at(text: str, offset: int) -> str:
    """
    Символ строки по zero-based смещению.

    Отрицательные смещения не поддерживаются (в отличие от text[-1]).

    Args:
        text: Исходная строка
        offset: Смещение от начала строки (0 <= offset < len(text))

    Returns:
        Символ (code point) на позиции offset

    Raises:
        IndexError: Если offset вне диапазона

    Examples:
        >>> char_at("Hello", 0)
        'H'
        >>> char_at("Señor", 2)
        'ñ'
    """
    if offset < 0 or offset >= len(text):
        raise IndexError(f"offset {offset} out of range for text of length {len(text)}")

    return text[offset]


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def _is_digit_run(text: str, start: int) -> bool:
    """Все символы text[start:] — десятичные цифры, и их хотя бы одна."""
    if start >= len(text):
        return False

    for offset in range(start, len(text)):
        if char_at(text, offset) not in DECIMAL_DIGITS:
            return False

    return True


def is_valid_positive_decimal(text: str) -> bool:
    """
    Проверка неотрицательной десятичной записи (только цифры).

    Args:
        text: Проверяемая строка

    Returns:
        True если text состоит из одной или более цифр 0-9

    Examples:
        >>> is_valid_positive_decimal("123")
        True
        >>> is_valid_positive_decimal("-2408")
        False
        >>> is_valid_positive_decimal("49842948928 ")
        False
    """
    return _is_digit_run(text, 0)


def is_valid_signed_decimal(text: str) -> bool:
    """
    Проверка знаковой десятичной записи: необязательный "-" и цифры.

    Args:
        text: Проверяемая строка

    Returns:
        True если text соответствует "-"? digit+

    Examples:
        >>> is_valid_signed_decimal("-2937238728748279378947287319937")
        True
        >>> is_valid_signed_decimal("12a")
        False
        >>> is_valid_signed_decimal("-")
        False
    """
    if not text:
        return False

    start = 1 if char_at(text, 0) == NEGATIVE_SIGN_CHAR else 0
    return _is_digit_run(text, start)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def strip_leading_zeros(text: str) -> str:
    """
    Удаление незначащих ведущих нулей.

    Сохраняет ведущий "-" у ненулевых значений. Для нулевого значения
    (включая "-0", "000") возвращает ровно "0" — отрицательного нуля нет.

    Args:
        text: Валидная знаковая десятичная запись

    Returns:
        Нормализованная запись

    Raises:
        ValueError: Если text не является валидной десятичной записью

    Examples:
        >>> strip_leading_zeros("007")
        '7'
        >>> strip_leading_zeros("-00120")
        '-120'
        >>> strip_leading_zeros("-000")
        '0'
    """
    if not is_valid_signed_decimal(text):
        raise ValueError(f"Not a decimal numeral: {text!r}")

    negative = char_at(text, 0) == NEGATIVE_SIGN_CHAR
    digits = text[1:] if negative else text

    stripped = digits.lstrip(ZERO_DIGIT)
    if not stripped:
        return ZERO_DIGIT

    return NEGATIVE_SIGN_CHAR + stripped if negative else stripped
