"""Валидация и нормализация десятичного текста."""

from bigdecimalint.core.text.string_validation import (
    DECIMAL_DIGITS,
    DECIMAL_RADIX,
    NEGATIVE_SIGN_CHAR,
    ZERO_DIGIT,
    char_at,
    is_valid_positive_decimal,
    is_valid_signed_decimal,
    strip_leading_zeros,
)

__all__ = [
    # Constants
    "DECIMAL_DIGITS",
    "DECIMAL_RADIX",
    "NEGATIVE_SIGN_CHAR",
    "ZERO_DIGIT",
    # Functions
    "char_at",
    "is_valid_positive_decimal",
    "is_valid_signed_decimal",
    "strip_leading_zeros",
]
