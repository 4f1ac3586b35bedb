"""
Core math modules для bigdecimalint

Поразрядные алгоритмы над магнитудами (строками десятичных цифр).
"""

# Digit Arithmetic (сложение/вычитание "в столбик")
from bigdecimalint.core.math.digit_arithmetic import (
    INT_CHUNK_DIGITS,
    AlignedMagnitudes,
    MagnitudeContractViolation,
    add_positive_magnitudes,
    align_magnitudes,
    compare_magnitudes,
    int_to_magnitude,
    magnitude_to_int,
    subtract_positive_magnitudes,
)

__all__ = [
    # Constants
    "INT_CHUNK_DIGITS",
    # Exceptions
    "MagnitudeContractViolation",
    # Types
    "AlignedMagnitudes",
    # Functions
    "add_positive_magnitudes",
    "align_magnitudes",
    "compare_magnitudes",
    "int_to_magnitude",
    "magnitude_to_int",
    "subtract_positive_magnitudes",
]
