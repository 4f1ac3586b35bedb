"""
bigdecimalint — знаковые десятичные целые произвольной точности.

    >>> from bigdecimalint import BigDecimalInt
    >>> (BigDecimalInt.parse("123") + 456).value
    '579'
"""

from bigdecimalint.core.domain import (
    BigDecimalInt,
    BigDecimalIntVar,
    DecimalDivisionByZero,
    DivisionResult,
    InvalidDecimalText,
    ModulusByZeroViolation,
    Sign,
    advanced,
    distance,
    stride,
    stride_through,
)
from bigdecimalint.core.math import MagnitudeContractViolation

__all__ = [
    "BigDecimalInt",
    "BigDecimalIntVar",
    "DivisionResult",
    "Sign",
    "DecimalDivisionByZero",
    "InvalidDecimalText",
    "MagnitudeContractViolation",
    "ModulusByZeroViolation",
    "advanced",
    "distance",
    "stride",
    "stride_through",
]

__version__ = "0.1.0"
