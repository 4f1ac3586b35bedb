"""
Domain models and value objects.

Contains BigDecimalInt, its Sign, the increment/decrement variable cell and
stride helpers.
"""

from bigdecimalint.core.domain.big_decimal_int import (
    DIVISION_BY_ZERO_REASON,
    BigDecimalInt,
    DecimalDivisionByZero,
    DivisionResult,
    InvalidDecimalText,
    ModulusByZeroViolation,
)
from bigdecimalint.core.domain.counter import BigDecimalIntVar
from bigdecimalint.core.domain.sign import Sign
from bigdecimalint.core.domain.stride import (
    advanced,
    distance,
    stride,
    stride_through,
)

__all__ = [
    # BigDecimalInt model
    "BigDecimalInt",
    "Sign",
    "DivisionResult",
    "DIVISION_BY_ZERO_REASON",
    # Exceptions
    "DecimalDivisionByZero",
    "InvalidDecimalText",
    "ModulusByZeroViolation",
    # Increment / decrement
    "BigDecimalIntVar",
    # Stride
    "advanced",
    "distance",
    "stride",
    "stride_through",
]
