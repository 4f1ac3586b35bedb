"""
Contract Validation Module

Модуль для валидации JSON контрактов bigdecimalint.
"""

from .validators import (
    BigDecimalIntValidator,
    ContractValidator,
    SchemaLoader,
    validate_big_decimal_int,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigDecimalIntValidator",
    # Functions
    "validate_big_decimal_int",
]
