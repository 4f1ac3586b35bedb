"""
BigDecimalInt — Знаковое десятичное целое произвольной точности

Immutable Pydantic модель: знак + магнитуда в виде строки десятичных цифр.
Любая операция создаёт новый нормализованный экземпляр.

АЛГОРИТМЫ:
- Сложение/вычитание: поразрядно "в столбик" (digit_arithmetic)
- Каждая операция сводится анализом знаков к форме "a op b, где a, b > 0"
- Умножение: повторное сложение (линейно по ЗНАЧЕНИЮ множителя)
- Деление: повторное вычитание (линейно по значению частного),
  усечение к нулю
- Остаток: x - y * (x / y)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sign == ZERO  <=>  digits == "0" (отрицательного нуля нет)
2. digits непустая, только 0-9, без ведущих нулей (кроме самого "0")
3. Нормализация выполняется явно в валидаторе конструктора
4. Деление на ноль → DivisionResult с ok=False (не exception)
5. Остаток по модулю ноль → ModulusByZeroViolation (ошибка контракта)
"""

import logging
from dataclasses import dataclass
from typing import Any, Final, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from bigdecimalint.core.contracts.validators import validate_big_decimal_int
from bigdecimalint.core.domain.sign import Sign
from bigdecimalint.core.math.digit_arithmetic import (
    add_positive_magnitudes,
    compare_magnitudes,
    int_to_magnitude,
    magnitude_to_int,
    subtract_positive_magnitudes,
)
from bigdecimalint.core.text.string_validation import (
    NEGATIVE_SIGN_CHAR,
    ZERO_DIGIT,
    char_at,
    is_valid_signed_decimal,
    strip_leading_zeros,
)

logger = logging.getLogger(__name__)

# Причина неуспешного деления в DivisionResult
DIVISION_BY_ZERO_REASON: Final[str] = "division_by_zero"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDecimalText(ValueError):
    """Текст не является десятичной записью вида -?[0-9]+ (BigDecimalInt.parse)."""

    pass


class DecimalDivisionByZero(ZeroDivisionError):
    """Извлечение частного из неуспешного DivisionResult (делитель == 0)."""

    pass


class ModulusByZeroViolation(ZeroDivisionError):
    """
    Нарушение контракта: остаток по модулю ноль.

    В отличие от деления (которое возвращает DivisionResult с ok=False),
    x % 0 считается ошибкой вызывающего кода.
    """

    pass


# =============================================================================
# BIG DECIMAL INT MODEL
# =============================================================================


class BigDecimalInt(BaseModel):
    """
    Знаковое десятичное целое произвольной точности.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.

    Создание:
        BigDecimalInt.from_string("-00042")  → -42 (или None для невалидного текста)
        BigDecimalInt.from_int(42)
        BigDecimalInt.parse("42")            → InvalidDecimalText для невалидного текста
        BigDecimalInt.zero()
    """

    digits: str = Field(
        ZERO_DIGIT,
        min_length=1,
        pattern=r"^[0-9]+$",
        description="Магнитуда: десятичные цифры, старший разряд первым",
    )
    sign: Sign = Field(Sign.ZERO, description="Знак (negative/zero/positive)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits")
    @classmethod
    def normalize_digits(cls, v: str) -> str:
        """Удаление ведущих нулей ("007" → "7", "000" → "0")."""
        return strip_leading_zeros(v)

    @model_validator(mode="after")
    def validate_sign_matches_magnitude(self) -> "BigDecimalInt":
        """
        Проверка согласованности знака и магнитуды.

        Инвариант: sign == ZERO <=> digits == "0".
        """
        is_zero_magnitude = self.digits == ZERO_DIGIT
        if is_zero_magnitude != (self.sign is Sign.ZERO):
            raise ValueError(
                f"sign {self.sign.value!r} is inconsistent with magnitude {self.digits!r}"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "BigDecimalInt":
        """Канонический ноль: digits="0", sign=ZERO."""
        return cls()

    @classmethod
    def from_string(cls, text: str) -> Optional["BigDecimalInt"]:
        """
        Создание из десятичной записи.

        Args:
            text: Строка вида -?[0-9]+ (ведущие нули допускаются)

        Returns:
            Нормализованный BigDecimalInt или None для невалидного текста

        Examples:
            >>> BigDecimalInt.from_string("00042").value
            '42'
            >>> BigDecimalInt.from_string("-0").value
            '0'
            >>> BigDecimalInt.from_string("12a") is None
            True
        """
        if not isinstance(text, str) or not is_valid_signed_decimal(text):
            logger.debug("Rejected decimal text: %r", text)
            return None

        normalized = strip_leading_zeros(text)

        if normalized == ZERO_DIGIT:
            return cls.zero()

        if char_at(normalized, 0) == NEGATIVE_SIGN_CHAR:
            return cls(digits=normalized[1:], sign=Sign.NEGATIVE)

        return cls(digits=normalized, sign=Sign.POSITIVE)

    @classmethod
    def from_int(cls, value: int) -> "BigDecimalInt":
        """
        Создание из int любой длины через его десятичное представление.

        Цифры строятся блоками (int_to_magnitude), без str(int) и его
        лимита sys.int_max_str_digits.

        Raises:
            TypeError: Если value не int (bool также отклоняется)
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"from_int expects int, got {type(value).__name__}")

        magnitude = int_to_magnitude(abs(value))
        text = NEGATIVE_SIGN_CHAR + magnitude if value < 0 else magnitude

        result = cls.from_string(text)
        if result is None:
            raise InvalidDecimalText(
                f"Cannot build decimal text for int of {value.bit_length()} bits"
            )
        return result

    @classmethod
    def parse(cls, text: str) -> "BigDecimalInt":
        """
        Создание из десятичной записи с exception вместо None.

        Raises:
            InvalidDecimalText: Если text не соответствует -?[0-9]+
        """
        result = cls.from_string(text)
        if result is None:
            raise InvalidDecimalText(f"Not a decimal integer literal: {text!r}")
        return result

    @classmethod
    def coerce(cls, value: Union["BigDecimalInt", int, str]) -> "BigDecimalInt":
        """
        Приведение BigDecimalInt / int / str к BigDecimalInt.

        Raises:
            InvalidDecimalText: Для невалидной строки
            TypeError: Для неподдерживаемого типа
        """
        if isinstance(value, BigDecimalInt):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        return cls.from_int(value)

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "BigDecimalInt":
        """
        Создание из JSON контракта big_decimal_int.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
        """
        validate_big_decimal_int(data)
        return cls.model_validate(data)

    def to_contract(self) -> dict[str, Any]:
        """Сериализация в JSON контракт big_decimal_int."""
        return self.model_dump(mode="json")

    # -------------------------------------------------------------------------
    # Производные свойства
    # -------------------------------------------------------------------------

    @property
    def value(self) -> str:
        """Каноническая знаковая запись ("-" только для отрицательных)."""
        if self.is_negative:
            return NEGATIVE_SIGN_CHAR + self.digits
        return self.digits

    @property
    def magnitude(self) -> "BigDecimalInt":
        """Расстояние до нуля: те же цифры, знак POSITIVE (или ZERO)."""
        if self.is_negative:
            return BigDecimalInt(digits=self.digits, sign=Sign.POSITIVE)
        return self

    @property
    def is_positive(self) -> bool:
        return self.sign is Sign.POSITIVE

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    @property
    def is_zero(self) -> bool:
        return self.sign is Sign.ZERO

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "BigDecimalInt") -> int:
        """
        Трёхзначное сравнение.

        Порядок: сначала по знаку (NEGATIVE < ZERO < POSITIVE), затем по
        магнитуде (длина, потом цифры); для отрицательных — инвертирован.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        if self.sign is not other.sign:
            return -1 if self.sign < other.sign else 1

        if self.is_zero:
            return 0

        order = compare_magnitudes(self.digits, other.digits)
        return -order if self.is_negative else order

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigDecimalInt):
            return NotImplemented
        return self.sign is other.sign and self.digits == other.digits

    def __hash__(self) -> int:
        return hash((self.sign, self.digits))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigDecimalInt):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BigDecimalInt):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BigDecimalInt):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BigDecimalInt):
            return NotImplemented
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def negate(self) -> "BigDecimalInt":
        """Смена знака; ноль остаётся нулём."""
        if self.is_zero:
            return self
        return BigDecimalInt(digits=self.digits, sign=self.sign.toggled())

    def add(self, other: "BigDecimalInt") -> "BigDecimalInt":
        """
        Сложение.

        Сводится к форме a + b или -a + -b (a, b > 0):
        - 0 — нейтральный элемент
        - a + -b == a - b
        - -a + b == b - a
        """
        if self.is_zero:
            return other
        if other.is_zero:
            return self

        if self.sign is not other.sign:
            if self.is_positive:
                return self.subtract(other.negate())
            return other.subtract(self.negate())

        return BigDecimalInt(
            digits=add_positive_magnitudes(self.digits, other.digits),
            sign=self.sign,
        )

    def subtract(self, other: "BigDecimalInt") -> "BigDecimalInt":
        """
        Вычитание.

        Сводится к форме a - b (a, b > 0):
        - a - -b == a + b,  -a - b == -a + -b
        - -a - -b == b - a
        """
        if self == other:
            return BigDecimalInt.zero()
        if self.is_zero:
            return other.negate()
        if other.is_zero:
            return self

        if self.sign is not other.sign:
            return self.add(other.negate())
        if self.is_negative:
            return other.negate().subtract(self.negate())

        # a - b, a, b > 0 и a != b
        return BigDecimalInt(
            digits=subtract_positive_magnitudes(self.digits, other.digits),
            sign=Sign.POSITIVE if self > other else Sign.NEGATIVE,
        )

    def multiply(self, other: "BigDecimalInt") -> "BigDecimalInt":
        """
        Умножение повторным сложением.

        Магнитуда self прибавляется к аккумулятору |other| раз; счётчик —
        сам BigDecimalInt, инкрементируемый от нуля до |other|.
        """
        if self.is_zero or other.is_zero:
            return BigDecimalInt.zero()

        sign = Sign.POSITIVE if self.sign is other.sign else Sign.NEGATIVE
        limit = other.magnitude

        accumulator = ZERO_DIGIT
        counter = BigDecimalInt.zero()
        while counter < limit:
            accumulator = add_positive_magnitudes(accumulator, self.digits)
            counter = counter.successor()

        return BigDecimalInt(digits=accumulator, sign=sign)

    def divide(self, divisor: "BigDecimalInt") -> "DivisionResult":
        """
        Целочисленное деление повторным вычитанием (усечение к нулю).

        Args:
            divisor: Делитель

        Returns:
            DivisionResult: ok=False при divisor == 0, иначе частное

        Examples:
            >>> BigDecimalInt.from_int(100).divide(BigDecimalInt.from_int(9)).quotient.value
            '11'
            >>> BigDecimalInt.from_int(-7).divide(BigDecimalInt.from_int(2)).quotient.value
            '-3'
        """
        if divisor.is_zero:
            logger.debug("Division of %s by zero", self.value)
            return DivisionResult.failure(DIVISION_BY_ZERO_REASON)

        if self.is_zero:
            return DivisionResult.success(BigDecimalInt.zero())

        remainder = self.magnitude
        divisor_mag = divisor.magnitude
        count = BigDecimalInt.zero()

        while remainder >= divisor_mag:
            remainder = remainder.subtract(divisor_mag)
            count = count.successor()

        if not count.is_zero and self.sign is not divisor.sign:
            count = count.negate()

        return DivisionResult.success(count)

    def modulus(self, other: "BigDecimalInt") -> "BigDecimalInt":
        """
        Остаток: x - y * (x / y).

        Знак остатка совпадает со знаком делимого (усечение к нулю):
        -7 % 2 == -1, 7 % -2 == 1.

        Raises:
            ModulusByZeroViolation: Если other == 0
        """
        if other.is_zero:
            raise ModulusByZeroViolation(f"Cannot compute {self.value} mod 0")

        quotient = self.divide(other).unwrap()
        return self.subtract(other.multiply(quotient))

    def successor(self) -> "BigDecimalInt":
        """self + 1"""
        return self.add(ONE)

    def predecessor(self) -> "BigDecimalInt":
        """self - 1"""
        return self.subtract(ONE)

    def distance_to(self, other: "BigDecimalInt") -> "BigDecimalInt":
        """Расстояние (со знаком) до other: other - self."""
        return other.subtract(self)

    def advanced_by(self, step: "BigDecimalInt") -> "BigDecimalInt":
        """Сдвиг на step: self + step."""
        return self.add(step)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigDecimalInt":
        return self.negate()

    def __pos__(self) -> "BigDecimalInt":
        return self

    def __abs__(self) -> "BigDecimalInt":
        return self.magnitude

    def __add__(self, other: object) -> "BigDecimalInt":
        operand = _as_operand(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    def __radd__(self, other: object) -> "BigDecimalInt":
        operand = _as_operand(other)
        if operand is None:
            return NotImplemented
        return operand.add(self)

    def __sub__(self, other: object) -> "BigDecimalInt":
        operand = _as_operand(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: object) -> "BigDecimalInt":
        operand = _as_operand(other)
        if operand is None:
            return NotImplemented
        return operand.subtract(self)

    def __mul__(self, other: object) -> "BigDecimalInt":
        operand = _as_operand(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    def __rmul__(self, other: object) -> "BigDecimalInt":
        operand = _as_operand(other)
        if operand is None:
            return NotImplemented
        return operand.multiply(self)

    def __floordiv__(self, other: object) -> "BigDecimalInt":
        # Усечение к нулю, а не floor как у int: -7 // 2 == -3
        operand = _as_operand(other)
        if operand is None:
            return NotImplemented
        return self.divide(operand).unwrap()

    def __rfloordiv__(self, other: object) -> "BigDecimalInt":
        operand = _as_operand(other)
        if operand is None:
            return NotImplemented
        return operand.divide(self).unwrap()

    def __mod__(self, other: object) -> "BigDecimalInt":
        operand = _as_operand(other)
        if operand is None:
            return NotImplemented
        return self.modulus(operand)

    def __rmod__(self, other: object) -> "BigDecimalInt":
        operand = _as_operand(other)
        if operand is None:
            return NotImplemented
        return operand.modulus(self)

    def __divmod__(self, other: object) -> tuple["BigDecimalInt", "BigDecimalInt"]:
        operand = _as_operand(other)
        if operand is None:
            return NotImplemented
        return self // operand, self % operand

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return not self.is_zero

    def __int__(self) -> int:
        magnitude = magnitude_to_int(self.digits)
        return -magnitude if self.is_negative else magnitude

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"BigDecimalInt({self.value!r})"


def _as_operand(value: object) -> Optional[BigDecimalInt]:
    """Операнд для операторов: BigDecimalInt или int, иначе None."""
    if isinstance(value, BigDecimalInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigDecimalInt.from_int(value)
    return None


ONE: Final[BigDecimalInt] = BigDecimalInt(digits="1", sign=Sign.POSITIVE)


# =============================================================================
# DIVISION RESULT
# =============================================================================


@dataclass(frozen=True)
class DivisionResult:
    """
    Результат деления: частное либо причина отказа.

    ok=True  → quotient заполнен, reason == ""
    ok=False → quotient is None, reason == DIVISION_BY_ZERO_REASON
    """

    ok: bool
    quotient: Optional[BigDecimalInt]
    reason: str

    @classmethod
    def success(cls, quotient: BigDecimalInt) -> "DivisionResult":
        return cls(ok=True, quotient=quotient, reason="")

    @classmethod
    def failure(cls, reason: str) -> "DivisionResult":
        return cls(ok=False, quotient=None, reason=reason)

    def unwrap(self) -> BigDecimalInt:
        """
        Частное для успешного результата.

        Raises:
            DecimalDivisionByZero: Если деление не выполнено
        """
        if not self.ok or self.quotient is None:
            raise DecimalDivisionByZero(f"Division failed: {self.reason}")
        return self.quotient
