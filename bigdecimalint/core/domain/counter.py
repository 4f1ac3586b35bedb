"""
BigDecimalIntVar — Переменная с prefix/postfix инкрементом и декрементом

BigDecimalInt неизменяем, поэтому "++x" / "x++" выражаются через
ячейку-переменную, которая перепривязывается к новому значению:

    var = BigDecimalIntVar(9)
    var.increment_in_place()   → 10, var.value == 10   (prefix ++)
    var.post_increment()       → 10, var.value == 11   (postfix ++)

Ячейка не потокобезопасна — это локальная переменная вызывающего кода.
"""

from typing import Union

from bigdecimalint.core.domain.big_decimal_int import ONE, BigDecimalInt, DivisionResult


class BigDecimalIntVar:
    """Изменяемая ячейка, хранящая текущий BigDecimalInt."""

    def __init__(self, initial: Union[BigDecimalInt, int, str] = 0):
        self._value = BigDecimalInt.coerce(initial)

    @property
    def value(self) -> BigDecimalInt:
        return self._value

    def set(self, new_value: Union[BigDecimalInt, int, str]) -> None:
        self._value = BigDecimalInt.coerce(new_value)

    # -------------------------------------------------------------------------
    # Increment / Decrement
    # -------------------------------------------------------------------------

    def increment_in_place(self) -> BigDecimalInt:
        """Prefix ++: прибавляет 1 и возвращает новое значение."""
        self._value = self._value.add(ONE)
        return self._value

    def post_increment(self) -> BigDecimalInt:
        """Postfix ++: прибавляет 1 и возвращает значение до изменения."""
        snapshot = self._value
        self._value = snapshot.add(ONE)
        return snapshot

    def decrement_in_place(self) -> BigDecimalInt:
        """Prefix --: вычитает 1 и возвращает новое значение."""
        self._value = self._value.subtract(ONE)
        return self._value

    def post_decrement(self) -> BigDecimalInt:
        """Postfix --: вычитает 1 и возвращает значение до изменения."""
        snapshot = self._value
        self._value = snapshot.subtract(ONE)
        return snapshot

    # -------------------------------------------------------------------------
    # Compound assignment (+=, -=, *=, /=)
    # -------------------------------------------------------------------------

    def add_assign(self, delta: Union[BigDecimalInt, int, str]) -> BigDecimalInt:
        self._value = self._value.add(BigDecimalInt.coerce(delta))
        return self._value

    def subtract_assign(self, delta: Union[BigDecimalInt, int, str]) -> BigDecimalInt:
        self._value = self._value.subtract(BigDecimalInt.coerce(delta))
        return self._value

    def multiply_assign(self, factor: Union[BigDecimalInt, int, str]) -> BigDecimalInt:
        self._value = self._value.multiply(BigDecimalInt.coerce(factor))
        return self._value

    def divide_assign(self, divisor: Union[BigDecimalInt, int, str]) -> DivisionResult:
        """
        /=: перепривязка к частному.

        При делении на ноль значение не меняется, возвращается
        DivisionResult с ok=False.
        """
        result = self._value.divide(BigDecimalInt.coerce(divisor))
        if result.ok and result.quotient is not None:
            self._value = result.quotient
        return result

    def __repr__(self) -> str:
        return f"BigDecimalIntVar({self._value.value!r})"
