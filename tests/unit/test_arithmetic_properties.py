"""
Property-тесты BigDecimalInt (hypothesis), int как эталон

Проверяемые инварианты:
1. Round-trip текста: from_string(s).value == str(int(s))
2. x + 0 == x, x + (-x) == 0
3. Коммутативность/ассоциативность сложения, коммутативность умножения
4. x - y == x + (-y)
5. Согласованность порядка и магнитуды при одинаковом знаке
6. y * (x / y) + (x % y) == x, деление усекается к нулю

Умножение и деление линейны по ЗНАЧЕНИЮ операнда, поэтому для них
диапазоны значений ограничены.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from bigdecimalint.core.domain import BigDecimalInt, Sign

# Большие значения — для операций, линейных по числу разрядов
big_ints = st.integers(min_value=-(10**60), max_value=10**60)

# Малые значения — для умножения/деления (линейны по значению)
small_ints = st.integers(min_value=-60, max_value=60)
small_nonzero_ints = small_ints.filter(lambda v: v != 0)

decimal_texts = st.from_regex(r"-?[0-9]{1,40}", fullmatch=True)

properties = settings(max_examples=150, deadline=None)


def n(value: int) -> BigDecimalInt:
    return BigDecimalInt.from_int(value)


def truncated_div(x: int, y: int) -> int:
    """Деление с усечением к нулю (int // использует floor)."""
    q = abs(x) // abs(y)
    return q if (x >= 0) == (y > 0) else -q


# =============================================================================
# ТЕСТЫ: Construction
# =============================================================================


@properties
@given(decimal_texts)
def test_text_round_trip(text: str) -> None:
    number = BigDecimalInt.from_string(text)

    assert number is not None
    assert number.value == str(int(text))
    assert BigDecimalInt.from_string(number.value) == number


@properties
@given(big_ints)
def test_int_round_trip_and_sign_invariant(value: int) -> None:
    number = n(value)

    assert int(number) == value
    assert (number.sign is Sign.ZERO) == (number.digits == "0")
    assert number.digits == str(abs(value))


# =============================================================================
# ТЕСТЫ: Addition / Subtraction
# =============================================================================


@properties
@given(big_ints)
def test_additive_identity_and_inverse(value: int) -> None:
    number = n(value)

    assert number + BigDecimalInt.zero() == number
    assert number + (-number) == BigDecimalInt.zero()


@properties
@given(big_ints, big_ints)
def test_addition_matches_int_and_commutes(x: int, y: int) -> None:
    assert int(n(x) + n(y)) == x + y
    assert n(x) + n(y) == n(y) + n(x)


@properties
@given(big_ints, big_ints, big_ints)
def test_addition_associative(x: int, y: int, z: int) -> None:
    assert (n(x) + n(y)) + n(z) == n(x) + (n(y) + n(z))


@properties
@given(big_ints, big_ints)
def test_subtraction_consistent_with_addition(x: int, y: int) -> None:
    assert n(x) - n(y) == n(x) + (-n(y))
    assert int(n(x) - n(y)) == x - y


# =============================================================================
# ТЕСТЫ: Ordering
# =============================================================================


@properties
@given(big_ints, big_ints)
def test_ordering_matches_int(x: int, y: int) -> None:
    assert (n(x) < n(y)) == (x < y)
    assert (n(x) == n(y)) == (x == y)
    assert (n(x) >= n(y)) == (x >= y)


@properties
@given(big_ints, big_ints)
def test_ordering_consistent_with_magnitude(x: int, y: int) -> None:
    a, b = n(x), n(y)

    if a.sign is b.sign and a.sign is Sign.POSITIVE:
        assert (a < b) == (a.magnitude < b.magnitude)
    if a.sign is b.sign and a.sign is Sign.NEGATIVE:
        assert (a < b) == (a.magnitude > b.magnitude)


# =============================================================================
# ТЕСТЫ: Multiplication / Division / Modulus
# =============================================================================


@properties
@given(big_ints, small_ints)
def test_multiplication_matches_int(x: int, y: int) -> None:
    assert int(n(x) * n(y)) == x * y


@properties
@given(small_ints, small_ints)
def test_multiplication_commutes(x: int, y: int) -> None:
    assert n(x) * n(y) == n(y) * n(x)


@properties
@given(small_ints, small_nonzero_ints)
def test_division_truncates_toward_zero(x: int, y: int) -> None:
    result = n(x).divide(n(y))

    assert result.ok
    assert int(result.unwrap()) == truncated_div(x, y)


@properties
@given(small_ints, small_nonzero_ints)
def test_division_modulus_identity(x: int, y: int) -> None:
    quotient = n(x).divide(n(y)).unwrap()
    remainder = n(x) % n(y)

    assert n(y) * quotient + remainder == n(x)
    assert remainder.magnitude < n(y).magnitude
    assert remainder.is_zero or remainder.sign is n(x).sign


@properties
@given(big_ints)
def test_division_by_zero_is_absence(x: int) -> None:
    result = n(x).divide(BigDecimalInt.zero())

    assert not result.ok
    assert result.quotient is None
