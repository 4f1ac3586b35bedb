"""
Тесты для модуля StringValidation

Проверяет:
1. Индексный доступ к символам (включая не-ASCII)
2. Предикаты signed/positive десятичной записи
3. Нормализацию ведущих нулей
"""

import pytest

from bigdecimalint.core.text.string_validation import (
    DECIMAL_DIGITS,
    DECIMAL_RADIX,
    ZERO_DIGIT,
    char_at,
    is_valid_positive_decimal,
    is_valid_signed_decimal,
    strip_leading_zeros,
)


# =============================================================================
# ТЕСТЫ ИНДЕКСНОГО ДОСТУПА
# =============================================================================


class TestCharAt:
    """Тесты для char_at"""

    def test_ascii_text(self) -> None:
        text = "Hello, I am having quite a good time testing my code."

        assert char_at(text, 0) == "H"
        assert char_at(text, 1) == "e"
        assert char_at(text, len(text) - 1) == "."

    def test_non_ascii_text(self) -> None:
        """Смещение считается в символах, а не в байтах"""
        text = "Hola, Señor! Estoy hablando español!"

        assert char_at(text, len(text) - 1) == "!"
        assert char_at(text, len(text) - 4) == "ñ"
        assert char_at(text, 8) == "ñ"

    def test_symbols(self) -> None:
        text = "˚¨¥ƒ©ˆ¥†∂ˆ©π¨ƒˆ¥®∂¶•πªˆ˙∫√·‡ﬂ°‡ﬁﬂ›ﬁ‡"

        assert [char_at(text, i) for i in range(3)] == ["˚", "¨", "¥"]
        assert char_at(text, len(text) - 1) == "‡"
        assert char_at(text, len(text) - 3) == "›"

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(IndexError):
            char_at("abc", 3)

        with pytest.raises(IndexError):
            char_at("", 0)

    def test_negative_offset_raises(self) -> None:
        """Отрицательные смещения не трактуются как отсчёт с конца"""
        with pytest.raises(IndexError):
            char_at("abc", -1)


# =============================================================================
# ТЕСТЫ ПРЕДИКАТОВ
# =============================================================================


class TestIsValidSignedDecimal:
    """Тесты для is_valid_signed_decimal"""

    @pytest.mark.parametrize(
        "text",
        ["123", "0", "-0", "007", "-2937238728748279378947287319937"],
    )
    def test_valid(self, text: str) -> None:
        assert is_valid_signed_decimal(text)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "-",
            "--1",
            "+1",
            "1234283920288a",
            "4893892a9829924",
            "a428981983",
            "Hello",
            " 12",
            "12 ",
            "1 2",
            "1-2",
            "١٢",  # арабско-индийские цифры не допускаются
        ],
    )
    def test_invalid(self, text: str) -> None:
        assert not is_valid_signed_decimal(text)


class TestIsValidPositiveDecimal:
    """Тесты для is_valid_positive_decimal"""

    @pytest.mark.parametrize("text", ["123", "928394829", "0", "000"])
    def test_valid(self, text: str) -> None:
        assert is_valid_positive_decimal(text)

    @pytest.mark.parametrize(
        "text",
        ["", "-2408", "492894 283492", "a29834992", "49842948928 ", "\t1"],
    )
    def test_invalid(self, text: str) -> None:
        assert not is_valid_positive_decimal(text)


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestStripLeadingZeros:
    """Тесты для strip_leading_zeros"""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("007", "7"),
            ("00042", "42"),
            ("100", "100"),
            ("0", "0"),
            ("000", "0"),
            ("-0", "0"),
            ("-000", "0"),
            ("-00120", "-120"),
            ("-5", "-5"),
        ],
    )
    def test_normalization(self, text: str, expected: str) -> None:
        assert strip_leading_zeros(text) == expected

    def test_idempotent(self) -> None:
        once = strip_leading_zeros("-000123")
        assert strip_leading_zeros(once) == once

    def test_invalid_text_raises(self) -> None:
        with pytest.raises(ValueError, match="Not a decimal numeral"):
            strip_leading_zeros("12a")


def test_constants() -> None:
    """Только десятичная система"""
    assert DECIMAL_RADIX == 10
    assert len(DECIMAL_DIGITS) == DECIMAL_RADIX
    assert ZERO_DIGIT == "0"
