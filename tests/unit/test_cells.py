"""
Unit tests for cell-level primitives (numconv.cells).

Covers numeric classification, European-format classification and the
European -> English value converter.
"""

from __future__ import annotations

import pytest

from numconv.cells import (
    convert_european_to_english,
    group_thousands,
    is_european_format,
    is_numeric_value,
    strip_currency,
)


class TestIsNumericValue:
    """Tests for is_numeric_value()."""

    @pytest.mark.parametrize(
        "value",
        ["123", "123.45", "1,234.56", "$1,234.56", "€1.234,56", "£ 99", "¥1000", "-1.234,56", " 42 "],
    )
    def test_numeric_strings(self, value):
        assert is_numeric_value(value) is True

    @pytest.mark.parametrize("value", ["abc", "", None, "$", "12abc", "N/A", "1_000"])
    def test_non_numeric(self, value):
        assert is_numeric_value(value) is False

    def test_non_string_scalars(self):
        """Numbers are stringified before the check."""
        assert is_numeric_value(1234.5) is True
        assert is_numeric_value(0) is True

    def test_nan_is_not_numeric(self):
        assert is_numeric_value(float("nan")) is False

    def test_overflow_is_not_numeric(self):
        """Values that overflow to infinity are not finite numbers."""
        assert is_numeric_value("1e999") is False

    def test_exponent_is_numeric(self):
        assert is_numeric_value("1e5") is True


class TestIsEuropeanFormat:
    """Tests for is_european_format()."""

    @pytest.mark.parametrize(
        "value",
        ["1.234,56", "1234,56", "€1.234,56", "15.000,00", " 1.234,56 ", "999,9", "1.000.000,123"],
    )
    def test_european(self, value):
        assert is_european_format(value) is True

    @pytest.mark.parametrize(
        "value",
        ["1,234.56", "1234.56", "$1,234.56", "123", "", "abc"],
    )
    def test_not_european(self, value):
        assert is_european_format(value) is False

    def test_decimal_tail_longer_than_three_digits(self):
        """Four digits after the comma look like English grouping, not decimals."""
        assert is_european_format("1,2345") is False
        assert is_european_format("1.234,5678") is False

    def test_non_digit_tail(self):
        assert is_european_format("12,ab") is False
        assert is_european_format("12,") is False

    def test_lone_comma_with_three_digits_is_ambiguous(self):
        """Digit-count rule: "1,234" is read as European (known limitation)."""
        assert is_european_format("1,234") is True


class TestConvertEuropeanToEnglish:
    """Tests for convert_european_to_english()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1.234,56", "1,234.56"),
            ("1234,56", "1,234.56"),
            ("15.000,00", "15,000.00"),
            ("999,99", "999.99"),
            ("€1.234,56", "1,234.56"),
            ("$1.234,56", "1,234.56"),
            ("1.000.000,5", "1,000,000.5"),
            ("0,5", "0.5"),
            ("123", "123"),
        ],
    )
    def test_conversion(self, value, expected):
        assert convert_european_to_english(value) == expected

    def test_negative_number(self):
        assert convert_european_to_english("-1.234,56") == "-1,234.56"

    def test_dots_only_are_thousands(self):
        """Without a comma every dot is a thousands separator."""
        assert convert_european_to_english("1.234") == "1,234"

    def test_trailing_comma_drops_decimal_point(self):
        assert convert_european_to_english("12,") == "12"

    def test_leading_zeros_kept(self):
        assert convert_european_to_english("007,5") == "007.5"

    @pytest.mark.parametrize("value", ["abc", "", "12abc", "N/A", "€", "1,2,3", "1.234,5,6"])
    def test_invalid_values_returned_unchanged(self, value):
        assert convert_european_to_english(value) == value

    def test_non_numeric_idempotent(self):
        for value in ["hello", "x.y,z", "--", "€ abc"]:
            assert convert_european_to_english(value) == value

    def test_numeric_value_preserved(self):
        """Converted strings parse to the same number as the European input."""
        for value in ["1.234,56", "12,5", "1.000.000,001", "98.765.432,1", "0,99"]:
            english = convert_european_to_english(value)
            assert "," not in english.split(".")[-1]
            expected = float(value.replace(".", "").replace(",", "."))
            assert float(english.replace(",", "")) == pytest.approx(expected)


class TestHelpers:
    """Tests for strip_currency() and group_thousands()."""

    def test_strip_currency(self):
        assert strip_currency(" €1.234,56 ") == "1.234,56"
        assert strip_currency("$ 1 000") == "1000"

    @pytest.mark.parametrize(
        "digits, expected",
        [("1", "1"), ("12", "12"), ("123", "123"), ("1234", "1,234"), ("1234567", "1,234,567"), ("", "")],
    )
    def test_group_thousands(self, digits, expected):
        assert group_thousands(digits) == expected
