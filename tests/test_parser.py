"""
Tests for the value parser and the parsed-number model.

Every accepted input type, every rejection path and the digit limits.

Run: pytest tests/ -v
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from numeral_words.exceptions import (
    InvalidNumberFormat,
    NumberOutOfRange,
    UnsupportedInputType,
)
from numeral_words.models import NumericValue
from numeral_words.parser import DEFAULT_MAX_DIGITS, parse_value


def _parts(value, **kwargs) -> tuple:
    parsed = parse_value(value, **kwargs)
    return parsed.is_negative, parsed.integer_part, parsed.decimal_digits


# ═══════════════════════════════════════════════════════════════════════
# INTEGERS
# ═══════════════════════════════════════════════════════════════════════


class TestIntegers:
    def test_positive(self):
        assert _parts(1234) == (False, 1234, None)

    def test_negative(self):
        assert _parts(-1234) == (True, 1234, None)

    def test_zero(self):
        assert _parts(0) == (False, 0, None)

    def test_arbitrary_precision(self):
        assert _parts(10**40) == (False, 10**40, None)

    def test_bool_is_not_a_number(self):
        with pytest.raises(UnsupportedInputType):
            parse_value(True)

    def test_digit_limit_is_inclusive(self):
        assert _parts(10**5 - 1, max_digits=5) == (False, 99999, None)

    def test_digit_limit_exceeded(self):
        with pytest.raises(NumberOutOfRange) as exc_info:
            parse_value(10**5, max_digits=5)
        assert exc_info.value.details["max_digits"] == 5

    def test_negative_digit_limit_exceeded(self):
        with pytest.raises(NumberOutOfRange):
            parse_value(-(10**5), max_digits=5)


# ═══════════════════════════════════════════════════════════════════════
# FLOATS AND DECIMALS
# ═══════════════════════════════════════════════════════════════════════


class TestFloats:
    def test_fraction(self):
        assert _parts(-12.6) == (True, 12, "6")

    def test_integral_float_has_no_decimal_part(self):
        assert _parts(5.0) == (False, 5, None)

    def test_large_integral_float(self):
        assert _parts(1e20) == (False, 10**20, None)

    def test_small_float_expands_exponent(self):
        assert _parts(1e-7) == (False, 0, "0000001")

    def test_shortest_repr_digits(self):
        assert _parts(0.1) == (False, 0, "1")

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(InvalidNumberFormat):
            parse_value(value)


class TestDecimals:
    def test_exponent_expanded(self):
        assert _parts(Decimal("1E+3")) == (False, 1000, None)

    def test_trailing_zeros_kept(self):
        assert _parts(Decimal("1.50")) == (False, 1, "50")

    def test_negative_zero(self):
        parsed = parse_value(Decimal("-0.00"))
        assert parsed.is_negative is True
        assert parsed.is_zero is True

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_rejected(self, value):
        with pytest.raises(InvalidNumberFormat):
            parse_value(Decimal(value))

    def test_huge_exponent_rejected_before_expansion(self):
        with pytest.raises(NumberOutOfRange):
            parse_value(Decimal("1E+100000"))

    def test_tiny_exponent_rejected_before_expansion(self):
        with pytest.raises(NumberOutOfRange):
            parse_value(Decimal("1E-100000"))


# ═══════════════════════════════════════════════════════════════════════
# STRINGS
# ═══════════════════════════════════════════════════════════════════════


class TestStrings:
    def test_whitespace_and_leading_zeros(self):
        assert _parts("  007.050 ") == (False, 7, "050")

    def test_negative(self):
        assert _parts("-12.6") == (True, 12, "6")

    def test_negative_zero(self):
        assert _parts("-0") == (True, 0, None)

    def test_all_zeros(self):
        assert _parts("000") == (False, 0, None)

    def test_beyond_float_precision(self):
        assert _parts("9007199254740995") == (False, 9_007_199_254_740_995, None)

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "abc", "1.", ".5", "1e5", "+1", "1,000", "1.2.3", "--1", "١٢٣"],
    )
    def test_malformed_rejected(self, text):
        with pytest.raises(InvalidNumberFormat) as exc_info:
            parse_value(text)
        assert exc_info.value.code == "INVALID_NUMBER_FORMAT"

    def test_leading_zeros_do_not_count_toward_limit(self):
        assert _parts("0000012345", max_digits=5) == (False, 12345, None)

    def test_integer_digits_limit(self):
        with pytest.raises(NumberOutOfRange):
            parse_value("1" * 6, max_digits=5)

    def test_decimal_digits_limit(self):
        with pytest.raises(NumberOutOfRange):
            parse_value("1.123456", max_digits=5)

    def test_default_limit(self):
        parse_value("9" * DEFAULT_MAX_DIGITS)
        with pytest.raises(NumberOutOfRange):
            parse_value("9" * (DEFAULT_MAX_DIGITS + 1))


class TestUnsupportedTypes:
    @pytest.mark.parametrize("value", [None, [1], {"value": 1}, b"12", 1j])
    def test_rejected(self, value):
        with pytest.raises(UnsupportedInputType) as exc_info:
            parse_value(value)
        assert exc_info.value.details["type"] == type(value).__name__


# ═══════════════════════════════════════════════════════════════════════
# NUMERIC VALUE MODEL
# ═══════════════════════════════════════════════════════════════════════


class TestNumericValue:
    def test_out_of_range_is_a_format_error(self):
        assert issubclass(NumberOutOfRange, InvalidNumberFormat)

    def test_is_zero_with_decimals(self):
        assert NumericValue(decimal_digits="000").is_zero is True
        assert NumericValue(decimal_digits="010").is_zero is False

    def test_rejects_empty_decimal_digits(self):
        with pytest.raises(ValidationError):
            NumericValue(decimal_digits="")

    def test_rejects_non_digit_decimals(self):
        with pytest.raises(ValidationError):
            NumericValue(decimal_digits="1a")

    def test_rejects_negative_integer_part(self):
        with pytest.raises(ValidationError):
            NumericValue(integer_part=-1)

    def test_frozen(self):
        value = NumericValue(integer_part=3)
        with pytest.raises(ValidationError):
            value.integer_part = 4
