# tests/test_units.py
"""
Unit Conversion Tests - Unit Tests for the Fixed-Scale Money Core

This module contains unit tests for parsing typed amounts into base units,
normalizing them for display, applying exchange rates exactly, and
formatting rates and subunit amounts.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- xquote.domain.units (all conversion functions for testing)
- xquote.domain.errors (expected exceptions)
- pytest (testing framework)
"""
import math  # Floor of exact products for expected values
import pytest  # Testing framework for writing and running tests

from decimal import Decimal  # Decimal rates
from fractions import Fraction  # Exact rational rates and expected values

from xquote.domain.errors import InvalidAmountError, InvalidRateError, MalformedInputError
from xquote.domain.units import (
    MAX_INTEGER_DIGITS,  # Longest accepted integer part
    UNIT_SCALE,
    convert_to_base_units,  # Apply a rate to an amount
    format_units,  # Normalize typed amounts
    from_cents,  # Format subunit counts
    get_exchange_rate,  # Format the rate line
    parse_units,  # Typed amount -> base units
    render_units,  # Base units -> canonical string
    to_rational,  # Exact rate parsing
)


class TestParseUnits:
    def test_integer_and_fraction(self):
        assert parse_units("1.5") == 150_000_000
        assert parse_units("100") == 100 * 10 ** UNIT_SCALE
        assert parse_units("0.00000001") == 1

    def test_truncates_past_scale(self):
        assert parse_units("0.000000019") == 1
        assert parse_units("3.999", 2) == 399

    def test_partial_input(self):
        assert parse_units("12.") == 12 * 10 ** 8
        assert parse_units(".5") == 50_000_000

    def test_grouping_and_whitespace(self):
        assert parse_units(" 1,234.5 ") == 123_450_000_000

    @pytest.mark.parametrize("raw", ["", "   ", ".", "abc", "-5", "+5", "1e5", "1.2.3", "12a", None])
    def test_malformed_raises(self, raw):
        with pytest.raises(MalformedInputError):
            parse_units(raw)

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            parse_units("abc")

    def test_negative_scale_rejected(self):
        with pytest.raises(ValueError, match="scale"):
            parse_units("1", -1)

    def test_overlong_integer_part_is_malformed(self):
        with pytest.raises(MalformedInputError, match="integer digits"):
            parse_units("9" * 5000)

    def test_integer_digit_limit(self):
        assert parse_units("9" * MAX_INTEGER_DIGITS, 0) == 10 ** MAX_INTEGER_DIGITS - 1
        with pytest.raises(MalformedInputError):
            parse_units("9" * (MAX_INTEGER_DIGITS + 1), 0)

    def test_leading_zeros_do_not_count_toward_limit(self):
        assert parse_units("0" * 5000 + "1.5", 2) == 150


class TestRenderUnits:
    def test_render(self):
        assert render_units(150_000_000) == "1.50000000"
        assert render_units(0) == "0.00000000"
        assert render_units(1) == "0.00000001"

    def test_render_scale_zero(self):
        assert render_units(5, 0) == "5"

    def test_negative_units_rejected(self):
        with pytest.raises(InvalidAmountError):
            render_units(-1)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidAmountError):
            render_units(1.5)


class TestFormatUnits:
    def test_integer_amount(self):
        assert format_units("100", 8) == "100.00000000"

    def test_truncates_never_rounds_up(self):
        assert format_units("1.123456789", 8) == "1.12345678"
        assert format_units("0.999999999", 8) == "0.99999999"

    def test_leading_zeros_dropped(self):
        assert format_units("007", 8) == "7.00000000"

    def test_trailing_separator(self):
        assert format_units("12.", 8) == "12.00000000"

    def test_empty_is_zero(self):
        assert format_units("", 8) == "0.00000000"

    def test_malformed_is_zero(self):
        assert format_units("abc", 8) == "0.00000000"
        assert format_units("abc", 8) == format_units("", 8)

    def test_none_is_zero(self):
        assert format_units(None) == "0.00000000"

    def test_overlong_input_is_zero(self):
        assert format_units("9" * 5000, 8) == "0.00000000"
        assert format_units("1" * 5000 + ".5", 8) == "0.00000000"

    def test_other_scales(self):
        assert format_units("3.999", 2) == "3.99"
        assert format_units("3.9", 0) == "3"

    @pytest.mark.parametrize("raw", ["0", "1", "1.5", "12.", ".25", "99999999.12345678", "0.00000001", "1,000"])
    def test_idempotent(self, raw):
        once = format_units(raw, 8)
        assert format_units(once, 8) == once


class TestToRational:
    def test_float_uses_shortest_repr(self):
        assert to_rational(0.91) == Fraction(91, 100)
        assert to_rational(1e-05) == Fraction(1, 100000)

    def test_other_types(self):
        assert to_rational(2) == Fraction(2)
        assert to_rational(Decimal("0.91")) == Fraction(91, 100)
        assert to_rational(" 0.91 ") == Fraction(91, 100)
        assert to_rational(Fraction(1, 3)) == Fraction(1, 3)

    @pytest.mark.parametrize("value", [float("inf"), float("nan"), Decimal("NaN"), "abc", "1/0", True, None])
    def test_invalid(self, value):
        with pytest.raises(InvalidRateError):
            to_rational(value)


class TestConvertToBaseUnits:
    def test_scenario_usd_eur(self):
        assert convert_to_base_units("100.00000000", 0.91) == "91.00000000"

    @pytest.mark.parametrize("rate", [0.91, 1, 2.5, 67000.12, Fraction(1, 3)])
    def test_zero_amount(self, rate):
        assert convert_to_base_units("0", rate) == "0.00000000"

    def test_empty_and_malformed_amount(self):
        assert convert_to_base_units("", 0.91) == "0.00000000"
        assert convert_to_base_units("abc", 2) == "0.00000000"

    def test_no_float_drift(self):
        # 0.29 * 100 is 28.999999999999996 in binary floating point
        assert convert_to_base_units("0.29", 100) == "29.00000000"

    def test_truncates_at_scale(self):
        assert convert_to_base_units("1", Fraction(1, 3)) == "0.33333333"
        assert convert_to_base_units("2", Fraction(1, 3)) == "0.66666666"

    def test_large_amount(self):
        assert convert_to_base_units("1000000", "1.23456789") == "1234567.89000000"

    @pytest.mark.parametrize("amount,rate", [
        ("999999.99999999", "1.23456789"),
        ("123456.78901234", 0.0000731),
        ("1000000", 0.1),
        ("0.00000001", 0.5),
        ("314159.26535897", 1.0001),
    ])
    def test_matches_exact_rational_product(self, amount, rate):
        exact = Fraction(amount) * to_rational(rate)
        expected_units = math.floor(exact * 10 ** 8)
        whole, frac = divmod(expected_units, 10 ** 8)
        assert convert_to_base_units(amount, rate) == f"{whole}.{frac:08d}"

    def test_rate_types_agree(self):
        expected = "0.91000000"
        assert convert_to_base_units("1", 0.91) == expected
        assert convert_to_base_units("1", "0.91") == expected
        assert convert_to_base_units("1", Decimal("0.91")) == expected

    def test_custom_scale(self):
        assert convert_to_base_units("3.99", 0.91, scale=2) == "3.63"

    def test_result_scale(self):
        assert convert_to_base_units("3.99", 0.91, scale=2, result_scale=8) == "3.63090000"
        assert convert_to_base_units("1.23456789", 2, scale=8, result_scale=2) == "2.46"
        assert convert_to_base_units("100", 0.91, scale=2, result_scale=0) == "91"

    def test_overlong_amount_converts_as_zero(self):
        assert convert_to_base_units("9" * 5000, 0.91) == "0.00000000"

    @pytest.mark.parametrize("rate", [0, -1, -0.5, float("nan"), float("inf"), "abc"])
    def test_invalid_rate(self, rate):
        with pytest.raises(InvalidRateError):
            convert_to_base_units("1", rate)


class TestGetExchangeRate:
    def test_default_precision(self):
        assert get_exchange_rate(0.91, "USD", "EUR") == "1 USD = 0.9100 EUR"

    def test_custom_precision(self):
        assert get_exchange_rate(0.91, "USD", "EUR", decimals=2) == "1 USD = 0.91 EUR"
        assert get_exchange_rate(0.91, "USD", "EUR", decimals=0) == "1 USD = 0 EUR"

    def test_truncates(self):
        assert get_exchange_rate(1.23456789, "EUR", "USD") == "1 EUR = 1.2345 USD"

    def test_grouping(self):
        assert get_exchange_rate(67000.123456, "BTC", "USD") == "1 BTC = 67,000.1234 USD"

    def test_invalid_rate(self):
        with pytest.raises(InvalidRateError):
            get_exchange_rate(0, "USD", "EUR")


class TestFromCents:
    def test_basic(self):
        assert from_cents(250, "USD") == "2.50 USD"
        assert from_cents(5, "USD") == "0.05 USD"

    def test_zero(self):
        assert from_cents(0, "USD") == "0.00 USD"

    def test_grouping(self):
        assert from_cents(123456, "USD") == "1,234.56 USD"
        assert from_cents(100000000, "EUR") == "1,000,000.00 EUR"

    def test_default_currency(self):
        assert from_cents(250) == "2.50 USD"

    def test_zero_decimal_currency(self):
        assert from_cents(1500, "JPY", decimals=0) == "1,500 JPY"

    def test_negative_rejected(self):
        with pytest.raises(InvalidAmountError):
            from_cents(-1, "USD")

    @pytest.mark.parametrize("value", [2.5, "250", True, None])
    def test_non_integer_rejected(self, value):
        with pytest.raises(InvalidAmountError):
            from_cents(value, "USD")
