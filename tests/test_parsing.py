"""Tests for lenient numeric parsing of draft and axis range fields."""

import math

import pytest

from he3calc.core.parsing import parse_axis_value, parse_lenient, resolve_range
from he3calc.models.parameters import DEFAULT_AXIS_RANGES, AxisRange


class TestParseLenient:
    @pytest.mark.parametrize("text, expected", [
        ("70", 70.0),
        (" 12.5 ", 12.5),
        ("-3", -3.0),
        ("1e3", 1000.0),
        (".5", 0.5),
        ("12abc", 12.0),
        ("3,5", 3.0),
        ("1_0", 1.0),
        ("inf", 0.0),
        ("", 0.0),
        ("abc", 0.0),
        ("-", 0.0),
    ])
    def test_values(self, text, expected):
        assert parse_lenient(text) == expected

    def test_none(self):
        assert parse_lenient(None) == 0.0

    def test_number_passthrough(self):
        assert parse_lenient(4) == 4.0
        assert parse_lenient(2.5) == 2.5

    def test_nan_becomes_zero(self):
        assert parse_lenient(float("nan")) == 0.0
        assert parse_lenient("NaN") == 0.0

    def test_infinity(self):
        assert parse_lenient("Infinity") == math.inf
        assert parse_lenient("-Infinity") == -math.inf


class TestParseAxisValue:
    def test_valid(self):
        assert parse_axis_value("48", 24.0) == 48.0

    def test_negative(self):
        assert parse_axis_value("-5", 0.0) == -5.0

    def test_empty_uses_default(self):
        assert parse_axis_value("", 24.0) == 24.0

    def test_invalid_uses_default(self):
        assert parse_axis_value("12abc", 24.0) == 24.0

    def test_zero_uses_default(self):
        assert parse_axis_value("0", 80.0) == 80.0

    def test_none_uses_default(self):
        assert parse_axis_value(None, 10.0) == 10.0

    def test_comma_is_not_decimal(self):
        assert parse_axis_value("2,5", 10.0) == 10.0

    @pytest.mark.parametrize("text", [
        "1_0", "infinity", "inf", "nan", "NaN", "12abc", "0x", "+0x10", "1e",
    ])
    def test_rejects_non_literals(self, text):
        assert parse_axis_value(text, 24.0) == 24.0

    def test_infinity_spelling(self):
        assert parse_axis_value("Infinity", 24.0) == math.inf
        assert parse_axis_value(" -Infinity ", 24.0) == -math.inf

    def test_radix_literals(self):
        assert parse_axis_value("0x10", 1.0) == 16.0
        assert parse_axis_value("0b101", 1.0) == 5.0
        assert parse_axis_value("0o17", 1.0) == 15.0

    def test_exponent_and_whitespace(self):
        assert parse_axis_value("  1e2 ", 24.0) == 100.0
        assert parse_axis_value(".5", 24.0) == 0.5
        assert parse_axis_value("5.", 24.0) == 5.0


class TestResolveRange:
    def test_defaults(self):
        assert resolve_range(DEFAULT_AXIS_RANGES.he3, DEFAULT_AXIS_RANGES.he3) == (
            0.0, 24.0, 0.0, 80.0,
        )

    def test_reversed_kept(self):
        r = AxisRange("20", "5", "90", "10")
        assert resolve_range(r, DEFAULT_AXIS_RANGES.he3) == (20.0, 5.0, 90.0, 10.0)

    def test_mixed_fallback(self):
        r = AxisRange("x", "12", "", "50")
        assert resolve_range(r, DEFAULT_AXIS_RANGES.neutron) == (0.0, 12.0, 0.0, 50.0)
