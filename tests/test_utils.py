"""
Unit tests for parsing, rounding and currency formatting helpers.
"""
import pytest
from loancalc.core.utils import (
    parse_number,
    clean_numeric_input,
    round_currency,
    format_currency
)


@pytest.mark.parametrize("raw, expected", [
    ("12.5", 12.5),
    (".5", 0.5),
    ("+7.", 7.0),
    ("  42 ", 42.0),
    ("-3", -3.0),
    ("1e3", 1000.0),
])
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


@pytest.mark.parametrize("raw", [
    None, "", "   ", "abc", "12abc", "nan", "inf", "-Infinity", "1e999",
    "1_000", "\uff11\uff12", "1.2.3", "."
])
def test_parse_number_rejects(raw):
    """Empty, non-numeric and non-finite input parse to None."""
    assert parse_number(raw) is None


@pytest.mark.parametrize("raw, expected", [
    ("$ 1000000", "1000000"),
    ("12,5%", "12.5"),
    ("-5", "5"),
    ("abc", ""),
    ("1,000,000", "1.000,000"),
])
def test_clean_numeric_input(raw, expected):
    """Only digits, dots and commas survive; the first comma becomes a dot."""
    assert clean_numeric_input(raw) == expected


@pytest.mark.parametrize("value, expected", [
    (83333.333333, 83333.33),
    (2.675, 2.68),
    (-1.005, -1.01),
    (0.004, 0.0),
])
def test_round_currency_half_away_from_zero(value, expected):
    assert round_currency(value) == expected


@pytest.mark.parametrize("value, expected", [
    (83333.33, "$83.333"),
    (1066185.48, "$1.066.185"),
    (999999.96, "$1.000.000"),
    (-0.04, "$0"),
    (-1500, "-$1.500"),
    (0, "$0"),
])
def test_format_currency_defaults(value, expected):
    """Default settings render Chilean pesos without decimals."""
    assert format_currency(value) == expected


def test_format_currency_custom():
    """Formatting conventions can be overridden per call."""
    assert format_currency(1234.5, fraction_digits=2) == "$1.234,50"
    assert format_currency(
        1234.5,
        fraction_digits=2,
        symbol="US$",
        thousands_separator=",",
        decimal_separator="."
    ) == "US$1,234.50"
