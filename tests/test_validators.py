"""
Unit tests for the form validators.
Validates rule order, boundary values and independent evaluation of fields.
"""
import pytest
from loancalc.loans.schemas import ValidationLimits
from loancalc.loans.validators import (
    validate_amount,
    validate_interest_rate,
    validate_term,
    validate_form,
    parse_term
)


@pytest.mark.parametrize("raw, expected_message", [
    ("", "amount is required"),
    ("   ", "amount is required"),
    (None, "amount is required"),
    ("abc", "enter a valid amount (numeric)"),
    ("nan", "enter a valid amount (numeric)"),
    ("inf", "enter a valid amount (numeric)"),
    ("1_000", "enter a valid amount (numeric)"),
    ("\uff11\uff12", "enter a valid amount (numeric)"),
    ("-5", "amount must be greater than zero"),
    ("0", "amount must be greater than zero"),
    ("1000000000", "amount is too large"),
])
def test_invalid_amounts(raw, expected_message):
    """Each failing amount reports the first rule it breaks."""
    result = validate_amount(raw)

    assert result.valid is False
    assert result.message == expected_message


@pytest.mark.parametrize("raw", ["999999999", "1", "0.01", " 2500.50 ", "1e3"])
def test_valid_amounts(raw):
    """Valid amounts carry an empty message."""
    result = validate_amount(raw)

    assert result.valid is True
    assert result.message == ""


@pytest.mark.parametrize("raw, expected_message", [
    ("", "interest rate is required"),
    ("\t", "interest rate is required"),
    ("twelve", "enter a valid rate (numeric)"),
    ("-1", "rate cannot be negative"),
    ("150", "rate cannot exceed 100%"),
    ("100.01", "rate cannot exceed 100%"),
])
def test_invalid_rates(raw, expected_message):
    """Rate failures use rate-specific messages."""
    result = validate_interest_rate(raw)

    assert result.valid is False
    assert result.message == expected_message


@pytest.mark.parametrize("raw", ["0", "12", "3.5", "100"])
def test_valid_rates(raw):
    """Zero and the upper bound are both accepted."""
    assert validate_interest_rate(raw).valid is True


@pytest.mark.parametrize("raw, expected_message", [
    ("", "term is required"),
    (None, "term is required"),
    ("12.5", "enter a valid term (whole months)"),
    ("twelve", "enter a valid term (whole months)"),
    ("0", "term must be at least 1 month"),
    (0, "term must be at least 1 month"),
    ("361", "term cannot exceed 360 months"),
])
def test_invalid_terms(raw, expected_message):
    """Free-form terms must be whole months within the configured range."""
    result = validate_term(raw)

    assert result.valid is False
    assert result.message == expected_message


@pytest.mark.parametrize("raw", [1, 12, "12", "12.0", " 360 "])
def test_valid_terms(raw):
    assert validate_term(raw).valid is True


def test_parse_term():
    """Validated terms convert to int."""
    assert parse_term(24) == 24
    assert parse_term("36") == 36
    assert parse_term(" 12.0 ") == 12


def test_custom_limits():
    """Bounds come from ValidationLimits rather than fixed constants."""
    limits = ValidationLimits(max_amount=1000, max_rate_percent=50, min_term_months=6, max_term_months=48)

    assert validate_amount("1000", limits).valid is True
    assert validate_amount("1000.01", limits).message == "amount is too large"
    assert validate_interest_rate("50.5", limits).message == "rate cannot exceed 50%"
    assert validate_term("3", limits).message == "term must be at least 6 months"
    assert validate_term("49", limits).message == "term cannot exceed 48 months"


def test_form_reports_every_field():
    """Both fields are validated even when the first one already failed."""
    form = validate_form("", "150")

    assert form.overall_valid is False
    assert form.amount_result.message == "amount is required"
    assert form.rate_result.message == "rate cannot exceed 100%"
    assert form.errors() == {
        "amount": "amount is required",
        "interest_rate": "rate cannot exceed 100%"
    }


def test_form_valid():
    """overall_valid is the AND of the field verdicts."""
    form = validate_form("1000000", "12")

    assert form.overall_valid is True
    assert form.term_result.valid is True
    assert form.errors() == {}


def test_form_with_invalid_term_only():
    """A bad term alone invalidates the form."""
    form = validate_form("1000", "5", "0")

    assert form.overall_valid is False
    assert form.amount_result.valid is True
    assert form.rate_result.valid is True
    assert form.errors() == {"term_months": "term must be at least 1 month"}
