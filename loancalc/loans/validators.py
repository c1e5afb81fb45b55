"""
Validation rules for the raw calculator form.
Failures are returned as data, never raised: the caller decides how to display them.
"""
from typing import Optional, Union

from loancalc.core.utils import parse_number
from loancalc.loans.schemas import FormValidation, ValidationLimits, ValidationResult


def _limits(limits: Optional[ValidationLimits]) -> ValidationLimits:
    return limits if limits is not None else ValidationLimits.from_settings()


def _is_blank(raw: Optional[str]) -> bool:
    return raw is None or not raw.strip()


def _format_bound(value: float) -> str:
    """Renders 100.0 as '100' and 12.5 as '12.5'."""
    return f"{value:g}"


def validate_amount(raw: Optional[str], limits: Optional[ValidationLimits] = None) -> ValidationResult:
    """
    Checks the loan amount field. Rules run in order and the first failure wins:
    required, numeric, greater than zero, not above the configured ceiling.
    """
    bounds = _limits(limits)

    if _is_blank(raw):
        return ValidationResult.fail("amount is required")

    value = parse_number(raw)
    if value is None:
        return ValidationResult.fail("enter a valid amount (numeric)")

    if value <= 0:
        return ValidationResult.fail("amount must be greater than zero")

    if value > bounds.max_amount:
        return ValidationResult.fail("amount is too large")

    return ValidationResult.ok()


def validate_interest_rate(raw: Optional[str], limits: Optional[ValidationLimits] = None) -> ValidationResult:
    """Checks the annual interest rate field (percent). Zero is a valid rate."""
    bounds = _limits(limits)

    if _is_blank(raw):
        return ValidationResult.fail("interest rate is required")

    rate = parse_number(raw)
    if rate is None:
        return ValidationResult.fail("enter a valid rate (numeric)")

    if rate < 0:
        return ValidationResult.fail("rate cannot be negative")

    if rate > bounds.max_rate_percent:
        return ValidationResult.fail(f"rate cannot exceed {_format_bound(bounds.max_rate_percent)}%")

    return ValidationResult.ok()


def validate_term(raw: Union[int, str, None], limits: Optional[ValidationLimits] = None) -> ValidationResult:
    """
    Checks a free-form term in months.
    Integral strings such as "12" or "12.0" are accepted; fractions are not.
    """
    bounds = _limits(limits)

    if isinstance(raw, int) and not isinstance(raw, bool):
        months = raw
    else:
        if not isinstance(raw, str) or _is_blank(raw):
            return ValidationResult.fail("term is required")

        value = parse_number(raw)
        if value is None or not value.is_integer():
            return ValidationResult.fail("enter a valid term (whole months)")
        months = int(value)

    if months < bounds.min_term_months:
        suffix = "month" if bounds.min_term_months == 1 else "months"
        return ValidationResult.fail(f"term must be at least {bounds.min_term_months} {suffix}")

    if months > bounds.max_term_months:
        return ValidationResult.fail(f"term cannot exceed {bounds.max_term_months} months")

    return ValidationResult.ok()


def parse_term(raw: Union[int, str]) -> int:
    """Converts a term that already passed validate_term into an int."""
    if isinstance(raw, int):
        return raw
    return int(float(raw.strip()))


def validate_form(
    amount: Optional[str],
    rate: Optional[str],
    term: Union[int, str, None] = None,
    limits: Optional[ValidationLimits] = None
) -> FormValidation:
    """
    Validates every field independently so that all messages are available,
    even when only one field is being displayed.
    A term of None means it came from a bounded selector and is not checked.
    """
    bounds = _limits(limits)

    amount_result = validate_amount(amount, bounds)
    rate_result = validate_interest_rate(rate, bounds)
    term_result = ValidationResult.ok() if term is None else validate_term(term, bounds)

    return FormValidation(
        overall_valid=amount_result.valid and rate_result.valid and term_result.valid,
        amount_result=amount_result,
        rate_result=rate_result,
        term_result=term_result,
    )
