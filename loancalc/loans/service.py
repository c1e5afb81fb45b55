"""
Business logic for loan calculation.
Implements the fixed-installment (French) method by default, with simple interest
available as an alternative payment method.
"""
from decimal import Decimal, ROUND_CEILING
from typing import Optional, Union

from loancalc.core.config import settings
from loancalc.core.logger import logger
from loancalc.core.utils import CENT, parse_number, round_half_up
from loancalc.loans.methods import PaymentMethod, get_payment_method
from loancalc.loans.schemas import CalculationOutcome, LoanInput, LoanResult, ValidationLimits
from loancalc.loans.validators import parse_term, validate_form

PLACEHOLDER_MESSAGE = "Enter the loan details to calculate your installments"

MethodRef = Union[str, PaymentMethod, None]


def resolve_method(method: MethodRef = None) -> PaymentMethod:
    """Accepts a method instance, a registered name, or None for the configured default."""
    if isinstance(method, PaymentMethod):
        return method
    return get_payment_method(method or settings.DEFAULT_PAYMENT_METHOD)


def calculate_loan(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
    method: MethodRef = None
) -> LoanResult:
    """
    Computes monthly payment, total payment and total interest.

    Inputs must already be validated: principal > 0, 0 <= rate <= 100, term >= 1.
    The installment is rounded to cents first and the totals are derived from the
    rounded installment, so a zero-rate loan that does not divide evenly reports
    a few cents of negative interest (1,000,000 over 12 months -> -0.04).
    With a positive rate the total never drops below the principal: when the
    rounded installment falls short (tiny loans or near-zero rates) the total is
    raised to the principal and the interest reported as zero.
    """
    payment_method = resolve_method(method)

    monthly_payment = round_half_up(
        payment_method.monthly_payment(principal, annual_rate_percent, term_months)
    )
    total_payment = round_half_up(monthly_payment * term_months)

    principal_amount = Decimal(str(principal))
    if annual_rate_percent > 0 and total_payment < principal_amount:
        total_payment = principal_amount.quantize(CENT, rounding=ROUND_CEILING)

    total_interest = round_half_up(total_payment - principal_amount)

    logger.debug(
        f"Loan calculated ({payment_method.name}): principal={principal}, rate={annual_rate_percent}, "
        f"term={term_months}, installment={monthly_payment}"
    )

    return LoanResult(
        monthly_payment=float(monthly_payment),
        total_payment=float(total_payment),
        total_interest=float(total_interest)
    )


def calculate_simple_interest(principal: float, annual_rate_percent: float, term_months: int) -> LoanResult:
    """
    Simple-interest variant: interest = P * rate/100 * months/12, spread evenly.
    Not used by the default flow.
    """
    return calculate_loan(principal, annual_rate_percent, term_months, method="simple")


def calculate(loan: LoanInput, method: MethodRef = None) -> LoanResult:
    """Typed entry point over a LoanInput snapshot."""
    return calculate_loan(loan.principal, loan.annual_rate_percent, loan.term_months, method)


def info_message(payment_method: PaymentMethod, term_months: int) -> str:
    return f"Calculated with {payment_method.label} over {term_months} months"


def evaluate_form(
    amount: Optional[str],
    rate: Optional[str],
    term_months: Union[int, str, None] = None,
    method: MethodRef = None,
    limits: Optional[ValidationLimits] = None
) -> CalculationOutcome:
    """
    Runs the validate-then-calculate flow for one snapshot of the form.

    The calculator is only invoked when every field is valid; otherwise the
    outcome carries the field errors and the neutral placeholder message.
    A term of None means the configured default from the bounded selector.
    """
    payment_method = resolve_method(method)

    validation = validate_form(amount, rate, term_months, limits)

    if not validation.overall_valid:
        logger.info(f"Form invalid, calculation skipped: {validation.errors()}")
        return CalculationOutcome(
            validation=validation,
            result=None,
            method=payment_method.name,
            term_months=None,
            info_message=PLACEHOLDER_MESSAGE
        )

    months = settings.DEFAULT_TERM_MONTHS if term_months is None else parse_term(term_months)
    loan = LoanInput(
        principal=parse_number(amount),
        annual_rate_percent=parse_number(rate),
        term_months=months
    )

    result = calculate(loan, payment_method)

    logger.info(
        f"Loan evaluated: principal={loan.principal}, rate={loan.annual_rate_percent}, "
        f"term={loan.term_months}, method={payment_method.name}, installment={result.monthly_payment}"
    )

    return CalculationOutcome(
        validation=validation,
        result=result,
        method=payment_method.name,
        term_months=loan.term_months,
        info_message=info_message(payment_method, loan.term_months)
    )
