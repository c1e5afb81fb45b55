"""
FastAPI Router for the loan calculator.
Validation failures are returned as data (HTTP 200) so the client can render field errors.
"""
from typing import Annotated, Any, Dict, Optional
from uuid import uuid4

from fastapi import APIRouter, Header, HTTPException

from loancalc.core.config import settings
from loancalc.core.logger import audit_log, get_logger_with_correlation
from loancalc.core.utils import clean_numeric_input, format_currency
from loancalc.loans.methods import UnknownPaymentMethodError, payment_methods
from loancalc.loans.schemas import (
    FormattedLoanResult,
    FormValidation,
    LoanCalculationResponse,
    LoanFormRequest,
    LoanResult,
    PaymentMethodInfo,
    ValidationLimits,
)
from loancalc.loans.service import evaluate_form
from loancalc.loans.validators import validate_form

router = APIRouter(tags=["Loans"])


def _prepare(data: LoanFormRequest) -> Dict[str, Any]:
    """Applies optional input cleaning to the raw text fields."""
    amount = data.amount or ""
    rate = data.interest_rate or ""
    term = data.term_months

    if data.sanitize:
        amount = clean_numeric_input(amount)
        rate = clean_numeric_input(rate)
        if isinstance(term, str):
            term = clean_numeric_input(term)

    return {"amount": amount, "rate": rate, "term": term}


def _format(result: LoanResult) -> FormattedLoanResult:
    return FormattedLoanResult(
        monthly_payment=format_currency(result.monthly_payment),
        total_payment=format_currency(result.total_payment),
        total_interest=format_currency(result.total_interest)
    )


@router.post("/calculate", response_model=LoanCalculationResponse)
def calculate_installments(
    data: LoanFormRequest,
    x_correlation_id: Annotated[Optional[str], Header()] = None
) -> LoanCalculationResponse:
    """
    **Loan installment calculator**

    Validates the raw form and, when every field is valid, computes the loan.

    - **amount**: Loan amount as typed by the user
    - **interest_rate**: Annual interest rate in percent (0-100)
    - **term_months**: Number of monthly installments
    - **method**: `annuity` (default) or `simple`
    - **sanitize**: Strip non-numeric characters first

    **Returns:**
    - Per-field validation verdicts
    - Monthly installment, total payment and total interest (when valid)
    - Display-formatted currency strings
    """
    correlation_id = x_correlation_id or str(uuid4())
    logger = get_logger_with_correlation(correlation_id)

    fields = _prepare(data)
    logger.info(f"Starting loan calculation: {fields}, method={data.method}")

    try:
        outcome = evaluate_form(fields["amount"], fields["rate"], fields["term"], data.method)
    except UnknownPaymentMethodError as e:
        raise HTTPException(status_code=400, detail=str(e))

    validation = outcome.validation

    if outcome.result is not None:
        audit_log(
            action="loan_calculation",
            user="anonymous",
            resource="loan",
            details={
                "correlation_id": correlation_id,
                "method": outcome.method,
                "term_months": outcome.term_months,
                "monthly_payment": outcome.result.monthly_payment
            }
        )

    return LoanCalculationResponse(
        valid=validation.overall_valid,
        errors=validation.errors(),
        fields={
            "amount": validation.amount_result,
            "interest_rate": validation.rate_result,
            "term_months": validation.term_result,
        },
        result=outcome.result,
        formatted=_format(outcome.result) if outcome.result is not None else None,
        method=outcome.method,
        term_months=outcome.term_months,
        info_message=outcome.info_message
    )


@router.post("/validate", response_model=FormValidation)
def validate_loan_form(data: LoanFormRequest) -> FormValidation:
    """Runs validation only, without computing the loan."""
    fields = _prepare(data)
    return validate_form(fields["amount"], fields["rate"], fields["term"])


@router.get("/methods", response_model=Dict[str, Any])
def list_methods() -> Dict[str, Any]:
    """
    Exposes the available payment methods and the configured default.
    """
    methods = [
        PaymentMethodInfo(name=method.name, description=method.description).model_dump()
        for method in payment_methods.all()
    ]

    return {
        "default": settings.DEFAULT_PAYMENT_METHOD,
        "methods": methods
    }


@router.get("/limits", response_model=Dict[str, Any])
def get_limits() -> Dict[str, Any]:
    """Returns the active input bounds so clients can configure their controls."""
    return {
        "limits": ValidationLimits.from_settings().model_dump(),
        "default_term_months": settings.DEFAULT_TERM_MONTHS
    }
