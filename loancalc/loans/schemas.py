"""
Pydantic schemas for loan input, validation verdicts and results.
Value objects are frozen: every calculation works on a fresh snapshot.
"""
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from loancalc.core.config import settings


class LoanInput(BaseModel):
    """Validated numeric loan parameters for a single calculation."""
    principal: float = Field(..., gt=0, allow_inf_nan=False, description="Loan amount")
    annual_rate_percent: float = Field(..., ge=0, le=100, allow_inf_nan=False, description="Annual interest rate (%)")
    term_months: int = Field(..., ge=1, description="Number of monthly installments")

    model_config = ConfigDict(frozen=True)


class ValidationResult(BaseModel):
    """Verdict for one form field. The message is empty when the field is valid."""
    valid: bool = Field(..., description="Whether the field passed validation")
    message: str = Field(default="", description="Reason shown to the user")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True, message="")

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(valid=False, message=message)


class FormValidation(BaseModel):
    """Combined verdict for the whole calculator form."""
    overall_valid: bool
    amount_result: ValidationResult
    rate_result: ValidationResult
    term_result: ValidationResult = Field(default_factory=ValidationResult.ok)

    model_config = ConfigDict(frozen=True)

    def errors(self) -> Dict[str, str]:
        """Field name -> message, for invalid fields only."""
        fields = {
            "amount": self.amount_result,
            "interest_rate": self.rate_result,
            "term_months": self.term_result,
        }
        return {name: result.message for name, result in fields.items() if not result.valid}


class LoanResult(BaseModel):
    """Aggregate repayment figures, each rounded to cents."""
    monthly_payment: float = Field(..., description="Fixed monthly installment")
    total_payment: float = Field(..., description="Installment times number of months")
    total_interest: float = Field(..., description="Total payment minus principal")

    model_config = ConfigDict(frozen=True)


class ValidationLimits(BaseModel):
    """Product bounds applied to user input."""
    max_amount: float = Field(default=999_999_999, gt=0)
    max_rate_percent: float = Field(default=100, ge=0)
    min_term_months: int = Field(default=1, ge=1)
    max_term_months: int = Field(default=360, ge=1)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls) -> "ValidationLimits":
        return cls(
            max_amount=settings.MAX_AMOUNT,
            max_rate_percent=settings.MAX_RATE_PERCENT,
            min_term_months=settings.MIN_TERM_MONTHS,
            max_term_months=settings.MAX_TERM_MONTHS,
        )


class CalculationOutcome(BaseModel):
    """Result of one pass of the validate-then-calculate flow."""
    validation: FormValidation
    result: Optional[LoanResult] = None
    method: str
    term_months: Optional[int] = None
    info_message: str

    model_config = ConfigDict(frozen=True)


class LoanFormRequest(BaseModel):
    """Raw calculator form as typed by the user."""
    amount: Optional[str] = Field(default="", description="Loan amount as entered")
    interest_rate: Optional[str] = Field(default="", description="Annual interest rate (%) as entered")
    term_months: Union[int, str] = Field(
        default=settings.DEFAULT_TERM_MONTHS,
        description="Number of monthly installments"
    )
    method: Optional[str] = Field(default=None, description="Payment method name (annuity, simple)")
    sanitize: bool = Field(default=False, description="Strip non-numeric characters before validating")


class FormattedLoanResult(BaseModel):
    """Currency strings ready for display."""
    monthly_payment: str
    total_payment: str
    total_interest: str


class LoanCalculationResponse(BaseModel):
    """Calculation response payload."""
    valid: bool = Field(..., description="True when every field passed validation")
    errors: Dict[str, str] = Field(default_factory=dict, description="Messages for invalid fields")
    fields: Dict[str, ValidationResult] = Field(..., description="Per-field validation verdicts")
    result: Optional[LoanResult] = Field(None, description="Computed figures, absent when invalid")
    formatted: Optional[FormattedLoanResult] = Field(None, description="Display strings for the result")
    method: str = Field(..., description="Payment method used")
    term_months: Optional[int] = Field(None, description="Term used for the calculation")
    info_message: str = Field(..., description="Informational line for the result area")


class PaymentMethodInfo(BaseModel):
    name: str
    description: str
