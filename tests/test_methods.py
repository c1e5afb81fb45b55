"""
Unit tests for payment methods and their registry.
"""
import pytest
from loancalc.loans.methods import (
    AnnuityMethod,
    SimpleInterestMethod,
    PaymentMethodRegistry,
    UnknownPaymentMethodError,
    get_payment_method,
    payment_methods
)
from loancalc.loans.service import resolve_method


def test_annuity_formula():
    """1% monthly over 12 months matches the closed-form installment."""
    method = AnnuityMethod()
    payment = method.monthly_payment(1000000, 12, 12)

    assert payment == pytest.approx(88848.7886, abs=1e-3)


def test_annuity_zero_rate():
    assert AnnuityMethod().monthly_payment(1200, 0, 12) == 100.0


def test_annuity_single_installment():
    """One installment repays principal plus one month of interest."""
    assert AnnuityMethod().monthly_payment(1000, 12, 1) == pytest.approx(1010.0)


def test_simple_interest_formula():
    payment = SimpleInterestMethod().monthly_payment(2400, 6, 24)
    # interest = 2400 * 0.06 * 2 = 288
    assert payment == pytest.approx((2400 + 288) / 24)


def test_registry_lookup():
    assert isinstance(get_payment_method("annuity"), AnnuityMethod)
    assert isinstance(get_payment_method(" Simple "), SimpleInterestMethod)
    assert payment_methods.names() == ["annuity", "simple"]


def test_registry_unknown_method():
    with pytest.raises(UnknownPaymentMethodError) as exc_info:
        get_payment_method("german")

    assert exc_info.value.name == "german"
    assert "annuity" in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)


def test_custom_registry():
    registry = PaymentMethodRegistry([SimpleInterestMethod()])

    assert registry.names() == ["simple"]
    with pytest.raises(UnknownPaymentMethodError):
        registry.get("annuity")


def test_resolve_method_defaults_to_annuity():
    assert resolve_method(None).name == "annuity"

    method = SimpleInterestMethod()
    assert resolve_method(method) is method


@pytest.mark.parametrize("rate", [1e-15, 1e-12, 1e-10])
def test_annuity_tiny_rate_close_to_even_split(rate):
    """Tiny positive rates stay finite and approach principal / months."""
    payment = AnnuityMethod().monthly_payment(1200, rate, 12)

    assert payment == pytest.approx(100.0, abs=1e-6)
    assert payment >= 100.0 - 1e-9
