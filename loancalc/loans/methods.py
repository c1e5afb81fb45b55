"""
Payment methods.
Each method turns (principal, annual rate, term) into the raw monthly installment;
rounding and totals are applied uniformly by the calculator.
"""
import math
from typing import Dict, List

from loancalc.core.logger import logger


class UnknownPaymentMethodError(ValueError):
    """Raised when a payment method name is not registered."""

    def __init__(self, name: str, available: List[str]):
        super().__init__(f"Unknown payment method '{name}'. Available: {', '.join(available)}")
        self.name = name
        self.available = available


class PaymentMethod:
    """Abstract base class for installment formulas. Enforces the Strategy Pattern."""

    def __init__(self, name: str, label: str, description: str):
        self.name = name
        self.label = label
        self.description = description

    def monthly_payment(self, principal: float, annual_rate_percent: float, term_months: int) -> float:
        """Returns the unrounded monthly installment."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(name={self.name!r})>"


class AnnuityMethod(PaymentMethod):
    """
    Fixed-installment (French) amortization.

    Formula: M = P * [r(1+r)^n] / [(1+r)^n - 1], with r = annual% / 100 / 12.
    The monthly rate is a plain division by 12, not a compounding conversion.
    """

    def __init__(self):
        super().__init__(
            name="annuity",
            label="fixed installments",
            description="Fixed installments (French amortization, compound interest)"
        )

    def monthly_payment(self, principal: float, annual_rate_percent: float, term_months: int) -> float:
        # Limit of the formula as r -> 0
        if annual_rate_percent == 0:
            return principal / term_months

        monthly_rate = (annual_rate_percent / 100) / 12
        # (1+r)^n - 1 without cancellation, so tiny rates stay accurate
        growth = math.expm1(term_months * math.log1p(monthly_rate))
        if growth == 0:
            return principal / term_months

        return principal * monthly_rate * (growth + 1) / growth


class SimpleInterestMethod(PaymentMethod):
    """Interest charged on the original principal only, spread evenly over the term."""

    def __init__(self):
        super().__init__(
            name="simple",
            label="simple interest",
            description="Simple interest on the original principal"
        )

    def monthly_payment(self, principal: float, annual_rate_percent: float, term_months: int) -> float:
        total_interest = principal * (annual_rate_percent / 100) * (term_months / 12)
        return (principal + total_interest) / term_months


class PaymentMethodRegistry:
    """Resolves payment methods by name."""

    def __init__(self, methods: List[PaymentMethod]):
        self._methods: Dict[str, PaymentMethod] = {method.name: method for method in methods}

    def get(self, name: str) -> PaymentMethod:
        key = (name or "").strip().lower()
        try:
            return self._methods[key]
        except KeyError:
            logger.warning(f"Unknown payment method requested: {name!r}")
            raise UnknownPaymentMethodError(name, self.names()) from None

    def names(self) -> List[str]:
        return list(self._methods)

    def all(self) -> List[PaymentMethod]:
        return list(self._methods.values())


# Singleton registry instance
payment_methods = PaymentMethodRegistry([
    AnnuityMethod(),
    SimpleInterestMethod(),
])


def get_payment_method(name: str) -> PaymentMethod:
    return payment_methods.get(name)
