"""Level-payment loan amortization."""

from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict

from finsim.core.accumulation import growth_factor, monthly_rate
from finsim.core.errors import require
from finsim.log import get_logger

logger = get_logger(__name__)


class AmortizationInput(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float
    annual_rate_percent: float
    term_months: int


class AmortizationRow(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    month: int
    payment: float
    principal_portion: float
    interest_portion: float
    remaining_balance: float


class AmortizationResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    monthly_payment: float
    total_interest_paid: float
    total_principal_paid: float
    schedule: Tuple[AmortizationRow, ...]


def level_payment(principal: float, rate: float, term_months: int) -> float:
    """PMT: the fixed monthly payment that retires ``principal`` in ``term_months``."""
    if rate == 0:
        return principal / term_months
    # divided through by the factor; an overflowed factor leaves interest-only
    factor = growth_factor(rate, term_months)
    return principal * rate / (1 - 1 / factor)


def validate_amortization(request: AmortizationInput) -> None:
    require(request.principal > 0, "principal", "loan amount must be greater than 0")
    require(request.term_months >= 1, "term_months", "loan term must be greater than 0")
    require(
        request.annual_rate_percent >= 0,
        "annual_rate_percent",
        "interest rate cannot be negative",
    )


def amortize(request: AmortizationInput) -> AmortizationResult:
    """Build the full repayment schedule for a fixed-rate loan.

    Each month the interest on the outstanding balance is paid first and the
    remainder of the payment reduces principal. The principal portion never
    exceeds what is still owed, and in the last month of the term it takes
    whatever residual floating-point drift left behind, so the final row
    always shows a balance of exactly zero. The loop stops as soon as the
    balance is cleared.
    """
    validate_amortization(request)

    rate = monthly_rate(request.annual_rate_percent)
    payment = level_payment(request.principal, rate, request.term_months)

    remaining = float(request.principal)
    total_interest = 0.0
    total_principal = 0.0
    rows: List[AmortizationRow] = []

    for month in range(1, request.term_months + 1):
        interest = remaining * rate
        principal_part = payment - interest
        if principal_part >= remaining or month == request.term_months:
            principal_part = remaining

        remaining = remaining - principal_part if principal_part < remaining else 0.0
        total_interest += interest
        total_principal += principal_part

        rows.append(
            AmortizationRow(
                month=month,
                payment=principal_part + interest,
                principal_portion=principal_part,
                interest_portion=interest,
                remaining_balance=remaining,
            )
        )

        if remaining == 0.0:
            if month < request.term_months:
                logger.debug(
                    "amortization.early_payoff",
                    month=month,
                    term_months=request.term_months,
                )
            break

    return AmortizationResult(
        monthly_payment=payment,
        total_interest_paid=total_interest,
        total_principal_paid=total_principal,
        schedule=tuple(rows),
    )
