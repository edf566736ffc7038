"""Solve for the monthly contribution that reaches a savings target."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from finsim.core.accumulation import growth_factor, monthly_rate
from finsim.core.errors import require


class GoalSolverInput(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    target_amount: float
    initial_amount: float
    annual_rate_percent: float
    horizon_months: int


def validate_goal(request: GoalSolverInput) -> None:
    require(request.horizon_months >= 1, "horizon_months", "timeframe must be greater than 0")
    require(request.initial_amount >= 0, "initial_amount", "initial amount cannot be negative")
    require(
        request.annual_rate_percent >= 0,
        "annual_rate_percent",
        "expected return cannot be negative",
    )


def solve_required_contribution(request: GoalSolverInput) -> float:
    """Invert the accumulation formula for the contribution.

    FV = P(1+r)^n + C((1+r)^n - 1)/r, solved for C. A goal that the initial
    amount reaches on its own needs no contribution, so negative answers are
    reported as 0.
    """
    validate_goal(request)

    rate = monthly_rate(request.annual_rate_percent)
    months = request.horizon_months

    if rate == 0:
        required = (request.target_amount - request.initial_amount) / months
    else:
        factor = growth_factor(rate, months)
        required = (request.target_amount / factor - request.initial_amount) * rate / (1 - 1 / factor)

    return max(required, 0.0)
