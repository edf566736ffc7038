"""The four named simulations and their shared result envelope."""

from __future__ import annotations

import inspect
from contextlib import contextmanager
from enum import Enum
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from finsim.core.accumulation import ProjectionInput, ProjectionResult, project
from finsim.core.amortization import AmortizationInput, amortize
from finsim.core.errors import InvalidInput, require
from finsim.core.goal import GoalSolverInput, solve_required_contribution
from finsim.log import get_logger

logger = get_logger(__name__)


class ScenarioKind(str, Enum):
    RETIREMENT = "retirement"
    GOAL = "goal"
    INVESTMENT = "investment"
    LOAN = "loan"


SCENARIO_NAMES: Dict[ScenarioKind, str] = {
    ScenarioKind.RETIREMENT: "Retirement Planning",
    ScenarioKind.GOAL: "Financial Goal Achievement",
    ScenarioKind.INVESTMENT: "Investment Growth",
    ScenarioKind.LOAN: "Loan Repayment",
}


class ScenarioPoint(BaseModel):
    """One month of a scenario.

    For savings scenarios ``contributions`` and ``returns`` are running totals.
    For a loan, ``contributions`` is the nominal amount paid so far and
    ``returns`` is the interest charged that month.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    month: int
    balance: float
    contributions: float
    returns: float
    principal_paid: Optional[float] = None
    interest_paid: Optional[float] = None


class ScenarioResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    scenario: ScenarioKind
    scenario_name: str
    final_amount: float
    total_contributions: float
    total_returns: float
    monthly_series: Tuple[ScenarioPoint, ...]
    monthly_payment: Optional[float] = None
    total_interest_paid: Optional[float] = None
    required_monthly_contribution: Optional[float] = None


@contextmanager
def _scenario(kind: ScenarioKind) -> Iterator[None]:
    """Tag any InvalidInput raised inside with the scenario it came from."""
    try:
        yield
    except InvalidInput as exc:
        if exc.scenario is None:
            exc.scenario = kind.value
        raise


def _savings_series(projection: ProjectionResult) -> Tuple[ScenarioPoint, ...]:
    return tuple(
        ScenarioPoint(
            month=snap.month,
            balance=snap.balance,
            contributions=snap.cumulative_contributed,
            returns=snap.cumulative_growth,
        )
        for snap in projection.monthly_series
    )


def _log_solved(result: ScenarioResult) -> ScenarioResult:
    logger.debug(
        "scenario.solved",
        scenario=result.scenario.value,
        months=len(result.monthly_series),
        final_amount=result.final_amount,
        total_returns=result.total_returns,
    )
    return result


def retirement(
    current_age: int,
    retirement_age: int,
    monthly_contribution: float,
    current_savings: float,
    expected_return_percent: float,
) -> ScenarioResult:
    kind = ScenarioKind.RETIREMENT
    with _scenario(kind):
        require(
            retirement_age > current_age,
            "retirement_age",
            "retirement age must exceed current age",
        )
        months = (retirement_age - current_age) * 12
        projection = project(
            ProjectionInput(
                principal=current_savings,
                monthly_contribution=monthly_contribution,
                annual_rate_percent=expected_return_percent,
                horizon_months=months,
            )
        )

    # growth attributable to interest alone, excluding everything paid in
    returns = projection.final_value - current_savings - monthly_contribution * months
    return _log_solved(
        ScenarioResult(
            scenario=kind,
            scenario_name=SCENARIO_NAMES[kind],
            final_amount=projection.final_value,
            total_contributions=projection.total_contributed,
            total_returns=returns,
            monthly_series=_savings_series(projection),
        )
    )


def goal(
    target_amount: float,
    horizon_months: int,
    initial_amount: float,
    expected_return_percent: float,
) -> ScenarioResult:
    kind = ScenarioKind.GOAL
    with _scenario(kind):
        required = solve_required_contribution(
            GoalSolverInput(
                target_amount=target_amount,
                initial_amount=initial_amount,
                annual_rate_percent=expected_return_percent,
                horizon_months=horizon_months,
            )
        )
        projection = project(
            ProjectionInput(
                principal=initial_amount,
                monthly_contribution=required,
                annual_rate_percent=expected_return_percent,
                horizon_months=horizon_months,
            )
        )

    contributed = initial_amount + required * horizon_months
    # reported as computed, with no floor at zero
    returns = projection.final_value - contributed
    return _log_solved(
        ScenarioResult(
            scenario=kind,
            scenario_name=SCENARIO_NAMES[kind],
            final_amount=projection.final_value,
            total_contributions=contributed,
            total_returns=returns,
            monthly_series=_savings_series(projection),
            monthly_payment=required,
            required_monthly_contribution=required,
        )
    )


def investment(
    amount: float,
    period_months: int,
    expected_return_percent: float,
) -> ScenarioResult:
    kind = ScenarioKind.INVESTMENT
    with _scenario(kind):
        projection = project(
            ProjectionInput(
                principal=amount,
                monthly_contribution=0.0,
                annual_rate_percent=expected_return_percent,
                horizon_months=period_months,
            )
        )

    return _log_solved(
        ScenarioResult(
            scenario=kind,
            scenario_name=SCENARIO_NAMES[kind],
            final_amount=projection.final_value,
            total_contributions=amount,
            total_returns=projection.final_value - amount,
            monthly_series=_savings_series(projection),
        )
    )


def loan(
    loan_amount: float,
    term_months: int,
    annual_rate_percent: float,
) -> ScenarioResult:
    kind = ScenarioKind.LOAN
    with _scenario(kind):
        result = amortize(
            AmortizationInput(
                principal=loan_amount,
                annual_rate_percent=annual_rate_percent,
                term_months=term_months,
            )
        )

    payment = result.monthly_payment
    series = tuple(
        ScenarioPoint(
            month=row.month,
            balance=row.remaining_balance,
            contributions=payment * row.month,
            returns=row.interest_portion,
            principal_paid=row.principal_portion,
            interest_paid=row.interest_portion,
        )
        for row in result.schedule
    )
    return _log_solved(
        ScenarioResult(
            scenario=kind,
            scenario_name=SCENARIO_NAMES[kind],
            final_amount=0.0,
            total_contributions=payment * term_months,
            total_returns=result.total_interest_paid,
            monthly_series=series,
            monthly_payment=payment,
            total_interest_paid=result.total_interest_paid,
        )
    )


SCENARIOS: Dict[ScenarioKind, Callable[..., ScenarioResult]] = {
    ScenarioKind.RETIREMENT: retirement,
    ScenarioKind.GOAL: goal,
    ScenarioKind.INVESTMENT: investment,
    ScenarioKind.LOAN: loan,
}


def run_scenario(kind: Any, **params: Any) -> ScenarioResult:
    """Dispatch to one of the named scenarios by kind."""
    try:
        scenario = ScenarioKind(kind)
    except ValueError:
        raise InvalidInput("scenario", f"unknown simulation type: {kind!r}") from None
    solver = SCENARIOS[scenario]
    try:
        inspect.signature(solver).bind(**params)
    except TypeError as exc:
        raise InvalidInput("scenario", f"bad parameters for {scenario.value}: {exc}", scenario.value) from None
    return solver(**params)
