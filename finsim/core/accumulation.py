"""Compound growth of a principal plus a fixed monthly contribution."""

from __future__ import annotations

import math
from typing import Iterator, Tuple

from pydantic import BaseModel, ConfigDict

from finsim.core.errors import require


class ProjectionInput(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float
    monthly_contribution: float
    annual_rate_percent: float
    horizon_months: int


class MonthlySnapshot(BaseModel):
    """Balance and running totals at the end of one month."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    month: int
    balance: float
    cumulative_contributed: float
    cumulative_growth: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    final_value: float
    total_contributed: float
    total_growth: float
    monthly_series: Tuple[MonthlySnapshot, ...]


class ProjectionSummary(BaseModel):
    """Totals of a projection without the per-month series."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    final_value: float
    total_contributed: float
    total_growth: float
    months: int


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage into a monthly decimal rate."""
    return annual_rate_percent / 100 / 12


def growth_factor(rate: float, months: int) -> float:
    """(1 + rate) ** months, or ``math.inf`` once it leaves the float range."""
    try:
        return (1 + rate) ** months
    except OverflowError:
        return math.inf


def validate_projection(request: ProjectionInput) -> None:
    require(request.horizon_months >= 1, "horizon_months", "horizon must be at least one month")
    require(request.principal >= 0, "principal", "principal cannot be negative")
    require(
        request.monthly_contribution >= 0,
        "monthly_contribution",
        "monthly contribution cannot be negative",
    )
    require(
        request.annual_rate_percent >= 0,
        "annual_rate_percent",
        "annual rate cannot be negative",
    )


def _snapshots(request: ProjectionInput) -> Iterator[MonthlySnapshot]:
    rate = monthly_rate(request.annual_rate_percent)
    contribution = request.monthly_contribution

    balance = float(request.principal)
    contributed = float(request.principal)
    growth_total = 0.0

    for month in range(1, request.horizon_months + 1):
        # growth accrues on the opening balance; the contribution lands at month end
        growth = balance * rate
        balance = balance + growth + contribution
        contributed += contribution
        growth_total += growth
        yield MonthlySnapshot(
            month=month,
            balance=balance,
            cumulative_contributed=contributed,
            cumulative_growth=growth_total,
        )


def iter_projection(request: ProjectionInput) -> Iterator[MonthlySnapshot]:
    """Lazily yield one snapshot per month.

    Inputs are validated eagerly, so a bad request fails at call time rather
    than on the first ``next()``.
    """
    validate_projection(request)
    return _snapshots(request)


def project(request: ProjectionInput) -> ProjectionResult:
    """Project the balance month by month over the whole horizon."""
    series = tuple(iter_projection(request))
    final = series[-1]
    return ProjectionResult(
        final_value=final.balance,
        total_contributed=final.cumulative_contributed,
        total_growth=final.balance - final.cumulative_contributed,
        monthly_series=series,
    )


def summarize_projection(request: ProjectionInput) -> ProjectionSummary:
    """Fold the projection into its totals, keeping only the latest snapshot."""
    last = None
    for last in iter_projection(request):
        pass
    return ProjectionSummary(
        final_value=last.balance,
        total_contributed=last.cumulative_contributed,
        total_growth=last.balance - last.cumulative_contributed,
        months=last.month,
    )
