"""Pure numeric routines: projection, amortization, goal solving, scenarios."""

from finsim.core.accumulation import (
    MonthlySnapshot,
    ProjectionInput,
    ProjectionResult,
    ProjectionSummary,
    iter_projection,
    project,
    summarize_projection,
)
from finsim.core.amortization import (
    AmortizationInput,
    AmortizationResult,
    AmortizationRow,
    amortize,
)
from finsim.core.errors import InvalidInput
from finsim.core.goal import GoalSolverInput, solve_required_contribution
from finsim.core.scenarios import (
    ScenarioKind,
    ScenarioPoint,
    ScenarioResult,
    run_scenario,
)

__all__ = [
    "AmortizationInput",
    "AmortizationResult",
    "AmortizationRow",
    "GoalSolverInput",
    "InvalidInput",
    "MonthlySnapshot",
    "ProjectionInput",
    "ProjectionResult",
    "ProjectionSummary",
    "ScenarioKind",
    "ScenarioPoint",
    "ScenarioResult",
    "amortize",
    "iter_projection",
    "project",
    "run_scenario",
    "solve_required_contribution",
    "summarize_projection",
]
