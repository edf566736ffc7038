"""HTTP routes for the Flask API."""

from datetime import date
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, abort, jsonify, request
from pydantic import BaseModel, ValidationError

from finsim.core import scenarios, tracking
from finsim.core.errors import InvalidInput
from finsim.core.scenarios import SCENARIO_NAMES, ScenarioKind
from finsim.log import get_logger
from finsim.schemas.ping import PingResponse
from finsim.schemas.simulation import (
    GoalRequest,
    InvestmentRequest,
    LoanRequest,
    RetirementRequest,
)
from finsim.schemas.tracking import GoalProgressRequest, LoanProgressRequest

api_bp = Blueprint("api", __name__)
logger = get_logger(__name__)

REQUEST_SCHEMAS: Dict[ScenarioKind, type] = {
    ScenarioKind.RETIREMENT: RetirementRequest,
    ScenarioKind.GOAL: GoalRequest,
    ScenarioKind.INVESTMENT: InvestmentRequest,
    ScenarioKind.LOAN: LoanRequest,
}


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidInput)
def _handle_invalid_input(exc: InvalidInput):
    logger.warning("request.rejected", field=exc.field, scenario=exc.scenario, error=exc.message)
    return jsonify(exc.to_dict()), HTTPStatus.BAD_REQUEST


def _payload(schema: type) -> BaseModel:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return schema.model_validate(raw_payload)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong")
    return jsonify(response.model_dump())


@api_bp.get("/simulations")
def list_simulations() -> Any:
    """Scenario kinds the frontend can offer, with their display titles."""
    return jsonify([{"id": kind.value, "title": title} for kind, title in SCENARIO_NAMES.items()])


@api_bp.post("/simulations/<kind>")
def simulate(kind: str) -> Any:
    """Run one of the named simulations on the posted parameters."""
    try:
        scenario = ScenarioKind(kind)
    except ValueError:
        abort(HTTPStatus.NOT_FOUND)

    payload = _payload(REQUEST_SCHEMAS[scenario])
    result = scenarios.run_scenario(scenario, **payload.model_dump())
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/goals/progress")
def goal_progress() -> Any:
    payload = _payload(GoalProgressRequest)
    result = tracking.goal_progress(
        target_amount=payload.target_amount,
        current_amount=payload.current_amount,
        target_date=payload.target_date,
        monthly_target=payload.monthly_target,
        today=payload.today or date.today(),
    )
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/loans/progress")
def loan_progress() -> Any:
    payload = _payload(LoanProgressRequest)
    result = tracking.loan_progress(
        original_amount=payload.original_amount,
        remaining_balance=payload.remaining_balance,
        target_date=payload.target_date,
        monthly_payment=payload.monthly_payment,
        today=payload.today or date.today(),
        payment_due_day=payload.payment_due_day,
    )
    return jsonify(result.model_dump(mode="json"))
