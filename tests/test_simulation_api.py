from __future__ import annotations

from math import isclose

import pytest
from flask.testing import FlaskClient


def retirement_payload() -> dict:
    return {
        "current_age": 30,
        "retirement_age": 60,
        "monthly_contribution": 5_000_000,
        "current_savings": 50_000_000,
        "expected_return_percent": 8,
    }


def test_list_simulations(client: FlaskClient):
    resp = client.get("/api/simulations")

    assert resp.status_code == 200
    assert [item["id"] for item in resp.get_json()] == ["retirement", "goal", "investment", "loan"]


def test_retirement_endpoint_returns_envelope(client: FlaskClient):
    resp = client.post("/api/simulations/retirement", json=retirement_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["scenario"] == "retirement"
    assert body["scenario_name"] == "Retirement Planning"
    assert len(body["monthly_series"]) == 360
    assert body["monthly_series"][0]["month"] == 1
    assert body["monthly_payment"] is None


def test_goal_endpoint_reports_required_contribution(client: FlaskClient):
    resp = client.post(
        "/api/simulations/goal",
        json={
            "target_amount": 200_000_000,
            "horizon_months": 36,
            "initial_amount": 20_000_000,
            "expected_return_percent": 6,
        },
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["required_monthly_contribution"] > 0
    assert isclose(body["final_amount"], 200_000_000, rel_tol=1e-9)


def test_investment_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/simulations/investment",
        json={"amount": 100_000_000, "period_months": 120, "expected_return_percent": 10},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["total_contributions"] == 100_000_000
    assert body["total_returns"] > 0


def test_loan_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/simulations/loan",
        json={"loan_amount": 500_000_000, "term_months": 240, "annual_rate_percent": 8.5},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["final_amount"] == 0
    assert 4_335_000 < body["monthly_payment"] < 4_345_000
    assert body["total_interest_paid"] == body["total_returns"]
    assert body["monthly_series"][-1]["balance"] == 0


def test_retirement_age_error_names_the_constraint(client: FlaskClient):
    payload = retirement_payload()
    payload["retirement_age"] = 30

    resp = client.post("/api/simulations/retirement", json=payload)

    assert resp.status_code == 400
    assert resp.get_json() == {
        "error": "retirement age must exceed current age",
        "field": "retirement_age",
        "scenario": "retirement",
    }


@pytest.mark.parametrize(
    "kind, payload",
    [
        ("loan", {"loan_amount": 1000, "term_months": 0, "annual_rate_percent": 5}),
        ("goal", {"target_amount": 1000, "horizon_months": 12, "expected_return_percent": -1}),
        ("investment", {"amount": 1000, "period_months": 12}),
        ("retirement", {"current_age": 30}),
    ],
)
def test_invalid_payload_returns_422(client: FlaskClient, kind, payload):
    resp = client.post(f"/api/simulations/{kind}", json=payload)

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_unknown_scenario_returns_404(client: FlaskClient):
    resp = client.post("/api/simulations/lottery", json={})

    assert resp.status_code == 404


def test_goal_progress_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/goals/progress",
        json={
            "target_amount": 12000,
            "current_amount": 3000,
            "target_date": "2026-10-15",
            "monthly_target": 1500,
            "today": "2026-01-15",
        },
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["progress_percentage"] == 25.0
    assert body["projected_completion_date"] == "2026-07-15"
    assert body["is_on_track"] is True


def test_loan_progress_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/loans/progress",
        json={
            "original_amount": 10000,
            "remaining_balance": 7500,
            "target_date": "2026-11-15",
            "monthly_payment": 800,
            "payment_due_day": 5,
            "today": "2026-01-15",
        },
    )

    assert resp.status_code == 200
    assert resp.get_json()["next_payment_date"] == "2026-02-05"


def test_loan_progress_rejects_bad_due_day(client: FlaskClient):
    resp = client.post(
        "/api/loans/progress",
        json={
            "original_amount": 10000,
            "remaining_balance": 7500,
            "target_date": "2026-11-15",
            "payment_due_day": 40,
        },
    )

    assert resp.status_code == 422


def test_long_goal_horizon_is_answered_not_crashed(client: FlaskClient):
    resp = client.post(
        "/api/simulations/goal",
        json={
            "target_amount": 1_000_000,
            "horizon_months": 40_000,
            "initial_amount": 0,
            "expected_return_percent": 24,
        },
    )

    assert resp.status_code == 200
    assert resp.get_json()["required_monthly_contribution"] == 0
