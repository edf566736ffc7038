"""Request bodies for the goal and loan progress endpoints."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GoalProgressRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    target_amount: float = Field(..., ge=0)
    current_amount: float = Field(0.0, ge=0)
    target_date: date
    monthly_target: float = Field(0.0, ge=0, description="Planned monthly contribution.")
    today: Optional[date] = Field(None, description="Reference date; defaults to the server's date.")


class LoanProgressRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    original_amount: float = Field(..., ge=0)
    remaining_balance: float = Field(..., ge=0)
    target_date: date
    monthly_payment: float = Field(0.0, ge=0)
    payment_due_day: Optional[int] = Field(None, ge=1, le=31)
    today: Optional[date] = None
