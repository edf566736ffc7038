"""Request bodies accepted by the simulation endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class RetirementRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    current_age: int = Field(..., ge=0, le=120, description="Age today, in years.")
    retirement_age: int = Field(..., ge=0, le=120, description="Age at retirement, in years.")
    monthly_contribution: float = Field(..., ge=0, description="Amount saved at the end of each month.")
    current_savings: float = Field(..., ge=0, description="Balance already saved.")
    expected_return_percent: float = Field(
        ...,
        ge=0,
        description="Expected annual return as a percentage (e.g. 8 for 8%).",
    )


class GoalRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    target_amount: float = Field(..., description="Amount to have saved by the deadline.")
    horizon_months: int = Field(..., ge=1, description="Months until the deadline.")
    initial_amount: float = Field(0.0, ge=0, description="Amount already set aside.")
    expected_return_percent: float = Field(..., ge=0)


class InvestmentRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    amount: float = Field(..., ge=0, description="Lump sum invested at month 0.")
    period_months: int = Field(..., ge=1)
    expected_return_percent: float = Field(..., ge=0)


class LoanRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    loan_amount: float = Field(..., gt=0)
    term_months: int = Field(..., ge=1, description="Repayment term in months.")
    annual_rate_percent: float = Field(..., ge=0, description="Nominal annual interest rate, in percent.")
