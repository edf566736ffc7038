"""Progress metrics for savings goals and loans being paid down."""

from __future__ import annotations

import calendar
import math
from datetime import date
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, ConfigDict

from finsim.core.errors import require

# average days per month, used to turn a day count into whole months
DAYS_PER_MONTH = 30.44


class GoalProgress(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    progress_percentage: float
    remaining_amount: float
    days_remaining: int
    months_remaining: int
    required_monthly_amount: float
    is_on_track: bool
    projected_completion_date: date


class LoanProgress(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    progress_percentage: float
    remaining_amount: float
    days_remaining: int
    months_remaining: int
    is_on_track: bool
    next_payment_date: Optional[date] = None


def time_remaining(today: date, target_date: date) -> Tuple[int, int]:
    """Return ``(days, months)`` left until ``target_date``, never negative."""
    days = max(0, (target_date - today).days)
    months = max(0, math.ceil(days / DAYS_PER_MONTH))
    return days, months


def next_payment_date(payment_due_day: int, today: date) -> date:
    """Next occurrence of a monthly due day strictly after ``today``.

    Days past the end of a short month fall on that month's last day.
    """
    require(1 <= payment_due_day <= 31, "payment_due_day", "payment due day must be between 1 and 31")

    def on_day(month_start: date) -> date:
        last = calendar.monthrange(month_start.year, month_start.month)[1]
        return month_start.replace(day=min(payment_due_day, last))

    this_month = on_day(today.replace(day=1))
    if this_month > today:
        return this_month
    return on_day(today.replace(day=1) + relativedelta(months=1))


def goal_progress(
    target_amount: float,
    current_amount: float,
    target_date: date,
    monthly_target: float,
    today: date,
) -> GoalProgress:
    require(target_amount >= 0, "target_amount", "target amount cannot be negative")
    require(current_amount >= 0, "current_amount", "current amount cannot be negative")
    require(monthly_target >= 0, "monthly_target", "monthly target cannot be negative")

    progress = current_amount / target_amount * 100 if target_amount > 0 else 0.0
    remaining = max(0.0, target_amount - current_amount)
    days, months = time_remaining(today, target_date)

    required = remaining / months if months > 0 else 0.0
    on_track = required <= monthly_target if monthly_target > 0 else True

    completion = target_date
    if monthly_target > 0 and remaining > 0:
        completion = today + relativedelta(months=math.ceil(remaining / monthly_target))

    return GoalProgress(
        progress_percentage=min(progress, 100.0),
        remaining_amount=remaining,
        days_remaining=days,
        months_remaining=months,
        required_monthly_amount=required,
        is_on_track=on_track,
        projected_completion_date=completion,
    )


def loan_progress(
    original_amount: float,
    remaining_balance: float,
    target_date: date,
    monthly_payment: float,
    today: date,
    payment_due_day: Optional[int] = None,
) -> LoanProgress:
    require(original_amount >= 0, "original_amount", "loan amount cannot be negative")
    require(remaining_balance >= 0, "remaining_balance", "remaining balance cannot be negative")
    require(monthly_payment >= 0, "monthly_payment", "monthly payment cannot be negative")

    paid_off = original_amount - remaining_balance
    progress = paid_off / original_amount * 100 if original_amount > 0 else 0.0
    days, months = time_remaining(today, target_date)

    on_track = True
    if monthly_payment > 0 and months > 0:
        on_track = remaining_balance / months <= monthly_payment

    next_due = None
    if payment_due_day is not None and remaining_balance > 0:
        next_due = next_payment_date(payment_due_day, today)

    return LoanProgress(
        progress_percentage=min(progress, 100.0),
        remaining_amount=remaining_balance,
        days_remaining=days,
        months_remaining=months,
        is_on_track=on_track,
        next_payment_date=next_due,
    )
