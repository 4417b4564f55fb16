import datetime as dt
from typing import Optional

from pydantic import Field

from tripplanner.models.base import PlannerModel
from tripplanner.models.budget import ExpenseCategory, PaymentMethod


class ExpenseCreate(PlannerModel):
    day_id: Optional[str] = None
    title: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    currency: str = "EUR"
    category: ExpenseCategory = ExpenseCategory.OTHER
    date: Optional[dt.date] = None
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None
    is_reimbursable: bool = False


class SpendingTotal(PlannerModel):
    trip_id: str
    category: Optional[ExpenseCategory] = None
    total: float
