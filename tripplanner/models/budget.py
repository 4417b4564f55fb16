import enum
import datetime as dt
from typing import Optional

from pydantic import Field

from tripplanner.models.base import PlannerModel


class ExpenseCategory(str, enum.Enum):
    ACCOMMODATION = "accommodation"
    TRANSPORT = "transport"
    FOOD = "food"
    ACTIVITIES = "activities"
    SHOPPING = "shopping"
    INSURANCE = "insurance"
    VISA = "visa"
    OTHER = "other"


class PaymentMethod(str, enum.Enum):
    CASH = "cash"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    PAYPAL = "paypal"
    OTHER = "other"


class Expense(PlannerModel):
    id: str
    trip_id: str
    day_id: Optional[str] = None
    title: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    currency: str = "EUR"
    category: ExpenseCategory = ExpenseCategory.OTHER
    date: Optional[dt.date] = None
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None
    is_reimbursable: bool = False
    created_at: dt.datetime
