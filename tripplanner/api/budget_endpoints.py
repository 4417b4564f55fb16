"""
Budget API endpoints - expenses and spending totals
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from tripplanner.core.dependencies import get_planner
from tripplanner.core.exceptions import RecordNotFoundError
from tripplanner.models.budget import Expense, ExpenseCategory
from tripplanner.schemas.base import Envelope
from tripplanner.schemas.budget import ExpenseCreate, SpendingTotal
from tripplanner.services.planner import Planner

router = APIRouter(tags=["budget"])


@router.post(
    "/trips/{trip_id}/expenses",
    response_model=Envelope[Expense],
    status_code=status.HTTP_201_CREATED,
)
def add_expense(trip_id: str, data: ExpenseCreate, planner: Planner = Depends(get_planner)):
    expense_id = planner.add_expense(trip_id, data.model_dump())
    return Envelope.ok(planner.stores.expenses.get(expense_id))


@router.get("/trips/{trip_id}/expenses", response_model=Envelope[List[Expense]])
def list_expenses(
    trip_id: str,
    category: Optional[ExpenseCategory] = Query(None),
    planner: Planner = Depends(get_planner),
):
    """
    Expenses of a trip, most recent first
    """
    expenses = planner.stores.expenses
    data = expenses.query_by_category(trip_id, category) if category else expenses.query_by_trip(trip_id)
    return Envelope.ok(data)


@router.get("/trips/{trip_id}/expenses/total", response_model=Envelope[SpendingTotal])
def total_spent(
    trip_id: str,
    category: Optional[ExpenseCategory] = Query(None),
    planner: Planner = Depends(get_planner),
):
    expenses = planner.stores.expenses
    if category:
        total = expenses.get_total_spent_by_category(trip_id, category)
    else:
        total = expenses.get_total_spent(trip_id)
    return Envelope.ok(SpendingTotal(trip_id=trip_id, category=category, total=total))


@router.delete("/expenses/{expense_id}", response_model=Envelope[None])
def delete_expense(expense_id: str, planner: Planner = Depends(get_planner)):
    if not planner.stores.expenses.delete(expense_id):
        raise RecordNotFoundError("Expense", expense_id)
    return Envelope.ok()
