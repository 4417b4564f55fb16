"""
Budget Store - expenses, newest first
"""
import math
from datetime import date
from typing import List

from tripplanner.models.budget import Expense, ExpenseCategory
from tripplanner.services.base_store import EntityStore


class BudgetStore(EntityStore[Expense]):
    """
    Expenses sort descending by date (most recent first); undated expenses
    come last.
    """

    model = Expense
    storage_key = "expenses"
    timestamp_fields = ("created_at",)
    sort_field = "date"
    sort_descending = True

    def query_by_category(self, trip_id: str, category: ExpenseCategory) -> List[Expense]:
        category = ExpenseCategory(category)
        return self.query(lambda e: e.trip_id == trip_id and e.category == category)

    def query_by_date(self, trip_id: str, day: date) -> List[Expense]:
        expenses = self.query(lambda e: e.trip_id == trip_id and e.date == day)
        return sorted(expenses, key=lambda e: e.created_at, reverse=True)

    def get_total_spent(self, trip_id: str) -> float:
        return math.fsum(e.amount for e in self.query_by_trip(trip_id))

    def get_total_spent_by_category(self, trip_id: str, category: ExpenseCategory) -> float:
        return math.fsum(e.amount for e in self.query_by_category(trip_id, category))

    def get_reimbursable(self, trip_id: str) -> List[Expense]:
        return self.query(lambda e: e.trip_id == trip_id and e.is_reimbursable)
