"""
Export/import document schema
"""
from datetime import datetime
from typing import List

from pydantic import Field

from tripplanner.models import (
    Accommodation,
    DayPlan,
    Expense,
    PackingList,
    Task,
    Transport,
    Trip,
    TripDocument,
)
from tripplanner.models.base import PlannerModel


class ExportCollections(PlannerModel):
    trips: List[Trip]
    day_plans: List[DayPlan]
    accommodations: List[Accommodation]
    expenses: List[Expense]
    packing_lists: List[PackingList]
    # added in later format versions, optional on import
    transports: List[Transport] = Field(default_factory=list)
    tasks: List[Task] = Field(default_factory=list)
    documents: List[TripDocument] = Field(default_factory=list)


class ExportData(PlannerModel):
    """``{version, exportedAt, data: {...}}``"""
    version: str
    exported_at: datetime
    data: ExportCollections


class ImportCounts(PlannerModel):
    trips: int = 0
    destinations: int = 0
    day_plans: int = 0
    activities: int = 0
    accommodations: int = 0
    expenses: int = 0
    packing_lists: int = 0
    packing_categories: int = 0
    packing_items: int = 0
    transports: int = 0
    tasks: int = 0
    documents: int = 0


class ImportResult(PlannerModel):
    merged: bool
    imported_counts: ImportCounts
