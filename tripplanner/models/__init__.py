"""
Persisted record types. Every model serializes with camelCase aliases.
"""

from .base import PlannerModel
from .trip import Trip, TripStatus, Destination
from .accommodation import Accommodation, AccommodationType, ContactInfo
from .transport import Transport, TransportMode, TransportLocation, TransportDetails
from .budget import Expense, ExpenseCategory, PaymentMethod
from .task import Task, TaskStatus, TaskPriority, TaskCategory
from .document import TripDocument, DocumentType, DocumentCategory, document_type_for
from .packing import PackingList, PackingCategory, PackingItem
from .itinerary import DayPlan, Activity, ActivityCategory

__all__ = [
    "PlannerModel",
    "Trip",
    "TripStatus",
    "Destination",
    "Accommodation",
    "AccommodationType",
    "ContactInfo",
    "Transport",
    "TransportMode",
    "TransportLocation",
    "TransportDetails",
    "Expense",
    "ExpenseCategory",
    "PaymentMethod",
    "Task",
    "TaskStatus",
    "TaskPriority",
    "TaskCategory",
    "TripDocument",
    "DocumentType",
    "DocumentCategory",
    "document_type_for",
    "PackingList",
    "PackingCategory",
    "PackingItem",
    "DayPlan",
    "Activity",
    "ActivityCategory",
]
