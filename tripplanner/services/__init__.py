"""
Entity stores and the services built on top of them.
"""

from .base_store import EntityStore
from .trip_store import TripStore
from .accommodation_store import AccommodationStore
from .transport_store import TransportStore
from .budget_store import BudgetStore
from .tasks_store import TaskStore
from .documents_store import DocumentStore
from .packing_store import PackingStore
from .itinerary_store import ItineraryStore
from .ui_state import Toast, ToastType, UIPreferences, UIState
from .statistics import PlannerSnapshot, StatisticsReport, compute_statistics
from .registry import StoreRegistry
from .transfer import EXPORT_VERSION, TransferService
from .planner import Planner

__all__ = [
    "EntityStore",
    "TripStore",
    "AccommodationStore",
    "TransportStore",
    "BudgetStore",
    "TaskStore",
    "DocumentStore",
    "PackingStore",
    "ItineraryStore",
    "Toast",
    "ToastType",
    "UIPreferences",
    "UIState",
    "PlannerSnapshot",
    "StatisticsReport",
    "compute_statistics",
    "StoreRegistry",
    "EXPORT_VERSION",
    "TransferService",
    "Planner",
]
