"""
The set of entity stores that make up one planner, built over one storage backend
"""
from dataclasses import dataclass
from typing import List

from tripplanner.core.clock import Clock, utc_now
from tripplanner.core.storage import StorageBackend
from tripplanner.services.accommodation_store import AccommodationStore
from tripplanner.services.base_store import EntityStore
from tripplanner.services.budget_store import BudgetStore
from tripplanner.services.documents_store import DocumentStore
from tripplanner.services.itinerary_store import ItineraryStore
from tripplanner.services.packing_store import PackingStore
from tripplanner.services.statistics import PlannerSnapshot
from tripplanner.services.tasks_store import TaskStore
from tripplanner.services.transport_store import TransportStore
from tripplanner.services.trip_store import TripStore


@dataclass
class StoreRegistry:
    trips: TripStore
    itinerary: ItineraryStore
    accommodations: AccommodationStore
    expenses: BudgetStore
    packing: PackingStore
    transports: TransportStore
    tasks: TaskStore
    documents: DocumentStore

    @classmethod
    def create(cls, storage: StorageBackend, clock: Clock = utc_now) -> "StoreRegistry":
        return cls(
            trips=TripStore(storage, clock),
            itinerary=ItineraryStore(storage, clock),
            accommodations=AccommodationStore(storage, clock),
            expenses=BudgetStore(storage, clock),
            packing=PackingStore(storage, clock),
            transports=TransportStore(storage, clock),
            tasks=TaskStore(storage, clock),
            documents=DocumentStore(storage, clock),
        )

    def dependents(self) -> List[EntityStore]:
        """Every store whose records carry a ``trip_id``"""
        return [
            self.itinerary,
            self.accommodations,
            self.expenses,
            self.packing,
            self.transports,
            self.tasks,
            self.documents,
        ]

    def snapshot(self) -> PlannerSnapshot:
        return PlannerSnapshot(
            trips=tuple(self.trips.list_all()),
            day_plans=tuple(self.itinerary.list_all()),
            accommodations=tuple(self.accommodations.list_all()),
            expenses=tuple(self.expenses.list_all()),
            packing_lists=tuple(self.packing.list_all()),
            transports=tuple(self.transports.list_all()),
            tasks=tuple(self.tasks.list_all()),
            documents=tuple(self.documents.list_all()),
        )
