"""
Planner - application service over the stores, the gamification engine and UI state
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from tripplanner.core.clock import Clock, utc_now
from tripplanner.core.exceptions import RecordNotFoundError, TripNotFoundError
from tripplanner.core.storage import StorageBackend
from tripplanner.gamification import Achievement, ConditionType, GamificationEngine
from tripplanner.models import TaskStatus, Trip, TripStatus
from tripplanner.services.packing_templates import get_template
from tripplanner.services.registry import StoreRegistry
from tripplanner.services.statistics import PlannerSnapshot, StatisticsReport, compute_statistics
from tripplanner.services.transfer import EXPORT_VERSION, TransferService
from tripplanner.services.ui_state import Toast, ToastType, UIState

logger = logging.getLogger(__name__)


class Planner:
    """
    Entry point for user actions.

    Store mutations that count as engagement raise the matching gamification
    events (counter, streak, achievement check). Stores and engine are written
    independently; there is no transaction spanning both.

    Child records can only be created for an existing trip. Deleting a trip
    removes its dependents unless ``cascade_deletes`` is off, in which case
    they stay behind as orphans (see ``find_orphans``).
    """

    def __init__(
        self,
        stores: StoreRegistry,
        gamification: GamificationEngine,
        ui: UIState,
        clock: Clock = utc_now,
        cascade_deletes: bool = True,
        export_version: str = EXPORT_VERSION,
    ):
        self.stores = stores
        self.gamification = gamification
        self.ui = ui
        self.transfer = TransferService(stores, version=export_version, clock=clock)
        self._clock = clock
        self.cascade_deletes = cascade_deletes

    @classmethod
    def create(cls, storage: StorageBackend, clock: Clock = utc_now, **kwargs: Any) -> "Planner":
        return cls(
            stores=StoreRegistry.create(storage, clock),
            gamification=GamificationEngine(storage, clock),
            ui=UIState(storage, kwargs.pop("toast_duration_ms", 5000)),
            clock=clock,
            **kwargs,
        )

    # ------------------------------------------------------------------ #
    # gamification wiring
    # ------------------------------------------------------------------ #

    def _require_trip(self, trip_id: str) -> Trip:
        trip = self.stores.trips.get(trip_id)
        if trip is None:
            raise TripNotFoundError(trip_id)
        return trip

    def _child_payload(self, trip_id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Payload for a record of an existing trip; ``trip_id`` in ``data`` is ignored"""
        self._require_trip(trip_id)
        payload = {k: v for k, v in data.items() if k not in ("trip_id", "tripId")}
        payload["trip_id"] = trip_id
        return payload

    def achievement_context(self) -> Dict[ConditionType, float]:
        """Store-derived metrics for achievement conditions"""
        s = self.stores
        trips = s.trips.list_all()
        lead_times = [(t.start_date - t.created_at.date()).days for t in trips]
        under_budget = 0
        for trip in trips:
            if trip.status == TripStatus.COMPLETED and trip.total_budget > 0:
                if s.expenses.get_total_spent(trip.id) <= trip.total_budget:
                    under_budget += 1
        countries = {d.country for t in trips for d in t.destinations if d.country}
        return {
            ConditionType.TRIPS_CREATED: len(trips),
            ConditionType.COUNTRIES_VISITED: len(countries),
            ConditionType.DAYS_ADVANCE: max(lead_times, default=0),
            ConditionType.PACKING_LISTS_COMPLETE: sum(
                1 for p in s.packing.list_all() if s.packing.is_complete(p.id)
            ),
            ConditionType.ACCOMMODATIONS_BOOKED: s.accommodations.count(),
            ConditionType.TRIPS_UNDER_BUDGET: under_budget,
            ConditionType.ACTIVITIES_PLANNED: s.itinerary.count_activities(),
            ConditionType.EXPENSES_TRACKED: s.expenses.count(),
        }

    def check_achievements(self) -> List[Achievement]:
        unlocked = self.gamification.check_achievements(self.achievement_context())
        for achievement in unlocked:
            self.ui.add_toast(
                ToastType.ACHIEVEMENT,
                title=achievement.title,
                message=f"{achievement.description} (+{achievement.points} points)",
            )
        return unlocked

    def _record_activity(self, counter: Optional[str] = None) -> List[Achievement]:
        if counter:
            self.gamification.increment_stat(counter)
        self.gamification.update_streak()
        return self.check_achievements()

    # ------------------------------------------------------------------ #
    # trips
    # ------------------------------------------------------------------ #

    def create_trip(self, data: Mapping[str, Any]) -> str:
        trip_id = self.stores.trips.add(data)
        logger.info("Trip created", extra={"trip_id": trip_id})
        self._record_activity()
        return trip_id

    def update_trip(self, trip_id: str, **fields: Any) -> Optional[Trip]:
        previous = self.stores.trips.get(trip_id)
        updated = self.stores.trips.update(trip_id, **fields)
        if (
            updated is not None
            and previous.status != TripStatus.COMPLETED
            and updated.status == TripStatus.COMPLETED
        ):
            self._record_activity("trips_completed")
        return updated

    def complete_trip(self, trip_id: str) -> Optional[Trip]:
        return self.update_trip(trip_id, status=TripStatus.COMPLETED)

    def delete_trip(self, trip_id: str, cascade: Optional[bool] = None) -> Dict[str, int]:
        """
        Delete a trip

        Args:
            trip_id: Trip ID
            cascade: also delete dependent records; defaults to ``cascade_deletes``

        Returns:
            Number of deleted records per store key
        """
        cascade = self.cascade_deletes if cascade is None else cascade
        removed = {self.stores.trips.storage_key: int(self.stores.trips.delete(trip_id))}
        if cascade:
            for store in self.stores.dependents():
                removed[store.storage_key] = store.delete_by_trip(trip_id)
        logger.info("Trip deleted", extra={"trip_id": trip_id, "cascade": cascade, "removed": removed})
        return removed

    def find_orphans(self) -> Dict[str, List[str]]:
        """Ids of records, per store key, whose trip no longer exists"""
        trip_ids = {t.id for t in self.stores.trips.list_all()}
        orphans = {}
        for store in self.stores.dependents():
            ids = [r.id for r in store.list_all() if r.trip_id not in trip_ids]
            if ids:
                orphans[store.storage_key] = ids
        return orphans

    def add_destination(self, trip_id: str, data: Mapping[str, Any]) -> str:
        self._require_trip(trip_id)
        destination_id = self.stores.trips.add_destination(trip_id, data)
        self._record_activity()
        return destination_id

    # ------------------------------------------------------------------ #
    # dependents
    # ------------------------------------------------------------------ #

    def add_expense(self, trip_id: str, data: Mapping[str, Any]) -> str:
        expense_id = self.stores.expenses.add(self._child_payload(trip_id, data))
        self._record_activity("budget_entries")
        return expense_id

    def add_accommodation(self, trip_id: str, data: Mapping[str, Any]) -> str:
        accommodation_id = self.stores.accommodations.add(self._child_payload(trip_id, data))
        self._record_activity()
        return accommodation_id

    def add_transport(self, trip_id: str, data: Mapping[str, Any]) -> str:
        transport_id = self.stores.transports.add(self._child_payload(trip_id, data))
        self._record_activity()
        return transport_id

    def add_task(self, trip_id: str, data: Mapping[str, Any]) -> str:
        return self.stores.tasks.add(self._child_payload(trip_id, data))

    def toggle_task_status(self, task_id: str) -> Optional[TaskStatus]:
        status = self.stores.tasks.toggle_task_status(task_id)
        if status == TaskStatus.COMPLETED:
            self._record_activity()
        return status

    def add_document(self, trip_id: str, data: Mapping[str, Any]) -> str:
        return self.stores.documents.add(self._child_payload(trip_id, data))

    def add_packing_list(self, trip_id: str, data: Mapping[str, Any]) -> str:
        return self.stores.packing.add(self._child_payload(trip_id, data))

    def toggle_item_packed(self, list_id: str, category_id: str, item_id: str) -> Optional[bool]:
        """Flip an item; ``items_packed`` counts each item once, the first time it is packed"""
        item = self.stores.packing.get_item(list_id, category_id, item_id)
        packed = self.stores.packing.toggle_item_packed(list_id, category_id, item_id)
        if packed and item.first_packed_at is None:
            self.gamification.increment_stat("items_packed")
            self.check_achievements()
        return packed

    def apply_packing_template(self, list_id: str, template_id: str) -> Optional[List[str]]:
        """
        Fill a packing list from a predefined template

        Raises:
            RecordNotFoundError: unknown template id
        """
        template = get_template(template_id)
        if template is None:
            raise RecordNotFoundError("Packing template", template_id)
        return self.stores.packing.apply_template(list_id, template)

    def add_day_plan(self, trip_id: str, data: Mapping[str, Any]) -> str:
        return self.stores.itinerary.add(self._child_payload(trip_id, data))

    def add_activity(self, day_id: str, data: Mapping[str, Any]) -> Optional[str]:
        activity_id = self.stores.itinerary.add_activity(day_id, data)
        if activity_id is not None:
            self._record_activity("itinerary_items")
        return activity_id

    # ------------------------------------------------------------------ #
    # read side
    # ------------------------------------------------------------------ #

    def pop_notifications(self) -> Tuple[List[Toast], List[Achievement]]:
        """Hand out queued toasts and unseen achievements; both queues are emptied"""
        achievements = []
        while self.gamification.stats.pending_achievements:
            achievement = self.gamification.pop_pending_achievement()
            if achievement is not None:
                achievements.append(achievement)
        return self.ui.pop_toasts(), achievements

    def snapshot(self) -> PlannerSnapshot:
        return self.stores.snapshot()

    def statistics(self, trip_id: Optional[str] = None) -> StatisticsReport:
        return compute_statistics(self.snapshot(), trip_id)

