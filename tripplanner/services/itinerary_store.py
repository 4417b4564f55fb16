"""
Itinerary Store - day plans and their ordered activities
"""
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence

from tripplanner.models.itinerary import Activity, DayPlan
from tripplanner.services import ordering
from tripplanner.services.base_store import EntityStore


class ItineraryStore(EntityStore[DayPlan]):
    model = DayPlan
    storage_key = "itinerary"
    sort_field = "date"
    protected_fields = ("id", "activities")

    def _prepare(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        payload["activities"] = []
        return payload

    def get_day_plan_by_date(self, trip_id: str, day: date) -> Optional[DayPlan]:
        matches = self.query(lambda d: d.trip_id == trip_id and d.date == day)
        return matches[0] if matches else None

    def add_activity(self, day_id: str, data: Mapping[str, Any]) -> Optional[str]:
        activity_id = self._new_id()

        def change(day_plan: DayPlan) -> str:
            payload = Activity.field_values(data)
            payload.update(id=activity_id, day_id=day_id, order=len(day_plan.activities))
            day_plan.activities = ordering.append(
                day_plan.activities, Activity.model_validate(payload)
            )
            return activity_id

        return self._modify(day_id, change)

    def update_activity(self, day_id: str, activity_id: str, **fields: Any) -> Optional[Activity]:
        fields = Activity.field_values(fields, exclude=("id", "day_id", "order"))

        def change(day_plan: DayPlan) -> Optional[Activity]:
            for index, activity in enumerate(day_plan.activities):
                if activity.id == activity_id:
                    updated = Activity.model_validate({**activity.model_dump(), **fields})
                    day_plan.activities[index] = updated
                    return updated
            return None

        return self._modify(day_id, change)

    def delete_activity(self, day_id: str, activity_id: str) -> bool:
        def change(day_plan: DayPlan) -> Optional[bool]:
            day_plan.activities, removed = ordering.remove(day_plan.activities, activity_id)
            return True if removed is not None else None

        return bool(self._modify(day_id, change))

    def toggle_activity_completed(self, day_id: str, activity_id: str) -> Optional[bool]:
        def change(day_plan: DayPlan) -> Optional[bool]:
            for activity in day_plan.activities:
                if activity.id == activity_id:
                    activity.is_completed = not activity.is_completed
                    return activity.is_completed
            return None

        return self._modify(day_id, change)

    def reorder_activities(self, day_id: str, activity_ids: Sequence[str]) -> bool:
        def change(day_plan: DayPlan) -> bool:
            day_plan.activities = ordering.reorder(day_plan.activities, activity_ids)
            return True

        return bool(self._modify(day_id, change))

    def move_activity_to_day(self, from_day_id: str, to_day_id: str, activity_id: str, position: int) -> bool:
        """
        Move an activity into another day at ``position``. Both days are
        renumbered; the store is written once.
        """
        with self._lock:
            source_index = self._find_index(from_day_id)
            target_index = self._find_index(to_day_id)
            if source_index is None or target_index is None or from_day_id == to_day_id:
                return False
            source = self._records[source_index].model_copy(deep=True)
            target = self._records[target_index].model_copy(deep=True)
            source.activities, moved = ordering.remove(source.activities, activity_id)
            if moved is None:
                return False
            moved.day_id = to_day_id
            target.activities = ordering.insert_at(target.activities, moved, position)
            self._records[source_index] = source
            self._records[target_index] = target
            self._persist()
            return True

    def count_activities(self, trip_id: Optional[str] = None) -> int:
        plans = self.list_all() if trip_id is None else self.query_by_trip(trip_id)
        return sum(len(plan.activities) for plan in plans)

    def all_activities(self, trip_id: str) -> List[Activity]:
        return [a for plan in self.query_by_trip(trip_id) for a in ordering.by_position(plan.activities)]
