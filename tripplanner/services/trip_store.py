"""
Trip Store - trips and their embedded, ordered destinations
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from tripplanner.models.trip import Destination, Trip, TripStatus
from tripplanner.services import ordering
from tripplanner.services.base_store import EntityStore

logger = logging.getLogger(__name__)


class TripStore(EntityStore[Trip]):
    """Manages trip CRUD and the destination list owned by each trip"""

    model = Trip
    storage_key = "trips"
    timestamp_fields = ("created_at", "updated_at")
    touch_field = "updated_at"
    sort_field = "start_date"
    protected_fields = ("id", "destinations")

    def _prepare(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        payload["destinations"] = []
        return payload

    def query_by_trip(self, trip_id: str) -> List[Trip]:
        trip = self.get(trip_id)
        return [trip] if trip else []

    def delete_by_trip(self, trip_id: str) -> int:
        return 1 if self.delete(trip_id) else 0

    def list_by_status(self, status: TripStatus) -> List[Trip]:
        return self.query(lambda t: t.status == status)

    # ------------------------------------------------------------------ #
    # destinations
    # ------------------------------------------------------------------ #

    def add_destination(self, trip_id: str, data: Mapping[str, Any]) -> Optional[str]:
        """
        Append a destination to a trip

        Returns:
            The destination id, or None when the trip does not exist
        """
        destination_id = self._new_id()

        def change(trip: Trip) -> str:
            payload = Destination.field_values(data)
            payload.update(id=destination_id, trip_id=trip_id, order=len(trip.destinations))
            trip.destinations = ordering.append(
                trip.destinations, Destination.model_validate(payload)
            )
            return destination_id

        return self._modify(trip_id, change)

    def update_destination(self, trip_id: str, destination_id: str, **fields: Any) -> Optional[Destination]:
        fields = Destination.field_values(fields, exclude=("id", "trip_id", "order"))

        def change(trip: Trip) -> Optional[Destination]:
            for index, dest in enumerate(trip.destinations):
                if dest.id == destination_id:
                    updated = Destination.model_validate({**dest.model_dump(), **fields})
                    trip.destinations[index] = updated
                    return updated
            return None

        return self._modify(trip_id, change)

    def delete_destination(self, trip_id: str, destination_id: str) -> bool:
        def change(trip: Trip) -> Optional[bool]:
            trip.destinations, removed = ordering.remove(trip.destinations, destination_id)
            return True if removed is not None else None

        return bool(self._modify(trip_id, change))

    def reorder_destinations(self, trip_id: str, destination_ids: Sequence[str]) -> bool:
        def change(trip: Trip) -> bool:
            trip.destinations = ordering.reorder(trip.destinations, destination_ids)
            return True

        return bool(self._modify(trip_id, change))

    def get_destinations(self, trip_id: str) -> List[Destination]:
        trip = self.get(trip_id)
        if not trip:
            return []
        return ordering.by_position(trip.destinations)
