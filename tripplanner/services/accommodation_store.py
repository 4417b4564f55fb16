"""
Accommodation Store - lodging bookings per trip
"""
import math
from typing import List, Optional

from tripplanner.models.accommodation import Accommodation
from tripplanner.services.base_store import EntityStore


class AccommodationStore(EntityStore[Accommodation]):
    model = Accommodation
    storage_key = "accommodations"
    sort_field = "check_in"

    def query_by_destination(self, destination_id: str) -> List[Accommodation]:
        return self.query(lambda a: a.destination_id == destination_id)

    def toggle_paid(self, accommodation_id: str) -> Optional[bool]:
        """Flip ``is_paid``; returns the new value or None when absent"""
        def change(accommodation: Accommodation) -> bool:
            accommodation.is_paid = not accommodation.is_paid
            return accommodation.is_paid

        return self._modify(accommodation_id, change)

    def total_cost(self, trip_id: str) -> float:
        return math.fsum(a.price for a in self.query_by_trip(trip_id))
