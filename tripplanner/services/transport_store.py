"""
Transport Store - legs between locations, ordered by departure
"""
import math
from datetime import date
from typing import List, Optional

from tripplanner.models.transport import Transport
from tripplanner.services.base_store import EntityStore


class TransportStore(EntityStore[Transport]):
    model = Transport
    storage_key = "transports"
    sort_field = "departure_date"

    def _sort_value(self, record: Transport):
        return record.departs_at

    def query_by_date(self, trip_id: str, day: date) -> List[Transport]:
        return self.query(lambda t: t.trip_id == trip_id and t.departure_date == day)

    def total_cost(self, trip_id: str) -> float:
        return math.fsum(t.price or 0 for t in self.query_by_trip(trip_id))

    def toggle_paid(self, transport_id: str) -> Optional[bool]:
        def change(transport: Transport) -> bool:
            transport.is_paid = not transport.is_paid
            return transport.is_paid

        return self._modify(transport_id, change)
