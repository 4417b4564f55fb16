"""
Unit tests for the generic entity store behaviour (CRUD, ordering, persistence)
"""
from datetime import date

import pytest

from tripplanner.core.exceptions import PersistenceError
from tripplanner.core.storage import MemoryStorage
from tripplanner.services.accommodation_store import AccommodationStore
from tripplanner.services.trip_store import TripStore


def test_add_assigns_id_and_timestamps(stores, trip_data, clock):
    """Test that add returns a fresh id and stamps creation time"""
    first = stores.trips.add(trip_data)
    second = stores.trips.add(trip_data)

    assert first != second
    trip = stores.trips.get(first)
    assert trip.name == "Japan 2025"
    assert trip.created_at == clock.now
    assert trip.updated_at == clock.now
    assert trip.destinations == []


def test_get_returns_a_copy(stores, trip_id):
    """Test that mutating a returned record does not change the store"""
    trip = stores.trips.get(trip_id)
    trip.name = "Changed"

    assert stores.trips.get(trip_id).name == "Japan 2025"


def test_missing_ids_never_raise(stores):
    """Test not-found semantics: reads return None, writes are no-ops"""
    assert stores.trips.get("missing") is None
    assert stores.trips.update("missing", name="x") is None
    assert stores.trips.delete("missing") is False
    assert stores.trips.count() == 0


def test_update_merges_fields_and_touches(stores, trip_id, clock):
    """Test update keeps id and creation time, refreshes updated_at"""
    clock.advance(hours=2)

    updated = stores.trips.update(trip_id, name="Japan Spring", id="other", created_at=clock.now)

    assert updated.id == trip_id
    assert updated.name == "Japan Spring"
    assert updated.total_budget == 2000
    assert updated.updated_at == clock.now
    assert updated.created_at < clock.now


def test_update_rejects_invalid_values(stores, trip_id):
    """Test that an invalid update leaves the record untouched"""
    with pytest.raises(ValueError):
        stores.trips.update(trip_id, total_budget=-5)

    assert stores.trips.get(trip_id).total_budget == 2000


def test_delete_removes_record(stores, trip_id):
    """Test deleting a record"""
    assert stores.trips.delete(trip_id) is True
    assert stores.trips.get(trip_id) is None
    assert len(stores.trips) == 0


def test_query_orders_by_date_with_undated_last(stores, trip_id):
    """Test ascending sort on check-in, undated records after dated ones"""
    accommodations = stores.accommodations
    late = accommodations.add({"trip_id": trip_id, "name": "Ryokan", "check_in": date(2025, 4, 6)})
    undated = accommodations.add({"trip_id": trip_id, "name": "Friend's place"})
    early = accommodations.add({"trip_id": trip_id, "name": "Hotel", "check_in": date(2025, 4, 1)})

    ids = [a.id for a in accommodations.query_by_trip(trip_id)]

    assert ids == [early, late, undated]


def test_query_by_trip_filters(stores, trip_id):
    """Test that records of other trips are not returned"""
    stores.accommodations.add({"trip_id": trip_id, "name": "Hotel"})
    stores.accommodations.add({"trip_id": "other-trip", "name": "Hostel"})

    result = stores.accommodations.query_by_trip(trip_id)

    assert [a.name for a in result] == ["Hotel"]


def test_records_survive_reload(storage, clock, trip_data):
    """Test that a new store over the same storage sees persisted records"""
    trip_id = TripStore(storage, clock).add(trip_data)

    reloaded = TripStore(storage, clock)

    assert reloaded.get(trip_id).name == "Japan 2025"
    assert storage.load("trips")[0]["startDate"] == "2025-04-01"


def test_delete_by_trip(stores, trip_id):
    """Test bulk removal of one trip's records"""
    stores.accommodations.add({"trip_id": trip_id, "name": "A"})
    stores.accommodations.add({"trip_id": trip_id, "name": "B"})
    stores.accommodations.add({"trip_id": "other", "name": "C"})

    assert stores.accommodations.delete_by_trip(trip_id) == 2
    assert stores.accommodations.count() == 1


def test_merge_adds_unknown_ids_only(stores, trip_id):
    """Test merge keeps existing records and appends new ones"""
    existing_id = stores.accommodations.add({"trip_id": trip_id, "name": "Kept"})
    existing = stores.accommodations.get(existing_id)
    incoming = existing.model_copy(update={"name": "Ignored"})
    fresh = existing.model_copy(update={"id": "new-id", "name": "Fresh"})

    added = stores.accommodations.merge([incoming, fresh])

    assert [a.id for a in added] == ["new-id"]
    assert stores.accommodations.get(existing_id).name == "Kept"
    assert stores.accommodations.count() == 2


def test_toggle_paid(stores, trip_id):
    """Test flipping the paid flag of an accommodation"""
    accommodation_id = stores.accommodations.add({"trip_id": trip_id, "name": "Hotel", "price": 300})

    assert stores.accommodations.toggle_paid(accommodation_id) is True
    assert stores.accommodations.toggle_paid(accommodation_id) is False
    assert stores.accommodations.toggle_paid("missing") is None


class FailingStorage(MemoryStorage):
    def save(self, key, data):
        raise PersistenceError(key, "quota exceeded")


def test_persistence_failure_propagates_after_memory_update(clock):
    """Test that a failed write raises but the in-memory change stays"""
    store = AccommodationStore(FailingStorage(), clock)

    with pytest.raises(PersistenceError):
        store.add({"trip_id": "t1", "name": "Hotel"})

    assert store.count() == 1


def test_add_ignores_camel_case_timestamps(stores, trip_id, clock):
    """Test creation stamps win over caller-supplied createdAt"""
    expense_id = stores.expenses.add({
        "trip_id": trip_id,
        "title": "Taxi",
        "amount": 20,
        "createdAt": "1999-01-01T00:00:00Z",
        "id": "chosen",
    })

    expense = stores.expenses.get(expense_id)
    assert expense_id != "chosen"
    assert expense.created_at == clock.now


def test_update_ignores_managed_fields_in_either_spelling(stores, trip_id, clock):
    """Test camelCase keys cannot rewrite id or timestamps"""
    created_at = stores.trips.get(trip_id).created_at
    clock.advance(hours=1)

    updated = stores.trips.update(
        trip_id,
        createdAt="1999-01-01T00:00:00Z",
        updatedAt="1999-01-01T00:00:00Z",
        totalBudget=2500,
    )

    assert updated.created_at == created_at
    assert updated.updated_at == clock.now
    assert updated.total_budget == 2500
