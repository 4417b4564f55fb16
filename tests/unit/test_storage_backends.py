"""
Unit tests for the snapshot storage backends
"""
from tripplanner.core.storage import MemoryStorage, SQLStorage
from tripplanner.services.trip_store import TripStore


def test_memory_storage_copies_values():
    storage = MemoryStorage()
    data = [{"id": "a"}]

    storage.save("k", data)
    data.append({"id": "b"})
    loaded = storage.load("k")
    loaded.append({"id": "c"})

    assert storage.load("k") == [{"id": "a"}]
    assert storage.keys() == ["k"]


def test_sql_storage_save_load_delete():
    """Test snapshots round trip through an in-memory sqlite database"""
    storage = SQLStorage.from_url("sqlite:///:memory:")

    assert storage.load("trips") is None
    storage.save("trips", [{"id": "a"}])
    storage.save("trips", [{"id": "a"}, {"id": "b"}])

    assert storage.load("trips") == [{"id": "a"}, {"id": "b"}]

    storage.delete("trips")
    storage.delete("trips")
    assert storage.load("trips") is None


def test_store_over_sql_storage(clock, trip_data):
    """Test a store reloads its records from the database"""
    storage = SQLStorage.from_url("sqlite:///:memory:")
    trip_id = TripStore(storage, clock).add(trip_data)

    assert TripStore(storage, clock).get(trip_id).name == "Japan 2025"
