"""
Unit tests for export and import of planner data
"""
import json
from datetime import date

import pytest

from tripplanner.core.exceptions import ImportValidationError
from tripplanner.core.storage import MemoryStorage
from tripplanner.services.registry import StoreRegistry
from tripplanner.services.transfer import TransferService


@pytest.fixture
def transfer(stores, clock):
    return TransferService(stores, clock=clock)


@pytest.fixture
def filled(stores, trip_id, trip_data):
    stores.trips.add_destination(trip_id, {
        "name": "Tokyo", "country": "Japan",
        "arrival_date": date(2025, 4, 1), "departure_date": date(2025, 4, 5),
    })
    stores.expenses.add({"trip_id": trip_id, "title": "Hotel", "amount": 500, "category": "accommodation"})
    list_id = stores.packing.add({"trip_id": trip_id, "name": "Bag"})
    category = stores.packing.add_category(list_id, {"name": "Clothes"})
    stores.packing.add_item(list_id, category, {"name": "Shirt"})
    day = stores.itinerary.add({"trip_id": trip_id, "date": date(2025, 4, 1)})
    stores.itinerary.add_activity(day, {"title": "Temple"})
    stores.tasks.add({"trip_id": trip_id, "title": "Passport"})

    other = stores.trips.add({**trip_data, "name": "Lisbon"})
    stores.expenses.add({"trip_id": other, "title": "Tram", "amount": 3})
    return other


def test_export_document_shape(transfer, filled, clock):
    """Test the export uses camelCase keys and the current version"""
    document = transfer.export_all().to_json_dict()

    assert document["version"] == "1.3.0"
    assert document["exportedAt"].startswith("2025-03-01T09:00:00")
    assert set(document["data"]) >= {"trips", "dayPlans", "accommodations", "expenses", "packingLists"}
    assert document["data"]["trips"][0]["startDate"] == "2025-04-01"
    assert len(document["data"]["expenses"]) == 2


def test_round_trip_into_empty_planner(transfer, filled, clock):
    """Test replacing an empty planner with an export restores every record"""
    text = transfer.dumps(transfer.export_all())
    target = StoreRegistry.create(MemoryStorage(), clock)

    result = TransferService(target, clock=clock).validate_and_import(text)

    assert result.merged is False
    assert result.imported_counts.trips == 2
    assert result.imported_counts.destinations == 1
    assert result.imported_counts.packing_items == 1
    assert result.imported_counts.activities == 1
    assert result.imported_counts.tasks == 1
    assert target.snapshot() == transfer.stores.snapshot()


def test_export_single_trip(transfer, filled, trip_id):
    """Test a per-trip export only carries that trip's records"""
    document = transfer.export_trip(trip_id)

    assert [t.id for t in document.data.trips] == [trip_id]
    assert all(e.trip_id == trip_id for e in document.data.expenses)
    assert len(document.data.expenses) == 1
    assert transfer.export_trip("missing") is None


def test_invalid_import_commits_nothing(transfer, filled, stores):
    """Test that a rejected document lists violations and changes no store"""
    before = stores.snapshot()
    broken = {
        "version": "1.3.0",
        "exportedAt": "2025-03-01T09:00:00Z",
        "data": {
            "trips": [{"id": "t1", "name": ""}],
            "dayPlans": [],
            "accommodations": [],
            "expenses": [{"id": "e1", "tripId": "t1", "title": "x", "amount": -1, "createdAt": "2025-03-01T09:00:00Z"}],
        },
    }

    with pytest.raises(ImportValidationError) as exc_info:
        transfer.validate_and_import(broken)

    violations = exc_info.value.violations
    assert any(v.startswith("data.trips.0") for v in violations)
    assert any(v.startswith("data.expenses.0.amount") for v in violations)
    assert any(v.startswith("data.packingLists") for v in violations)
    assert stores.snapshot() == before


def test_invalid_json_text(transfer):
    with pytest.raises(ImportValidationError):
        transfer.validate_import("{not json")


def test_older_documents_without_new_collections(transfer, stores):
    """Test documents lacking transports, tasks and documents still import"""
    document = {
        "version": "1.0.0",
        "exportedAt": "2024-01-01T00:00:00Z",
        "data": {"trips": [], "dayPlans": [], "accommodations": [], "expenses": [], "packingLists": []},
    }

    result = transfer.validate_and_import(document)

    assert result.imported_counts.transports == 0
    assert stores.trips.count() == 0


def test_merge_keeps_existing_records(transfer, filled, trip_id, clock):
    """Test merge only adds ids the planner does not know yet"""
    target = StoreRegistry.create(MemoryStorage(), clock)
    target_transfer = TransferService(target, clock=clock)
    target_transfer.import_data(transfer.export_trip(trip_id))
    target.trips.update(trip_id, name="Renamed locally")

    result = target_transfer.import_data(transfer.export_all(), merge=True)

    assert result.merged is True
    assert result.imported_counts.trips == 1
    assert result.imported_counts.expenses == 1
    assert target.trips.get(trip_id).name == "Renamed locally"
    assert target.trips.count() == 2


def test_export_filenames(transfer):
    assert transfer.export_filename() == "tripplanner-backup-2025-03-01.json"
    assert transfer.export_filename("Japan 2025") == "tripplanner-japan-2025-2025-03-01.json"


def test_dumps_is_valid_json(transfer, filled):
    assert json.loads(transfer.dumps(transfer.export_all()))["version"] == "1.3.0"


def test_duplicate_ids_are_rejected(transfer, filled, trip_id, clock):
    """Test a document repeating an id commits nothing"""
    document = transfer.export_trip(trip_id).to_json_dict()
    document["data"]["trips"].append(document["data"]["trips"][0])
    target = StoreRegistry.create(MemoryStorage(), clock)

    with pytest.raises(ImportValidationError) as exc_info:
        TransferService(target, clock=clock).validate_and_import(document)

    assert exc_info.value.violations == [f"data.trips.1.id: duplicate id '{trip_id}'"]
    assert target.trips.count() == 0


def test_duplicate_nested_ids_are_rejected(transfer, filled, trip_id):
    document = transfer.export_trip(trip_id).to_json_dict()
    activities = document["data"]["dayPlans"][0]["activities"]
    activities.append(dict(activities[0]))

    with pytest.raises(ImportValidationError) as exc_info:
        transfer.validate_import(document)

    assert exc_info.value.violations[0].startswith("data.dayPlans.0.activities.1.id: duplicate id")


def test_import_renumbers_nested_order(transfer, filled, trip_id, clock):
    """Test gaps in imported child order are closed, keeping the sequence"""
    document = transfer.export_trip(trip_id).to_json_dict()
    first = dict(document["data"]["trips"][0]["destinations"][0])
    second = {**first, "id": "dest-2", "name": "Kyoto", "order": 3}
    first["order"] = 9
    document["data"]["trips"][0]["destinations"] = [first, second]
    target = StoreRegistry.create(MemoryStorage(), clock)

    TransferService(target, clock=clock).validate_and_import(document)

    destinations = target.trips.get_destinations(trip_id)
    assert [(d.name, d.order) for d in destinations] == [("Kyoto", 0), ("Tokyo", 1)]
