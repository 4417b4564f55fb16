"""
Unit tests for trips and their destination lists
"""
from datetime import date

from tripplanner.models.trip import TripStatus


def destination(name, country="Japan"):
    return {
        "name": name,
        "country": country,
        "arrival_date": date(2025, 4, 1),
        "departure_date": date(2025, 4, 3),
    }


def test_trips_sorted_by_start_date(stores, trip_data):
    """Test list_all returns trips by ascending start date"""
    later = stores.trips.add({**trip_data, "name": "Later", "start_date": date(2025, 9, 1), "end_date": date(2025, 9, 5)})
    sooner = stores.trips.add({**trip_data, "name": "Sooner", "start_date": date(2025, 1, 1), "end_date": date(2025, 1, 5)})

    assert [t.id for t in stores.trips.list_all()] == [sooner, later]


def test_duration_counts_both_ends(stores, trip_id):
    assert stores.trips.get(trip_id).duration_days == 10


def test_list_by_status(stores, trip_id, trip_data):
    """Test filtering trips by lifecycle status"""
    stores.trips.add({**trip_data, "status": TripStatus.COMPLETED})

    planning = stores.trips.list_by_status(TripStatus.PLANNING)

    assert [t.id for t in planning] == [trip_id]


def test_update_cannot_replace_destinations(stores, trip_id):
    """Test that destinations only change through the destination operations"""
    stores.trips.add_destination(trip_id, destination("Tokyo"))

    stores.trips.update(trip_id, destinations=[])

    assert len(stores.trips.get_destinations(trip_id)) == 1


def test_add_destinations_appends_in_order(stores, trip_id):
    """Test destinations receive contiguous orders in insertion order"""
    tokyo = stores.trips.add_destination(trip_id, destination("Tokyo"))
    kyoto = stores.trips.add_destination(trip_id, destination("Kyoto"))

    result = stores.trips.get_destinations(trip_id)

    assert [(d.id, d.order) for d in result] == [(tokyo, 0), (kyoto, 1)]
    assert all(d.trip_id == trip_id for d in result)


def test_add_destination_to_missing_trip(stores):
    assert stores.trips.add_destination("missing", destination("Tokyo")) is None


def test_delete_destination_renumbers(stores, trip_id):
    """Test orders stay contiguous after deleting the first destination"""
    tokyo = stores.trips.add_destination(trip_id, destination("Tokyo"))
    stores.trips.add_destination(trip_id, destination("Kyoto"))
    stores.trips.add_destination(trip_id, destination("Osaka"))

    assert stores.trips.delete_destination(trip_id, tokyo) is True
    assert [(d.name, d.order) for d in stores.trips.get_destinations(trip_id)] == [("Kyoto", 0), ("Osaka", 1)]
    assert stores.trips.delete_destination(trip_id, tokyo) is False


def test_reorder_destinations(stores, trip_id, clock):
    """Test reordering destinations and touching the trip"""
    tokyo = stores.trips.add_destination(trip_id, destination("Tokyo"))
    kyoto = stores.trips.add_destination(trip_id, destination("Kyoto"))
    osaka = stores.trips.add_destination(trip_id, destination("Osaka"))
    clock.advance(minutes=5)

    assert stores.trips.reorder_destinations(trip_id, [osaka, tokyo]) is True

    result = stores.trips.get_destinations(trip_id)
    assert [d.id for d in result] == [osaka, tokyo, kyoto]
    assert [d.order for d in result] == [0, 1, 2]
    assert stores.trips.get(trip_id).updated_at == clock.now


def test_update_destination(stores, trip_id):
    """Test updating a destination keeps its id and position"""
    tokyo = stores.trips.add_destination(trip_id, destination("Tokyo"))

    updated = stores.trips.update_destination(trip_id, tokyo, notes="Cherry blossoms", order=7)

    assert updated.notes == "Cherry blossoms"
    assert updated.order == 0
    assert stores.trips.update_destination(trip_id, "missing", notes="x") is None


def test_update_destination_ignores_camel_case_parent(stores, trip_id):
    tokyo = stores.trips.add_destination(trip_id, {**destination("Tokyo"), "tripId": "other"})

    updated = stores.trips.update_destination(trip_id, tokyo, tripId="other", arrivalDate=date(2025, 4, 2))

    assert updated.trip_id == trip_id
    assert updated.arrival_date == date(2025, 4, 2)


def test_missing_destination_leaves_trip_untouched(stores, trip_id, storage, clock):
    """Test a no-op on an unknown destination neither touches nor rewrites the trip"""
    before = storage.load("trips")
    clock.advance(hours=1)

    assert stores.trips.delete_destination(trip_id, "missing") is False
    assert stores.trips.update_destination(trip_id, "missing", notes="x") is None

    assert stores.trips.get(trip_id).updated_at < clock.now
    assert storage.load("trips") == before
