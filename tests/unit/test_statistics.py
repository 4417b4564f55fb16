"""
Unit tests for the statistics projection
"""
from datetime import date
import dataclasses

import pytest

from tripplanner.services.statistics import compute_statistics


@pytest.fixture
def populated(stores, trip_id, trip_data):
    stores.trips.add_destination(trip_id, {
        "name": "Tokyo", "country": "Japan",
        "arrival_date": date(2025, 4, 1), "departure_date": date(2025, 4, 5),
    })
    stores.trips.add_destination(trip_id, {
        "name": "Kyoto", "country": "Japan",
        "arrival_date": date(2025, 4, 5), "departure_date": date(2025, 4, 10),
    })
    stores.expenses.add({"trip_id": trip_id, "title": "Hotel", "amount": 500, "category": "accommodation"})
    stores.expenses.add({"trip_id": trip_id, "title": "Sushi", "amount": 100, "category": "food"})
    stores.expenses.add({"trip_id": trip_id, "title": "Ramen", "amount": 200, "category": "food"})
    stores.accommodations.add({
        "trip_id": trip_id, "name": "Hotel", "type": "hotel",
        "check_in": date(2025, 4, 1), "check_out": date(2025, 4, 4), "price": 300,
    })
    day = stores.itinerary.add({"trip_id": trip_id, "date": date(2025, 4, 1)})
    stores.itinerary.add_activity(day, {"title": "Temple", "category": "sightseeing"})
    done = stores.itinerary.add_activity(day, {"title": "Ramen", "category": "food"})
    stores.itinerary.toggle_activity_completed(day, done)
    stores.transports.add({
        "trip_id": trip_id, "mode": "train", "price": 120,
        "origin": {"name": "Tokyo"}, "destination": {"name": "Kyoto"},
    })

    other = stores.trips.add({**trip_data, "name": "Lisbon", "start_date": date(2025, 6, 1), "end_date": date(2025, 6, 5)})
    stores.trips.add_destination(other, {
        "name": "Lisbon", "country": "Portugal",
        "arrival_date": date(2025, 6, 1), "departure_date": date(2025, 6, 5),
    })
    stores.expenses.add({"trip_id": other, "title": "Tram", "amount": 100, "category": "transport"})
    return stores


def test_single_trip_report(populated, trip_id):
    """Test every section for one trip"""
    report = compute_statistics(populated.snapshot(), trip_id)

    assert report.trip_id == trip_id
    assert report.trips.total_trips == 1
    assert report.trips.total_days == 10
    assert report.trips.unique_countries == ["Japan"]
    assert report.trips.unique_destinations == ["Kyoto", "Tokyo"]
    assert report.budget.total_spent == 800
    assert report.budget.budget_utilization == 40
    assert report.budget.average_per_day == 80
    assert report.budget.by_category == {"accommodation": 500, "food": 300}
    assert report.budget.average_by_category == {"accommodation": 500, "food": 150}
    assert report.activities.total_activities == 2
    assert report.activities.completed_activities == 1
    assert report.activities.by_category == {"food": 1, "sightseeing": 1}
    assert report.accommodations.total_nights == 3
    assert report.accommodations.average_per_night == 100
    assert report.accommodations.by_type == {"hotel": 1}
    assert report.transports.by_mode == {"train": 1}
    assert report.transports.total_spent == 120


def test_all_trips_report(populated):
    report = compute_statistics(populated.snapshot())

    assert report.trip_id is None
    assert report.trips.total_trips == 2
    assert report.trips.unique_countries == ["Japan", "Portugal"]
    assert report.budget.total_spent == 900
    assert report.budget.average_per_trip == 450


def test_order_independent(populated):
    """Test reversing every collection yields the same report"""
    snapshot = populated.snapshot()
    reversed_snapshot = dataclasses.replace(
        snapshot,
        **{f.name: tuple(reversed(getattr(snapshot, f.name))) for f in dataclasses.fields(snapshot)}
    )

    assert compute_statistics(reversed_snapshot) == compute_statistics(snapshot)


def test_unknown_trip_yields_empty_report(populated):
    report = compute_statistics(populated.snapshot(), "missing")

    assert report.trips.total_trips == 0
    assert report.budget.total_spent == 0
    assert report.budget.budget_utilization == 0
    assert report.accommodations.average_per_night == 0


def test_statistics_do_not_mutate(populated, trip_id):
    snapshot = populated.snapshot()
    before = populated.expenses.count()

    compute_statistics(snapshot, trip_id)

    assert populated.expenses.count() == before
    assert populated.snapshot() == snapshot
