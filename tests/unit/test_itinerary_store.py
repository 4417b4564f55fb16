"""
Unit tests for day plans and activities
"""
from datetime import date

import pytest


@pytest.fixture
def days(stores, trip_id):
    first = stores.itinerary.add({"trip_id": trip_id, "date": date(2025, 4, 1)})
    second = stores.itinerary.add({"trip_id": trip_id, "date": date(2025, 4, 2)})
    return first, second


def test_day_plans_sorted_by_date(stores, trip_id):
    later = stores.itinerary.add({"trip_id": trip_id, "date": date(2025, 4, 3)})
    earlier = stores.itinerary.add({"trip_id": trip_id, "date": date(2025, 4, 1)})

    assert [d.id for d in stores.itinerary.query_by_trip(trip_id)] == [earlier, later]
    assert stores.itinerary.get_day_plan_by_date(trip_id, date(2025, 4, 3)).id == later
    assert stores.itinerary.get_day_plan_by_date(trip_id, date(2025, 5, 1)) is None


def test_activities_appended_in_order(stores, days):
    first, _ = days
    temple = stores.itinerary.add_activity(first, {"title": "Temple", "category": "sightseeing"})
    ramen = stores.itinerary.add_activity(first, {"title": "Ramen", "category": "food"})

    activities = stores.itinerary.get(first).activities

    assert [(a.id, a.order, a.day_id) for a in activities] == [(temple, 0, first), (ramen, 1, first)]
    assert stores.itinerary.add_activity("missing", {"title": "x"}) is None


def test_move_activity_between_days(stores, days):
    """Test moving an activity renumbers both days"""
    first, second = days
    temple = stores.itinerary.add_activity(first, {"title": "Temple"})
    ramen = stores.itinerary.add_activity(first, {"title": "Ramen"})
    museum = stores.itinerary.add_activity(second, {"title": "Museum"})

    assert stores.itinerary.move_activity_to_day(first, second, temple, 0) is True

    source = stores.itinerary.get(first).activities
    target = stores.itinerary.get(second).activities
    assert [(a.id, a.order) for a in source] == [(ramen, 0)]
    assert [(a.id, a.order, a.day_id) for a in target] == [(temple, 0, second), (museum, 1, second)]


def test_move_unknown_activity(stores, days):
    first, second = days

    assert stores.itinerary.move_activity_to_day(first, second, "missing", 0) is False
    assert stores.itinerary.move_activity_to_day(first, first, "missing", 0) is False


def test_toggle_reorder_and_delete_activity(stores, days):
    first, _ = days
    temple = stores.itinerary.add_activity(first, {"title": "Temple"})
    ramen = stores.itinerary.add_activity(first, {"title": "Ramen"})

    assert stores.itinerary.toggle_activity_completed(first, ramen) is True
    assert stores.itinerary.reorder_activities(first, [ramen, temple]) is True
    assert [a.id for a in stores.itinerary.get(first).activities] == [ramen, temple]

    assert stores.itinerary.delete_activity(first, ramen) is True
    assert [(a.id, a.order) for a in stores.itinerary.get(first).activities] == [(temple, 0)]


def test_count_activities(stores, days, trip_id):
    first, second = days
    stores.itinerary.add_activity(first, {"title": "Temple"})
    stores.itinerary.add_activity(second, {"title": "Museum"})
    other_day = stores.itinerary.add({"trip_id": "other", "date": date(2025, 4, 1)})
    stores.itinerary.add_activity(other_day, {"title": "Beach"})

    assert stores.itinerary.count_activities() == 3
    assert stores.itinerary.count_activities(trip_id) == 2
    assert [a.title for a in stores.itinerary.all_activities(trip_id)] == ["Temple", "Museum"]
