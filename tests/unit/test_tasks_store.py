"""
Unit tests for trip tasks and deadlines
"""
from datetime import datetime, timezone

from tripplanner.models.task import TaskStatus


def test_overdue_task_toggled_to_completed(stores, trip_id, clock):
    """Test an overdue open task leaves the overdue list once completed"""
    task_id = stores.tasks.add({
        "trip_id": trip_id,
        "title": "Renew passport",
        "deadline": datetime(2025, 2, 20, tzinfo=timezone.utc),
    })

    assert [t.id for t in stores.tasks.get_overdue_tasks(trip_id)] == [task_id]

    assert stores.tasks.toggle_task_status(task_id) == TaskStatus.COMPLETED

    task = stores.tasks.get(task_id)
    assert stores.tasks.get_overdue_tasks(trip_id) == []
    assert task.completed_at == clock.now


def test_reopening_clears_completed_at(stores, trip_id):
    task_id = stores.tasks.add({"trip_id": trip_id, "title": "Book hotel"})
    stores.tasks.toggle_task_status(task_id)

    assert stores.tasks.toggle_task_status(task_id) == TaskStatus.OPEN
    assert stores.tasks.get(task_id).completed_at is None


def test_future_and_undated_tasks_are_not_overdue(stores, trip_id):
    stores.tasks.add({"trip_id": trip_id, "title": "Later", "deadline": datetime(2025, 3, 20, tzinfo=timezone.utc)})
    stores.tasks.add({"trip_id": trip_id, "title": "Someday"})

    assert stores.tasks.get_overdue_tasks(trip_id) == []


def test_naive_deadline_treated_as_utc(stores, trip_id):
    """Test naive deadlines are compared as UTC"""
    stores.tasks.add({"trip_id": trip_id, "title": "Visa", "deadline": datetime(2025, 3, 1, 8, 0)})

    assert len(stores.tasks.get_overdue_tasks(trip_id)) == 1


def test_tasks_sorted_by_deadline(stores, trip_id):
    """Test tasks come back by deadline with undated tasks last"""
    undated = stores.tasks.add({"trip_id": trip_id, "title": "Someday"})
    late = stores.tasks.add({"trip_id": trip_id, "title": "Late", "deadline": datetime(2025, 3, 30, tzinfo=timezone.utc)})
    soon = stores.tasks.add({"trip_id": trip_id, "title": "Soon", "deadline": datetime(2025, 3, 5)})

    assert [t.id for t in stores.tasks.query_by_trip(trip_id)] == [soon, late, undated]


def test_update_cannot_set_completed_at(stores, trip_id):
    task_id = stores.tasks.add({"trip_id": trip_id, "title": "Book hotel"})

    stores.tasks.update(task_id, completed_at=datetime(2025, 1, 1, tzinfo=timezone.utc))

    assert stores.tasks.get(task_id).completed_at is None


def test_open_and_completed_queries(stores, trip_id):
    done = stores.tasks.add({"trip_id": trip_id, "title": "Done"})
    todo = stores.tasks.add({"trip_id": trip_id, "title": "Todo"})
    stores.tasks.toggle_task_status(done)

    assert [t.id for t in stores.tasks.get_open_tasks(trip_id)] == [todo]
    assert [t.id for t in stores.tasks.get_completed_tasks(trip_id)] == [done]


def test_update_cannot_set_completed_at_by_alias(stores, trip_id):
    task_id = stores.tasks.add({"trip_id": trip_id, "title": "Book hotel"})

    stores.tasks.update(task_id, completedAt="2020-01-01T00:00:00Z")

    task = stores.tasks.get(task_id)
    assert task.status == TaskStatus.OPEN
    assert task.completed_at is None


def test_status_change_through_update_keeps_completed_at_in_step(stores, trip_id, clock):
    """Test completed_at follows status when status is set directly"""
    task_id = stores.tasks.add({"trip_id": trip_id, "title": "Book hotel", "status": "completed"})
    assert stores.tasks.get(task_id).completed_at == clock.now

    reopened = stores.tasks.update(task_id, status=TaskStatus.OPEN)
    assert reopened.completed_at is None

    clock.advance(days=1)
    completed = stores.tasks.update(task_id, status=TaskStatus.COMPLETED)
    assert completed.completed_at == clock.now
