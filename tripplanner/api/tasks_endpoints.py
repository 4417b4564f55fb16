"""
Task API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, status

from tripplanner.core.dependencies import get_planner
from tripplanner.core.exceptions import RecordNotFoundError
from tripplanner.models.task import Task
from tripplanner.schemas.base import Envelope
from tripplanner.schemas.task import TaskCreate
from tripplanner.services.planner import Planner

router = APIRouter(tags=["tasks"])


@router.post("/trips/{trip_id}/tasks", response_model=Envelope[Task], status_code=status.HTTP_201_CREATED)
def add_task(trip_id: str, data: TaskCreate, planner: Planner = Depends(get_planner)):
    task_id = planner.add_task(trip_id, data.model_dump())
    return Envelope.ok(planner.stores.tasks.get(task_id))


@router.get("/trips/{trip_id}/tasks", response_model=Envelope[List[Task]])
def list_tasks(trip_id: str, planner: Planner = Depends(get_planner)):
    """
    Tasks ordered by deadline; tasks without a deadline come last
    """
    return Envelope.ok(planner.stores.tasks.query_by_trip(trip_id))


@router.get("/trips/{trip_id}/tasks/overdue", response_model=Envelope[List[Task]])
def overdue_tasks(trip_id: str, planner: Planner = Depends(get_planner)):
    return Envelope.ok(planner.stores.tasks.get_overdue_tasks(trip_id))


@router.post("/tasks/{task_id}/toggle", response_model=Envelope[Task])
def toggle_task(task_id: str, planner: Planner = Depends(get_planner)):
    if planner.toggle_task_status(task_id) is None:
        raise RecordNotFoundError("Task", task_id)
    return Envelope.ok(planner.stores.tasks.get(task_id))
