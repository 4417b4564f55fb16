from datetime import datetime
from typing import Optional

from pydantic import Field

from tripplanner.models.base import PlannerModel
from tripplanner.models.task import TaskCategory, TaskPriority


class TaskCreate(PlannerModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    category: TaskCategory = TaskCategory.OTHER
