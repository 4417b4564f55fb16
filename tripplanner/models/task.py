import enum
from datetime import datetime
from typing import Optional

from pydantic import Field

from tripplanner.models.base import PlannerModel


class TaskStatus(str, enum.Enum):
    OPEN = "open"
    COMPLETED = "completed"


class TaskPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskCategory(str, enum.Enum):
    BOOKING = "booking"
    DOCUMENTS = "documents"
    PACKING = "packing"
    FINANCE = "finance"
    HEALTH = "health"
    OTHER = "other"


class Task(PlannerModel):
    id: str
    trip_id: str
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    status: TaskStatus = TaskStatus.OPEN
    priority: TaskPriority = TaskPriority.MEDIUM
    category: TaskCategory = TaskCategory.OTHER
    created_at: datetime
    completed_at: Optional[datetime] = None
