"""
Task Store - to-dos per trip with deadlines
"""
from typing import List, Optional

from tripplanner.core.clock import ensure_aware
from tripplanner.models.task import Task, TaskCategory, TaskStatus
from tripplanner.services.base_store import EntityStore


class TaskStore(EntityStore[Task]):
    model = Task
    storage_key = "tasks"
    timestamp_fields = ("created_at",)
    sort_field = "deadline"
    protected_fields = ("id", "completed_at")

    def _sort_value(self, record: Task):
        return ensure_aware(record.deadline) if record.deadline else None

    def _reconcile(self, record: Task) -> None:
        # completed_at is set exactly when the task is completed
        if record.status == TaskStatus.COMPLETED:
            if record.completed_at is None:
                record.completed_at = self._clock()
        else:
            record.completed_at = None

    def toggle_task_status(self, task_id: str) -> Optional[TaskStatus]:
        """
        Flip open/completed. ``completed_at`` is set when the task completes
        and cleared when it is reopened, in the same write.
        """
        def change(task: Task) -> TaskStatus:
            if task.status == TaskStatus.OPEN:
                task.status = TaskStatus.COMPLETED
                task.completed_at = self._clock()
            else:
                task.status = TaskStatus.OPEN
                task.completed_at = None
            return task.status

        return self._modify(task_id, change)

    def query_by_category(self, trip_id: str, category: TaskCategory) -> List[Task]:
        category = TaskCategory(category)
        return self.query(lambda t: t.trip_id == trip_id and t.category == category)

    def get_open_tasks(self, trip_id: str) -> List[Task]:
        return self.query(lambda t: t.trip_id == trip_id and t.status == TaskStatus.OPEN)

    def get_completed_tasks(self, trip_id: str) -> List[Task]:
        return self.query(lambda t: t.trip_id == trip_id and t.status == TaskStatus.COMPLETED)

    def get_overdue_tasks(self, trip_id: str) -> List[Task]:
        """Open tasks whose deadline lies before now"""
        now = ensure_aware(self._clock())
        return self.query(
            lambda t: t.trip_id == trip_id
            and t.status != TaskStatus.COMPLETED
            and t.deadline is not None
            and ensure_aware(t.deadline) < now
        )
