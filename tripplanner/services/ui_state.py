"""
UI preferences and notifications.

Only the preferences are persisted; toasts live for the lifetime of the
process.
"""
import enum
import threading
import uuid
from typing import List, Optional

from pydantic import Field

from tripplanner.core.storage import StorageBackend
from tripplanner.models.base import PlannerModel

DEFAULT_TOAST_DURATION_MS = 5000


class ToastType(str, enum.Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    ACHIEVEMENT = "achievement"


class Toast(PlannerModel):
    id: str
    type: ToastType
    title: str
    message: Optional[str] = None
    duration: int = Field(DEFAULT_TOAST_DURATION_MS, ge=0)


class UIPreferences(PlannerModel):
    is_first_visit: bool = True
    prefers_reduced_motion: bool = False


class UIState:
    storage_key = "ui"

    def __init__(self, storage: StorageBackend, toast_duration_ms: int = DEFAULT_TOAST_DURATION_MS):
        self._storage = storage
        self._toast_duration_ms = toast_duration_ms
        self._lock = threading.RLock()
        raw = storage.load(self.storage_key)
        self._preferences = UIPreferences.model_validate(raw) if raw else UIPreferences()
        self._toasts: List[Toast] = []

    @property
    def preferences(self) -> UIPreferences:
        return self._preferences.model_copy()

    def _persist(self) -> None:
        self._storage.save(self.storage_key, self._preferences.to_json_dict())

    def set_first_visit(self, value: bool) -> None:
        with self._lock:
            self._preferences.is_first_visit = value
            self._persist()

    def set_prefers_reduced_motion(self, value: bool) -> None:
        with self._lock:
            self._preferences.prefers_reduced_motion = value
            self._persist()

    # toasts

    @property
    def toasts(self) -> List[Toast]:
        return [t.model_copy() for t in self._toasts]

    def add_toast(
        self,
        type: ToastType,
        title: str,
        message: Optional[str] = None,
        duration: Optional[int] = None,
    ) -> str:
        toast = Toast(
            id=str(uuid.uuid4()),
            type=ToastType(type),
            title=title,
            message=message,
            duration=self._toast_duration_ms if duration is None else duration,
        )
        with self._lock:
            self._toasts.append(toast)
        return toast.id

    def remove_toast(self, toast_id: str) -> None:
        with self._lock:
            self._toasts = [t for t in self._toasts if t.id != toast_id]

    def pop_toasts(self) -> List[Toast]:
        with self._lock:
            toasts, self._toasts = self._toasts, []
        return toasts

    def clear_toasts(self) -> None:
        with self._lock:
            self._toasts = []
