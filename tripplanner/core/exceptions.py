"""
Custom exceptions for the trip planner.

Not-found lookups inside the entity stores are not exceptions: they return
``None`` or are silent no-ops. The classes below cover the failures that do
travel up to the caller.
"""

from typing import Optional, Dict, Any, List
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"
    IMPORT_VALIDATION_FAILED = "IMPORT_VALIDATION_FAILED"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class TripPlannerException(Exception):
    """Base exception for the trip planner."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class TripNotFoundError(TripPlannerException):
    """Raised when an operation needs a trip that does not exist."""

    def __init__(self, trip_id: str):
        super().__init__(
            message=f"Trip '{trip_id}' not found",
            error_code=ErrorCode.TRIP_NOT_FOUND,
            details={"trip_id": trip_id},
            status_code=404
        )
        self.trip_id = trip_id


class RecordNotFoundError(TripPlannerException):
    """Raised by the API layer when a store lookup comes back empty."""

    def __init__(self, kind: str, record_id: str):
        super().__init__(
            message=f"{kind} '{record_id}' not found",
            error_code=ErrorCode.RECORD_NOT_FOUND,
            details={"kind": kind, "id": record_id},
            status_code=404
        )


class ImportValidationError(TripPlannerException):
    """Raised when an import payload fails schema validation. Nothing is committed."""

    def __init__(self, violations: List[str]):
        super().__init__(
            message="Import data failed validation",
            error_code=ErrorCode.IMPORT_VALIDATION_FAILED,
            details={"violations": violations},
            status_code=422
        )
        self.violations = violations


class PersistenceError(TripPlannerException):
    """
    Raised when a snapshot write or read fails.

    In-memory state already reflects the attempted change; the next
    successful write of the same store persists it.
    """

    def __init__(self, key: str, reason: str):
        super().__init__(
            message=f"Failed to persist '{key}': {reason}",
            error_code=ErrorCode.PERSISTENCE_FAILED,
            details={"key": key, "reason": reason},
            status_code=503
        )
        self.key = key
