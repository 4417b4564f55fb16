"""
Exception handlers translating planner errors into the response envelope.
"""

import logging
from typing import Union

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from tripplanner.core.exceptions import ErrorCode, PersistenceError, TripPlannerException

logger = logging.getLogger(__name__)


def _envelope(status_code: int, error_code: str, message: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "error",
            "data": {"error_code": error_code, "details": details or {}},
            "error": message,
        },
    )


async def handle_planner_exception(request: Request, exc: TripPlannerException) -> JSONResponse:
    log = logger.error if isinstance(exc, PersistenceError) else logger.info
    log(
        exc.message,
        extra={
            "error_code": exc.error_code.value,
            "status_code": exc.status_code,
            "request_path": request.url.path,
            "request_method": request.method,
        },
    )
    return _envelope(exc.status_code, exc.error_code.value, exc.message, exc.details)


async def handle_validation_error(
    request: Request, exc: Union[RequestValidationError, ValidationError]
) -> JSONResponse:
    """Malformed request bodies and records a store refused to build"""
    violations = [
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    ]
    return _envelope(422, ErrorCode.VALIDATION_ERROR.value, "Request validation failed", {"violations": violations})


def setup_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TripPlannerException, handle_planner_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(ValidationError, handle_validation_error)
