"""
FastAPI application setup with dependency injection.
"""

import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from tripplanner.api import (
    backup_router,
    budget_router,
    gamification_router,
    health_router,
    statistics_router,
    tasks_router,
    trips_router,
)
from tripplanner.config.settings import Settings, get_settings
from tripplanner.core.dependencies import get_planner
from tripplanner.core.error_handlers import setup_error_handlers
from tripplanner.core.logging import configure_logging

API_PREFIX = "/api/v1"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Build the planner on startup so storage errors surface before the first request
    """
    settings = app.state.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    try:
        planner = app.dependency_overrides.get(get_planner, get_planner)()
        logger.info("Application startup complete", extra={"trips": planner.stores.trips.count()})
        yield
    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise
    finally:
        logger.info("Application shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level.value, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(CORSMiddleware, **settings.get_cors_config())
    setup_error_handlers(app)

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log requests and responses with timing information."""
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.time()

        response = await call_next(request)

        processing_time = (time.time() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "request_id": request_id,
                "status_code": response.status_code,
                "processing_time_ms": round(processing_time, 2),
            },
        )
        return response

    for router in (
        health_router,
        trips_router,
        budget_router,
        tasks_router,
        statistics_router,
        gamification_router,
        backup_router,
    ):
        app.include_router(router, prefix=API_PREFIX)

    return app


def run() -> None:
    """Run the API with uvicorn using host/port from settings"""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "tripplanner.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
