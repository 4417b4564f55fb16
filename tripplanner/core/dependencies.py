"""
Dependency injection setup for FastAPI.
Builds the planner once per process from settings.
"""

import logging
from functools import lru_cache

from tripplanner.config.settings import Settings, StorageBackendType, get_settings
from tripplanner.core.storage import MemoryStorage, SQLStorage, StorageBackend
from tripplanner.services.planner import Planner

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> StorageBackend:
    if settings.storage_backend == StorageBackendType.MEMORY:
        return MemoryStorage()
    return SQLStorage.from_url(settings.database_url)


def build_planner(settings: Settings) -> Planner:
    logger.info(
        "Building planner",
        extra={"storage_backend": settings.storage_backend.value},
    )
    return Planner.create(
        build_storage(settings),
        cascade_deletes=settings.cascade_trip_delete,
        export_version=settings.export_version,
        toast_duration_ms=settings.toast_duration_ms,
    )


@lru_cache()
def get_planner() -> Planner:
    """FastAPI dependency returning the process-wide planner"""
    return build_planner(get_settings())
