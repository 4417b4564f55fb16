"""
Health check endpoint
"""
import time

from fastapi import APIRouter, Depends

from tripplanner.config.settings import get_settings
from tripplanner.core.dependencies import get_planner
from tripplanner.services.planner import Planner

router = APIRouter(tags=["health"])

# Application start time for uptime calculation
_app_start_time = time.time()


@router.get("/health")
def health(planner: Planner = Depends(get_planner)):
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment.value,
        "uptime_seconds": round(time.time() - _app_start_time, 1),
        "trips": planner.stores.trips.count(),
    }
