# API endpoints and routers

from .trips_endpoints import router as trips_router
from .budget_endpoints import router as budget_router
from .tasks_endpoints import router as tasks_router
from .statistics_endpoints import router as statistics_router
from .gamification_endpoints import router as gamification_router
from .backup_endpoints import router as backup_router
from .health_endpoints import router as health_router

__all__ = [
    "trips_router",
    "budget_router",
    "tasks_router",
    "statistics_router",
    "gamification_router",
    "backup_router",
    "health_router",
]
