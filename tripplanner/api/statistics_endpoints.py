"""
Statistics API endpoint - read only
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from tripplanner.core.dependencies import get_planner
from tripplanner.schemas.base import Envelope
from tripplanner.services.planner import Planner
from tripplanner.services.statistics import StatisticsReport

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.get("", response_model=Envelope[StatisticsReport])
def get_statistics(
    trip_id: Optional[str] = Query(None, alias="tripId"),
    planner: Planner = Depends(get_planner),
):
    """
    Summary metrics for one trip, or for all trips when ``tripId`` is omitted
    """
    return Envelope.ok(planner.statistics(trip_id))
