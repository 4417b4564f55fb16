import enum
import datetime as dt
from typing import List, Optional

from pydantic import Field

from tripplanner.models.base import PlannerModel


class ActivityCategory(str, enum.Enum):
    SIGHTSEEING = "sightseeing"
    FOOD = "food"
    TRANSPORT = "transport"
    ACTIVITY = "activity"
    RELAXATION = "relaxation"
    SHOPPING = "shopping"
    OTHER = "other"


class Activity(PlannerModel):
    id: str
    day_id: str
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = None
    category: ActivityCategory = ActivityCategory.OTHER
    order: int = Field(0, ge=0)
    is_completed: bool = False
    cost: Optional[float] = Field(None, ge=0)
    booking_reference: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class DayPlan(PlannerModel):
    """One day of the itinerary with its ordered activities"""
    id: str
    trip_id: str
    date: Optional[dt.date] = None
    destination_id: Optional[str] = None
    activities: List[Activity] = Field(default_factory=list)
    notes: Optional[str] = None
