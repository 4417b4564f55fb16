"""
Trip aggregate: the root record every other entity points at
"""
import enum
from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from tripplanner.models.base import PlannerModel


class TripStatus(str, enum.Enum):
    """Trip lifecycle status"""
    PLANNING = "planning"
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"


class Destination(PlannerModel):
    """A stop on the trip. ``order`` is 0-based and contiguous within its trip."""
    id: str
    trip_id: str
    name: str = Field(..., min_length=1)
    country: str
    arrival_date: date
    departure_date: date
    order: int = Field(0, ge=0)
    notes: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Trip(PlannerModel):
    id: str
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: date
    end_date: date
    cover_image: Optional[str] = None
    destinations: List[Destination] = Field(default_factory=list)
    status: TripStatus = TripStatus.PLANNING
    currency: str = "EUR"
    total_budget: float = Field(0, ge=0)
    created_at: datetime
    updated_at: datetime

    @property
    def duration_days(self) -> int:
        """Number of calendar days, both ends inclusive"""
        return abs((self.end_date - self.start_date).days) + 1
