"""
Trip schemas for API requests
"""
from datetime import date
from typing import List, Optional

from pydantic import Field

from tripplanner.models.base import PlannerModel
from tripplanner.models.trip import TripStatus


class TripCreate(PlannerModel):
    """Schema for creating a new trip"""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: date
    end_date: date
    cover_image: Optional[str] = None
    status: TripStatus = TripStatus.PLANNING
    currency: str = "EUR"
    total_budget: float = Field(0, ge=0)


class TripUpdate(PlannerModel):
    """Schema for updating a trip; only provided fields change"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    cover_image: Optional[str] = None
    status: Optional[TripStatus] = None
    currency: Optional[str] = None
    total_budget: Optional[float] = Field(None, ge=0)


class DestinationCreate(PlannerModel):
    name: str = Field(..., min_length=1)
    country: str
    arrival_date: date
    departure_date: date
    notes: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class DestinationOrder(PlannerModel):
    destination_ids: List[str]
