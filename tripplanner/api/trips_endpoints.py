"""
Trip API endpoints - trip lifecycle and destinations
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from tripplanner.core.dependencies import get_planner
from tripplanner.core.exceptions import RecordNotFoundError, TripNotFoundError
from tripplanner.models.trip import Destination, Trip, TripStatus
from tripplanner.schemas.base import Envelope
from tripplanner.schemas.trip import DestinationCreate, DestinationOrder, TripCreate, TripUpdate
from tripplanner.services.planner import Planner

router = APIRouter(prefix="/trips", tags=["trips"])


@router.post("", response_model=Envelope[Trip], status_code=status.HTTP_201_CREATED)
def create_trip(trip_data: TripCreate, planner: Planner = Depends(get_planner)):
    """
    Create a new trip

    - **name**: Trip name (e.g., "Japan 2025")
    - **startDate** / **endDate**: Trip date range
    - **currency** / **totalBudget**: Budget settings
    """
    trip_id = planner.create_trip(trip_data.model_dump())
    return Envelope.ok(planner.stores.trips.get(trip_id))


@router.get("", response_model=Envelope[List[Trip]])
def list_trips(
    status_filter: Optional[TripStatus] = Query(None, alias="status"),
    planner: Planner = Depends(get_planner),
):
    """
    List trips ordered by start date, optionally filtered by status
    """
    trips = planner.stores.trips
    data = trips.list_by_status(status_filter) if status_filter else trips.list_all()
    return Envelope.ok(data)


@router.get("/{trip_id}", response_model=Envelope[Trip])
def get_trip(trip_id: str, planner: Planner = Depends(get_planner)):
    trip = planner.stores.trips.get(trip_id)
    if not trip:
        raise TripNotFoundError(trip_id)
    return Envelope.ok(trip)


@router.put("/{trip_id}", response_model=Envelope[Trip])
def update_trip(trip_id: str, trip_data: TripUpdate, planner: Planner = Depends(get_planner)):
    """
    Update a trip

    All fields optional - only provided fields will be updated
    """
    trip = planner.update_trip(trip_id, **trip_data.model_dump(exclude_unset=True))
    if not trip:
        raise TripNotFoundError(trip_id)
    return Envelope.ok(trip)


@router.post("/{trip_id}/complete", response_model=Envelope[Trip])
def complete_trip(trip_id: str, planner: Planner = Depends(get_planner)):
    """
    Mark a trip as completed
    """
    trip = planner.complete_trip(trip_id)
    if not trip:
        raise TripNotFoundError(trip_id)
    return Envelope.ok(trip)


@router.delete("/{trip_id}", response_model=Envelope[Dict[str, int]])
def delete_trip(
    trip_id: str,
    cascade: Optional[bool] = Query(None),
    planner: Planner = Depends(get_planner),
):
    """
    Delete a trip; ``cascade`` overrides the configured default for dependents
    """
    removed = planner.delete_trip(trip_id, cascade=cascade)
    return Envelope.ok(removed)


@router.post(
    "/{trip_id}/destinations",
    response_model=Envelope[List[Destination]],
    status_code=status.HTTP_201_CREATED,
)
def add_destination(trip_id: str, data: DestinationCreate, planner: Planner = Depends(get_planner)):
    planner.add_destination(trip_id, data.model_dump())
    return Envelope.ok(planner.stores.trips.get_destinations(trip_id))


@router.delete("/{trip_id}/destinations/{destination_id}", response_model=Envelope[List[Destination]])
def delete_destination(trip_id: str, destination_id: str, planner: Planner = Depends(get_planner)):
    if not planner.stores.trips.delete_destination(trip_id, destination_id):
        raise RecordNotFoundError("Destination", destination_id)
    return Envelope.ok(planner.stores.trips.get_destinations(trip_id))


@router.put("/{trip_id}/destinations/order", response_model=Envelope[List[Destination]])
def reorder_destinations(trip_id: str, data: DestinationOrder, planner: Planner = Depends(get_planner)):
    if not planner.stores.trips.reorder_destinations(trip_id, data.destination_ids):
        raise TripNotFoundError(trip_id)
    return Envelope.ok(planner.stores.trips.get_destinations(trip_id))
