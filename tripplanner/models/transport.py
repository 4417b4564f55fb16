import enum
from datetime import date, datetime, time
from typing import Optional

from pydantic import Field

from tripplanner.models.base import PlannerModel


class TransportMode(str, enum.Enum):
    CAR = "car"
    TRAIN = "train"
    FLIGHT = "flight"
    BUS = "bus"
    FERRY = "ferry"
    TAXI = "taxi"
    WALKING = "walking"
    BICYCLE = "bicycle"
    OTHER = "other"


class TransportLocation(PlannerModel):
    destination_id: Optional[str] = None
    name: str
    address: Optional[str] = None


class TransportDetails(PlannerModel):
    # flight
    flight_number: Optional[str] = None
    airline: Optional[str] = None
    terminal: Optional[str] = None
    gate: Optional[str] = None
    # train
    train_number: Optional[str] = None
    carrier: Optional[str] = None
    wagon: Optional[str] = None
    seat: Optional[str] = None
    platform: Optional[str] = None
    # car
    vehicle_info: Optional[str] = None
    license_plate: Optional[str] = None


class Transport(PlannerModel):
    id: str
    trip_id: str
    mode: TransportMode
    origin: TransportLocation
    destination: TransportLocation
    departure_date: Optional[date] = None
    departure_time: Optional[time] = None
    arrival_date: Optional[date] = None
    arrival_time: Optional[time] = None
    booking_reference: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    currency: str = "EUR"
    is_paid: bool = False
    details: Optional[TransportDetails] = None
    notes: Optional[str] = None

    @property
    def departs_at(self) -> Optional[datetime]:
        """Departure as a datetime; a missing time counts as midnight"""
        if self.departure_date is None:
            return None
        return datetime.combine(self.departure_date, self.departure_time or time(0, 0))
