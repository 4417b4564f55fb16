import enum
from datetime import date
from typing import List, Optional

from pydantic import Field

from tripplanner.models.base import PlannerModel


class AccommodationType(str, enum.Enum):
    HOTEL = "hotel"
    AIRBNB = "airbnb"
    HOSTEL = "hostel"
    APARTMENT = "apartment"
    CAMPING = "camping"
    OTHER = "other"


class ContactInfo(PlannerModel):
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None


class Accommodation(PlannerModel):
    id: str
    trip_id: str
    destination_id: Optional[str] = None
    name: str = Field(..., min_length=1)
    type: AccommodationType = AccommodationType.HOTEL
    address: str = ""
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    confirmation_number: Optional[str] = None
    price: float = Field(0, ge=0)
    currency: str = "EUR"
    is_paid: bool = False
    contact_info: Optional[ContactInfo] = None
    notes: Optional[str] = None
    amenities: List[str] = Field(default_factory=list)

    @property
    def nights(self) -> int:
        """Nights between check-in and check-out, 0 when either is missing"""
        if not self.check_in or not self.check_out:
            return 0
        return max(0, (self.check_out - self.check_in).days)
