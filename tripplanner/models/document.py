import enum
from datetime import datetime
from typing import Optional

from pydantic import Field

from tripplanner.models.base import PlannerModel


class DocumentType(str, enum.Enum):
    IMAGE = "image"
    PDF = "pdf"
    OTHER = "other"


class DocumentCategory(str, enum.Enum):
    PASSPORT = "passport"
    VISA = "visa"
    TICKET = "ticket"
    BOOKING = "booking"
    INSURANCE = "insurance"
    OTHER = "other"


def document_type_for(mime_type: str) -> DocumentType:
    if mime_type.startswith("image/"):
        return DocumentType.IMAGE
    if mime_type == "application/pdf":
        return DocumentType.PDF
    return DocumentType.OTHER


class TripDocument(PlannerModel):
    """An uploaded file. ``data`` holds the base64 payload."""
    id: str
    trip_id: str
    name: str = Field(..., min_length=1)
    type: DocumentType = DocumentType.OTHER
    mime_type: str
    size: int = Field(..., ge=0)
    data: str
    category: DocumentCategory = DocumentCategory.OTHER
    notes: Optional[str] = None
    uploaded_at: datetime
