"""
Document Store - uploaded files (base64 payloads) per trip
"""
from typing import Any, Dict, List

from tripplanner.models.document import DocumentCategory, TripDocument, document_type_for
from tripplanner.services.base_store import EntityStore


class DocumentStore(EntityStore[TripDocument]):
    model = TripDocument
    storage_key = "documents"
    timestamp_fields = ("uploaded_at",)
    sort_field = "uploaded_at"

    def _prepare(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        mime_type = payload.get("mime_type")
        if "type" not in payload and mime_type:
            payload["type"] = document_type_for(mime_type)
        return payload

    def query_by_category(self, trip_id: str, category: DocumentCategory) -> List[TripDocument]:
        category = DocumentCategory(category)
        return self.query(lambda d: d.trip_id == trip_id and d.category == category)

    def total_size(self, trip_id: str) -> int:
        return sum(d.size for d in self.query_by_trip(trip_id))
