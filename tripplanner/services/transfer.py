"""
Export/Import gateway - cross-store snapshots as JSON documents
"""
import json
import logging
import re
from typing import Any, List, Optional, Sequence, Union

from pydantic import ValidationError

from tripplanner.core.clock import Clock, utc_now
from tripplanner.core.exceptions import ImportValidationError
from tripplanner.schemas.transfer import ExportCollections, ExportData, ImportCounts, ImportResult
from tripplanner.services import ordering
from tripplanner.services.registry import StoreRegistry

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.3.0"


def _format_violations(error: ValidationError) -> List[str]:
    violations = []
    for issue in error.errors():
        path = ".".join(str(part) for part in issue["loc"])
        violations.append(f"{path}: {issue['msg']}" if path else issue["msg"])
    return violations


def _duplicate_ids(collections: ExportCollections) -> List[str]:
    """Violations for ids repeated within one collection or one parent's children"""
    violations = []

    def check(path: str, records: Sequence) -> None:
        seen = set()
        for index, record in enumerate(records):
            if record.id in seen:
                violations.append(f"{path}.{index}.id: duplicate id '{record.id}'")
            seen.add(record.id)

    for name, info in ExportCollections.model_fields.items():
        check(f"data.{info.alias}", getattr(collections, name))
    for i, trip in enumerate(collections.trips):
        check(f"data.trips.{i}.destinations", trip.destinations)
    for i, day_plan in enumerate(collections.day_plans):
        check(f"data.dayPlans.{i}.activities", day_plan.activities)
    for i, packing_list in enumerate(collections.packing_lists):
        check(f"data.packingLists.{i}.categories", packing_list.categories)
        for j, category in enumerate(packing_list.categories):
            check(f"data.packingLists.{i}.categories.{j}.items", category.items)
    return violations


def _renumber_children(collections: ExportCollections) -> None:
    """Make every nested ``order`` contiguous from 0, keeping the document's sequence"""
    for trip in collections.trips:
        trip.destinations = ordering.renumber(ordering.by_position(trip.destinations))
    for day_plan in collections.day_plans:
        day_plan.activities = ordering.renumber(ordering.by_position(day_plan.activities))
    for packing_list in collections.packing_lists:
        packing_list.categories = ordering.renumber(ordering.by_position(packing_list.categories))
        for category in packing_list.categories:
            category.items = ordering.renumber(ordering.by_position(category.items))


def _count(collections: ExportCollections) -> ImportCounts:
    return ImportCounts(
        trips=len(collections.trips),
        destinations=sum(len(t.destinations) for t in collections.trips),
        day_plans=len(collections.day_plans),
        activities=sum(len(d.activities) for d in collections.day_plans),
        accommodations=len(collections.accommodations),
        expenses=len(collections.expenses),
        packing_lists=len(collections.packing_lists),
        packing_categories=sum(len(p.categories) for p in collections.packing_lists),
        packing_items=sum(len(p.all_items()) for p in collections.packing_lists),
        transports=len(collections.transports),
        tasks=len(collections.tasks),
        documents=len(collections.documents),
    )


class TransferService:
    """Builds export documents from the stores and applies validated imports"""

    def __init__(self, stores: StoreRegistry, version: str = EXPORT_VERSION, clock: Clock = utc_now):
        self.stores = stores
        self.version = version
        self._clock = clock

    def _document(self, collections: ExportCollections) -> ExportData:
        return ExportData(version=self.version, exported_at=self._clock(), data=collections)

    def export_all(self) -> ExportData:
        s = self.stores
        return self._document(ExportCollections(
            trips=s.trips.list_all(),
            day_plans=s.itinerary.list_all(),
            accommodations=s.accommodations.list_all(),
            expenses=s.expenses.list_all(),
            packing_lists=s.packing.list_all(),
            transports=s.transports.list_all(),
            tasks=s.tasks.list_all(),
            documents=s.documents.list_all(),
        ))

    def export_trip(self, trip_id: str) -> Optional[ExportData]:
        """Export one trip with every record referencing it; None when unknown"""
        s = self.stores
        trip = s.trips.get(trip_id)
        if trip is None:
            return None
        return self._document(ExportCollections(
            trips=[trip],
            day_plans=s.itinerary.query_by_trip(trip_id),
            accommodations=s.accommodations.query_by_trip(trip_id),
            expenses=s.expenses.query_by_trip(trip_id),
            packing_lists=s.packing.query_by_trip(trip_id),
            transports=s.transports.query_by_trip(trip_id),
            tasks=s.tasks.query_by_trip(trip_id),
            documents=s.documents.query_by_trip(trip_id),
        ))

    def dumps(self, data: ExportData) -> str:
        return json.dumps(data.to_json_dict(), indent=2, ensure_ascii=False)

    def export_filename(self, trip_name: Optional[str] = None) -> str:
        day = self._clock().date().isoformat()
        if trip_name is None:
            return f"tripplanner-backup-{day}.json"
        safe_name = re.sub(r"[^a-zA-Z0-9_-]", "-", trip_name).lower()
        return f"tripplanner-{safe_name}-{day}.json"

    @staticmethod
    def validate_import(raw: Union[str, bytes, Any]) -> ExportData:
        """
        Check an import document against the export schema

        Args:
            raw: JSON text or already decoded data

        Returns:
            The parsed document, nested ``order`` values renumbered from 0

        Raises:
            ImportValidationError: listing every violation as ``path: message``,
                including ids that appear twice in the same collection
        """
        try:
            if isinstance(raw, (str, bytes)):
                document = ExportData.model_validate_json(raw)
            else:
                document = ExportData.model_validate(raw)
        except ValidationError as e:
            violations = _format_violations(e)
            logger.warning("Import rejected", extra={"violations": len(violations)})
            raise ImportValidationError(violations) from e
        violations = _duplicate_ids(document.data)
        if violations:
            logger.warning("Import rejected", extra={"violations": len(violations)})
            raise ImportValidationError(violations)
        _renumber_children(document.data)
        return document

    def import_data(self, data: ExportData, merge: bool = False) -> ImportResult:
        """
        Apply a validated document

        Args:
            data: output of ``validate_import``
            merge: keep existing records and add only unknown ids; when False
                every collection is replaced

        Returns:
            Counts of what was actually imported
        """
        s = self.stores
        incoming = data.data
        pairs: Sequence = (
            (s.trips, incoming.trips),
            (s.itinerary, incoming.day_plans),
            (s.accommodations, incoming.accommodations),
            (s.expenses, incoming.expenses),
            (s.packing, incoming.packing_lists),
            (s.transports, incoming.transports),
            (s.tasks, incoming.tasks),
            (s.documents, incoming.documents),
        )
        if merge:
            added = [store.merge(records) for store, records in pairs]
            counts = _count(ExportCollections(
                trips=added[0],
                day_plans=added[1],
                accommodations=added[2],
                expenses=added[3],
                packing_lists=added[4],
                transports=added[5],
                tasks=added[6],
                documents=added[7],
            ))
        else:
            for store, records in pairs:
                store.replace_all(records)
            counts = _count(incoming)
        logger.info("Import applied", extra={"merge": merge, "trips": counts.trips})
        return ImportResult(merged=merge, imported_counts=counts)

    def validate_and_import(self, raw: Union[str, bytes, Any], merge: bool = False) -> ImportResult:
        return self.import_data(self.validate_import(raw), merge=merge)
