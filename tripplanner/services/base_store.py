"""
Entity Store - generic keyed collection persisted as a single snapshot
"""
import logging
import threading
import uuid
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar

from tripplanner.core.clock import Clock, utc_now
from tripplanner.core.storage import StorageBackend
from tripplanner.models.base import PlannerModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=PlannerModel)
R = TypeVar("R")


class EntityStore(Generic[T]):
    """
    Keyed, ordered collection of one record type.

    Records are kept in insertion order in memory and the whole collection is
    written to the storage backend after every mutation. Lookups of missing
    ids never raise: reads return ``None`` and writes are no-ops.

    Subclasses configure:
        model: record class
        storage_key: logical snapshot name
        timestamp_fields: fields stamped with the clock on ``add``
        touch_field: field stamped on every change (e.g. ``updated_at``)
        sort_field: primary date field used for query ordering
        sort_descending: newest first instead of oldest first
        protected_fields: fields ``update`` never overwrites
    """

    model: Type[T]
    storage_key: str
    timestamp_fields: Tuple[str, ...] = ()
    touch_field: Optional[str] = None
    sort_field: Optional[str] = None
    sort_descending: bool = False
    protected_fields: Tuple[str, ...] = ("id",)

    def __init__(self, storage: StorageBackend, clock: Clock = utc_now):
        self._storage = storage
        self._clock = clock
        self._lock = threading.RLock()
        self._records: List[T] = self._load()

    # ------------------------------------------------------------------ #
    # persistence
    # ------------------------------------------------------------------ #

    def _load(self) -> List[T]:
        raw = self._storage.load(self.storage_key) or []
        records = [self.model.model_validate(item) for item in raw]
        logger.debug("Loaded %d records", len(records), extra={"store": self.storage_key})
        return records

    def _persist(self) -> None:
        self._storage.save(self.storage_key, [r.to_json_dict() for r in self._records])

    # ------------------------------------------------------------------ #
    # hooks
    # ------------------------------------------------------------------ #

    def _new_id(self) -> str:
        return str(uuid.uuid4())

    def _managed_fields(self) -> Tuple[str, ...]:
        """Fields callers never set; ``add`` and ``update`` drop them in either spelling"""
        return self.protected_fields + self.timestamp_fields

    def _prepare(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Adjust a creation payload before validation"""
        return payload

    def _sort_value(self, record: T) -> Any:
        if self.sort_field is None:
            return None
        return getattr(record, self.sort_field)

    def _ordered(self, records: Iterable[T]) -> List[T]:
        records = list(records)
        if self.sort_field is None:
            return records
        dated = [r for r in records if self._sort_value(r) is not None]
        undated = [r for r in records if self._sort_value(r) is None]
        # list.sort is stable in both directions, so ties keep insertion order
        dated.sort(key=self._sort_value, reverse=self.sort_descending)
        return dated + undated

    def _find_index(self, record_id: str) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def _touch(self, record: T) -> None:
        if self.touch_field:
            setattr(record, self.touch_field, self._clock())

    def _reconcile(self, record: T) -> None:
        """Restore derived fields after a record was created or updated"""

    def _modify(self, record_id: str, change: Callable[[T], Optional[R]]) -> Optional[R]:
        """
        Apply ``change`` to a working copy of one record, then swap it in and
        persist. Returns whatever ``change`` returns, or None if the id is absent.

        ``change`` returns None when its own target (a nested child) is
        missing; the record is then left untouched and nothing is written.
        """
        with self._lock:
            index = self._find_index(record_id)
            if index is None:
                return None
            working = self._records[index].model_copy(deep=True)
            result = change(working)
            if result is None:
                return None
            self._touch(working)
            self._records[index] = self.model.model_validate(working.model_dump())
            self._persist()
            return result

    # ------------------------------------------------------------------ #
    # CRUD
    # ------------------------------------------------------------------ #

    def add(self, data: Mapping[str, Any]) -> str:
        """
        Create a record from ``data`` (without id/timestamps)

        Args:
            data: field values, snake_case or camelCase

        Returns:
            The generated id
        """
        with self._lock:
            record_id = self._new_id()
            payload = self.model.field_values(data, exclude=self._managed_fields())
            now = self._clock()
            for field in self.timestamp_fields:
                payload[field] = now
            payload["id"] = record_id
            record = self.model.model_validate(self._prepare(payload))
            self._reconcile(record)
            self._records.append(record)
            logger.debug("Record added", extra={"store": self.storage_key, "id": record_id})
            self._persist()
            return record_id

    def update(self, record_id: str, **fields: Any) -> Optional[T]:
        """
        Merge ``fields`` into an existing record

        Returns:
            The updated record, or None when the id is unknown
        """
        with self._lock:
            index = self._find_index(record_id)
            if index is None:
                return None
            current = self._records[index]
            changes = self.model.field_values(fields, exclude=self._managed_fields())
            merged = {**current.model_dump(), **changes}
            updated = self.model.model_validate(merged)
            self._reconcile(updated)
            self._touch(updated)
            self._records[index] = updated
            self._persist()
            return updated.model_copy(deep=True)

    def delete(self, record_id: str) -> bool:
        with self._lock:
            index = self._find_index(record_id)
            if index is None:
                return False
            del self._records[index]
            logger.debug("Record deleted", extra={"store": self.storage_key, "id": record_id})
            self._persist()
            return True

    def get(self, record_id: str) -> Optional[T]:
        with self._lock:
            index = self._find_index(record_id)
            if index is None:
                return None
            return self._records[index].model_copy(deep=True)

    # ------------------------------------------------------------------ #
    # queries
    # ------------------------------------------------------------------ #

    def query(self, predicate: Callable[[T], bool]) -> List[T]:
        with self._lock:
            matches = [r for r in self._records if predicate(r)]
            return [r.model_copy(deep=True) for r in self._ordered(matches)]

    def list_all(self) -> List[T]:
        return self.query(lambda r: True)

    def query_by_trip(self, trip_id: str) -> List[T]:
        return self.query(lambda r: r.trip_id == trip_id)

    def count(self) -> int:
        return len(self._records)

    def __len__(self) -> int:
        return self.count()

    def delete_by_trip(self, trip_id: str) -> int:
        """Remove every record of one trip, returns how many were removed"""
        with self._lock:
            kept = [r for r in self._records if r.trip_id != trip_id]
            removed = len(self._records) - len(kept)
            if removed:
                self._records = kept
                self._persist()
            return removed

    # ------------------------------------------------------------------ #
    # bulk operations used by import
    # ------------------------------------------------------------------ #

    def replace_all(self, records: Iterable[T]) -> int:
        with self._lock:
            self._records = [self.model.model_validate(r.model_dump()) for r in records]
            self._persist()
            return len(self._records)

    def merge(self, records: Iterable[T]) -> List[T]:
        """Append records whose id is not present yet, returns the ones added"""
        with self._lock:
            existing = {r.id for r in self._records}
            added = []
            for record in records:
                if record.id in existing:
                    continue
                existing.add(record.id)
                added.append(self.model.model_validate(record.model_dump()))
            if added:
                self._records.extend(added)
                self._persist()
            return added
