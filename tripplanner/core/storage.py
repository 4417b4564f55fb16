"""
Snapshot storage backends.

Every store persists its whole collection as one JSON document under a fixed
logical key. Backends are injected into the stores, so tests hand in a
``MemoryStorage`` and the application hands in ``SQLStorage``.
"""
import copy
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from tripplanner.core.db import StoreSnapshot, db_session, create_db_engine, create_session_factory
from tripplanner.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class StorageBackend(ABC):
    """Key/value storage of JSON-serializable snapshots."""

    @abstractmethod
    def load(self, key: str) -> Optional[Any]:
        """Return the stored document or None when the key was never written"""

    @abstractmethod
    def save(self, key: str, data: Any) -> None:
        """Overwrite the document stored under ``key``"""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored"""


class MemoryStorage(StorageBackend):
    """Process-local storage. Values are deep-copied in and out."""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def load(self, key: str) -> Optional[Any]:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def save(self, key: str, data: Any) -> None:
        self._data[key] = copy.deepcopy(data)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return list(self._data)


class SQLStorage(StorageBackend):
    """Stores snapshots as rows of the ``store_snapshots`` table."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @classmethod
    def from_url(cls, url: str) -> "SQLStorage":
        return cls(create_session_factory(create_db_engine(url)))

    def load(self, key: str) -> Optional[Any]:
        try:
            with db_session(self._session_factory) as session:
                row = session.get(StoreSnapshot, key)
                if row is None:
                    return None
                return json.loads(row.payload)
        except SQLAlchemyError as e:
            logger.error("Snapshot load failed", extra={"key": key}, exc_info=True)
            raise PersistenceError(key, str(e)) from e

    def save(self, key: str, data: Any) -> None:
        payload = json.dumps(data)
        try:
            with db_session(self._session_factory) as session:
                row = session.get(StoreSnapshot, key)
                if row is None:
                    session.add(StoreSnapshot(name=key, payload=payload))
                else:
                    row.payload = payload
        except SQLAlchemyError as e:
            logger.error("Snapshot write failed", extra={"key": key}, exc_info=True)
            raise PersistenceError(key, str(e)) from e

    def delete(self, key: str) -> None:
        try:
            with db_session(self._session_factory) as session:
                row = session.get(StoreSnapshot, key)
                if row is not None:
                    session.delete(row)
        except SQLAlchemyError as e:
            raise PersistenceError(key, str(e)) from e
