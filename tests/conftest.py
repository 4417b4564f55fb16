"""
Shared fixtures: in-memory storage, a controllable clock and a wired planner.
"""
from datetime import date, datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from tripplanner.config.settings import Settings, StorageBackendType
from tripplanner.core.dependencies import get_planner
from tripplanner.core.storage import MemoryStorage
from tripplanner.gamification import GamificationEngine
from tripplanner.main import create_app
from tripplanner.services.planner import Planner
from tripplanner.services.registry import StoreRegistry


class FakeClock:
    """Callable clock that only moves when told to"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta) -> None:
        self.now = self.now + timedelta(**delta)


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def stores(storage, clock):
    return StoreRegistry.create(storage, clock)


@pytest.fixture
def engine(storage, clock):
    return GamificationEngine(storage, clock)


@pytest.fixture
def planner(storage, clock):
    return Planner.create(storage, clock)


@pytest.fixture
def trip_data():
    return {
        "name": "Japan 2025",
        "start_date": date(2025, 4, 1),
        "end_date": date(2025, 4, 10),
        "currency": "EUR",
        "total_budget": 2000,
    }


@pytest.fixture
def trip_id(stores, trip_data):
    return stores.trips.add(trip_data)


@pytest.fixture
def client(planner):
    app = create_app(Settings(storage_backend=StorageBackendType.MEMORY, log_format="text"))
    app.dependency_overrides[get_planner] = lambda: planner
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
