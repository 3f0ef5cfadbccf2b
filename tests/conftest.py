"""Pytest fixtures for engine and API tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from ballot.services.election_service import Election
from ballot.services.notification_service import NotificationService
from ballot.services.registry_service import ElectionRegistry
from ballot.utils.time import ManualClock

T0 = datetime(2026, 1, 1, tzinfo=UTC)
ADMIN = "0xadmin"


@pytest.fixture
def at() -> Callable[[float], datetime]:
    """Return a helper mapping seconds since T0 to a datetime."""

    def _at(seconds: float) -> datetime:
        return T0 + timedelta(seconds=seconds)

    return _at


@pytest.fixture
def clock() -> ManualClock:
    """A clock pinned at T0."""
    return ManualClock(T0)


@pytest.fixture
def registry(clock: ManualClock) -> ElectionRegistry:
    """A fresh registry with its own notification log."""
    return ElectionRegistry(NotificationService(clock=clock))


@pytest.fixture
def election(registry: ElectionRegistry) -> Election:
    """An election created at T0 with windows [0,100] and [100,300]."""
    _, created = registry.create(ADMIN, "Board", "Annual board vote", 100, 200, T0)
    return created


@pytest.fixture
def client(clock: ManualClock) -> Iterator[TestClient]:
    """Create a FastAPI test client running inside the app lifespan."""
    from ballot.dependencies import get_clock
    from ballot.main import app

    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
