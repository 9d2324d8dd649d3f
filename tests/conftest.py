"""Shared test fixtures."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from swiftfulentry.events.store import EventStore, get_event_store
from swiftfulentry.main import app
from swiftfulentry.models import Event


@pytest.fixture(name="store")
def store_fixture() -> EventStore:
    """Create an empty event store for each test."""
    return EventStore()


@pytest.fixture(name="client")
def client_fixture(store: EventStore):
    """Create a test client backed by the test event store."""

    def get_event_store_override():
        return store

    app.dependency_overrides[get_event_store] = get_event_store_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="sample_event")
def sample_event_fixture(store: EventStore) -> Event:
    """Create a user event one week ahead."""
    return store.validate_and_create(
        "Test Event",
        datetime.now(UTC) + timedelta(days=7),
        "Main Hall",
        "25",
        "Bring a laptop",
    )


@pytest.fixture(name="past_event")
def past_event_fixture(store: EventStore) -> Event:
    """Create a user event one week in the past."""
    return store.validate_and_create(
        "Past Event",
        datetime.now(UTC) - timedelta(days=7),
        "Room 1",
        "5",
    )
