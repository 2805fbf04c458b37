"""Pytest configuration and fixtures."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from queuelink.config import Settings, get_settings
from queuelink.dependencies import get_store
from queuelink.main import app
from queuelink.services.queue_store import QueueStore


@pytest.fixture(scope="function")
def store() -> QueueStore:
    """A fresh, empty queue store."""
    return QueueStore()


@pytest.fixture(scope="function")
def settings() -> Settings:
    """Settings with demo seeding turned off so tests start empty."""
    return Settings(seed_demo_data=False)


@pytest.fixture(scope="function")
def client(store: QueueStore, settings: Settings) -> Generator[TestClient, None, None]:
    """Create a test client wired to the test store."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: settings
    # Don't raise server exceptions so we can test error status codes
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def front_desk(store: QueueStore) -> str:
    """An empty queue named "Front Desk"; returns its id."""
    store.create("front-desk", "Front Desk")
    return "front-desk"
