"""Shared fixtures for the events catalog tests."""

import pytest
from fastapi.testclient import TestClient

from events_catalog.api.app import create_application
from events_catalog.db import Database, DatabaseConfig, EventRepository


@pytest.fixture
def database():
    """Fresh in-memory database per test."""
    database = Database(DatabaseConfig(url="sqlite://"))
    yield database
    database.dispose()


@pytest.fixture
def repository(database):
    return EventRepository(database)


@pytest.fixture
def app(database):
    return create_application(database=database)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
