"""Shared fixtures for URL Shortener Service tests."""

from contextlib import asynccontextmanager
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from url_shortener.main import app
from url_shortener.core.database import Database, get_db


@pytest.fixture
def test_db():
    """Create a test database instance."""
    db = Database(":memory:")
    db.init_db()
    yield db
    db.close()


def _serve(database):
    """Yield a TestClient whose endpoints use ``database``."""
    # Set the dependency override BEFORE creating TestClient
    # so endpoint requests use the test database
    app.dependency_overrides[get_db] = lambda: database

    # Override lifespan so the global database is never initialized
    original_lifespan = app.router.lifespan_context

    @asynccontextmanager
    async def test_lifespan(app):
        yield

    app.router.lifespan_context = test_lifespan

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client

    # Restore original lifespan
    app.router.lifespan_context = original_lifespan
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_db):
    """Create a test client backed by the in-memory database."""
    yield from _serve(test_db)


@pytest.fixture
def mock_db():
    """Create a mock database."""
    return MagicMock(spec=Database)


@pytest.fixture
def mock_client(mock_db):
    """Create a test client backed by a mocked database."""
    yield from _serve(mock_db)
