"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and provides
an in-memory SQLite database per test.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fastapi.testclient import TestClient

from app.config import Settings
from domain.models import Database
from main import create_app

TEST_SETTINGS = Settings(
    database_url="sqlite://",
    environment="testing",
    db_init_attempts=1,
    db_init_delay_sec=0,
)


@pytest.fixture
def test_settings() -> Settings:
    return TEST_SETTINGS


@pytest.fixture
def database():
    """Fresh in-memory database with the schema created"""
    db = Database(TEST_SETTINGS.database_url)
    db.init_schema()
    yield db
    db.close()


@pytest.fixture
def db_session(database):
    """
    Real SQLAlchemy session on the per-test database.

    Rolled back and closed after the test.
    """
    session = database.session()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def api_app(database):
    return create_app(TEST_SETTINGS, database)


@pytest.fixture
def client(api_app):
    """TestClient running the app lifespan against the per-test database"""
    with TestClient(api_app) as c:
        yield c
