"""
Test configuration and fixtures for the URL shortener.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from tinyurl_app.config import Settings
from tinyurl_app.database.connection import Database
from tinyurl_app.database.migrations import run_migrations
from tinyurl_app.services.short_code_factory import ShortCodeFactory

TEST_BASE_URL = "http://sho.rt"


@pytest.fixture(scope="function")
def test_settings():
    return Settings(
        base_url=TEST_BASE_URL,
        short_code_strategy="hex",
        short_code_bytes=3,
        auto_migrate=True,
        _env_file=None,
    )


@pytest.fixture(scope="function")
def database(tmp_path):
    """
    Fresh SQLite database file for each test.
    This ensures tests are isolated and don't affect each other.
    """
    db = Database(f"sqlite:///{tmp_path / 'test.db'}")
    run_migrations(db)
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def db_session(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def reset_short_code_factory():
    ShortCodeFactory.clear_instances()
    yield
    ShortCodeFactory.clear_instances()


@pytest.fixture(scope="function")
def app(test_settings, database):
    return create_app(test_settings, database=database)


@pytest.fixture(scope="function")
def client(app):
    """
    Test client running the app lifespan against the test database.
    This is the main fixture that tests will use.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_link(client):
    """Create a short URL through the API and return the response JSON"""
    def _create(original_url="https://example.com", custom_code=None):
        body = {"originalUrl": original_url}
        if custom_code is not None:
            body["customCode"] = custom_code
        response = client.post("/api/links", json=body)
        assert response.status_code == 201, response.text
        return response.json()
    return _create
