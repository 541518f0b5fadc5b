"""
Global test fixtures for the Shared Items API.

This module provides shared fixtures for all tests including:
- Isolated settings pointing at a temporary data file
- Document stores (JSON file and mock MongoDB via mongomock-motor)
- Token service and principal factories
- FastAPI test client and auth header helpers
"""

import json
import sys
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

TEST_SECRET = "test-secret-key"


# =============================================================================
# Settings Fixtures
# =============================================================================

def _clear_caches():
    from app.config import get_settings
    from app.core.security import get_password_context, get_token_service

    get_settings.cache_clear()
    get_password_context.cache_clear()
    get_token_service.cache_clear()


@pytest.fixture
def db_path(tmp_path) -> Path:
    """Location of the JSON document used by the app under test."""
    return tmp_path / "db.json"


@pytest.fixture
def test_settings(db_path, monkeypatch):
    """
    Point the application at a temporary JSON document and a test secret.

    Cached settings, token service and global store are reset around each test.
    """
    import app.database.connections as conn_module

    monkeypatch.setenv("STORE_BACKEND", "json")
    monkeypatch.setenv("DB_PATH", str(db_path))
    monkeypatch.setenv("JWT_SECRET_KEY", TEST_SECRET)
    monkeypatch.delenv("PASSWORD_SCHEMES", raising=False)
    _clear_caches()
    conn_module._store = None

    from app.config import get_settings
    yield get_settings()

    conn_module._store = None
    _clear_caches()


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def json_store(db_path):
    """A JSON file document store in a temporary directory."""
    from app.database.store import JsonFileDocumentStore
    return JsonFileDocumentStore(db_path)


@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mongo_store(mock_async_mongo_client):
    """A MongoDB document store backed by mongomock-motor."""
    from app.database.store import MongoDocumentStore
    return MongoDocumentStore(mock_async_mongo_client["items_db"])


@pytest.fixture
def read_document(db_path):
    """Helper returning the raw persisted JSON document."""
    def _read() -> dict:
        with open(db_path) as f:
            return json.load(f)
    return _read


# =============================================================================
# Token Fixtures
# =============================================================================

@pytest.fixture
def token_service():
    """Token service signing with the test secret."""
    from app.core.security import TokenService
    return TokenService(secret_key=TEST_SECRET)


@pytest.fixture
def make_principal():
    """Factory for principals: make_principal("alice", "creator")."""
    from app.models.user import Principal, UserRole

    def _make(username: str, role: str = "creator") -> Principal:
        return Principal(username=username, role=UserRole(role))
    return _make


# =============================================================================
# Item Fixtures
# =============================================================================

@pytest.fixture
def item_payload() -> dict:
    """Complete item body for create/update requests."""
    return {
        "name": "Desk lamp",
        "description": "Adjustable LED desk lamp",
        "price": 24.5,
        "category": "lighting",
        "quantity": 10,
        "image": "https://example.com/lamp.png",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings):
    """
    FastAPI app wired to the temporary data file.
    """
    from app.main import app
    return app


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_header():
    """Helper building the Authorization header for a bearer token."""
    def _header(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _header


@pytest.fixture
def register(client):
    """
    Register a user through the API and return its token.

    Usage:
        def test_something(register):
            token = register("alice", "creator")
    """
    def _register(username: str, role: str = "creator", password: str = "secret") -> str:
        response = client.post(
            "/register",
            json={"username": username, "password": password, "role": role},
        )
        assert response.status_code == 200, response.text
        return response.json()["token"]
    return _register
