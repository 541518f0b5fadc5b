"""
Backend-specific test fixtures.

These fixtures build services on top of the global store fixtures.
"""

import pytest


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def identity_service(test_settings, json_store, token_service):
    """IdentityService over the temporary JSON store."""
    from app.services.identity_service import IdentityService
    return IdentityService(json_store, token_service)


@pytest.fixture
def item_service(json_store):
    """ItemService over the temporary JSON store."""
    from app.services.item_service import ItemService
    return ItemService(json_store)


@pytest.fixture
def item_create(item_payload):
    """Validated item create request."""
    from app.schemas.item import ItemCreate
    return ItemCreate(**item_payload)


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, error_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "error" in data
        if error_contains:
            assert error_contains.lower() in data["error"].lower()
    return _assert
