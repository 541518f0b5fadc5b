"""
Request and response schemas for API endpoints.
"""
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from app.schemas.item import (
    ItemCreate,
    ItemFields,
    ItemMutationResponse,
    ItemUpdate,
    MessageResponse,
)

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    # Item
    "ItemCreate",
    "ItemFields",
    "ItemMutationResponse",
    "ItemUpdate",
    "MessageResponse",
]
