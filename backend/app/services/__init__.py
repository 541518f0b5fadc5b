"""
Service layer for business logic.
"""
from app.services.identity_service import IdentityService
from app.services.item_service import ItemService

__all__ = [
    "IdentityService",
    "ItemService",
]
