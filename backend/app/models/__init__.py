"""
Pydantic models for the persisted document and its records.
"""
from app.models.user import User, UserRole, Principal
from app.models.item import Item
from app.models.document import Counters, Document

__all__ = [
    "User",
    "UserRole",
    "Principal",
    "Item",
    "Counters",
    "Document",
]
