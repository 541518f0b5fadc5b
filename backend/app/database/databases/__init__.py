"""
Database definitions and collection constants.
"""
from app.database.databases import items_db

__all__ = ["items_db"]
