"""
Database module - document store backends and connection management.
"""
from app.database.connections import get_store, close_store, create_store
from app.database.store import DocumentStore, JsonFileDocumentStore, MongoDocumentStore

__all__ = [
    "get_store",
    "close_store",
    "create_store",
    "DocumentStore",
    "JsonFileDocumentStore",
    "MongoDocumentStore",
]
