"""
Document store connection management.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from app.config import get_settings
from app.database.store import DocumentStore, JsonFileDocumentStore, MongoDocumentStore

logger = logging.getLogger(__name__)

# Global store instance
_store: Optional[DocumentStore] = None


def create_store() -> DocumentStore:
    """Build the store selected by ``settings.store_backend``."""
    settings = get_settings()
    if settings.store_backend == "mongo":
        client = AsyncIOMotorClient(settings.mongo_uri)
        logger.info(f"Using MongoDB document store ({settings.mongo_db_name})")
        return MongoDocumentStore(client[settings.mongo_db_name], client=client)

    logger.info(f"Using JSON document store ({settings.db_path})")
    return JsonFileDocumentStore(settings.db_path)


async def get_store() -> DocumentStore:
    """Get or create the document store."""
    global _store
    if _store is None:
        _store = create_store()
    return _store


async def close_store():
    """Close the document store."""
    global _store

    if _store is not None:
        await _store.close()
        _store = None
