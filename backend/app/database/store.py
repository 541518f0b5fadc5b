"""
Document store: the single persisted ``{users, items}`` document.

Every mutating operation reads the whole document, changes it and writes it
back. ``DocumentStore.transaction`` serializes those spans with one lock so
concurrent requests cannot interleave between a load and its save.
"""
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from asyncio import Lock
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import PyMongoError

from app.core.exceptions import StoreError
from app.database.databases import items_db
from app.models.document import Document

logger = logging.getLogger(__name__)


class DocumentStore(ABC):
    """Base class providing load/save and the serialized transaction span."""

    def __init__(self):
        self._lock = Lock()

    @abstractmethod
    async def _read(self) -> Optional[dict]:
        """Return the raw stored document, or None if nothing is stored yet."""

    @abstractmethod
    async def _write(self, data: dict) -> None:
        """Replace the stored document with ``data``."""

    @abstractmethod
    async def ping(self) -> None:
        """Raise if the backing storage is unreachable."""

    async def close(self) -> None:
        pass

    async def load(self) -> Document:
        """
        Read the full document.

        Raises:
            StoreError: Storage unreadable or content not a valid document
        """
        try:
            raw = await self._read()
            return Document.model_validate(raw or {})
        except StoreError:
            raise
        except (OSError, ValueError, PyMongoError, PydanticValidationError) as e:
            logger.error(f"Failed to load document: {e}")
            raise StoreError("Failed to read data store") from e

    async def save(self, doc: Document) -> None:
        """
        Write the full document.

        Raises:
            StoreError: Storage could not be written
        """
        try:
            await self._write(doc.to_dict())
        except (OSError, TypeError, ValueError, PyMongoError) as e:
            logger.error(f"Failed to save document: {e}")
            raise StoreError("Failed to write data store") from e

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Document]:
        """
        Hold the store lock for a load-modify-save span.

        The yielded document is saved only when the block exits normally;
        an exception inside the block leaves storage untouched. The lock is
        released on every exit path.
        """
        async with self._lock:
            doc = await self.load()
            yield doc
            await self.save(doc)

    async def snapshot(self) -> Document:
        """Read the document without overlapping a writer's span."""
        async with self._lock:
            return await self.load()


class JsonFileDocumentStore(DocumentStore):
    """Document kept in a pretty-printed JSON file."""

    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)

    async def _read(self) -> Optional[dict]:
        if not self.path.exists():
            return None
        with open(self.path, encoding="utf-8") as f:
            return json.load(f)

    async def _write(self, data: dict) -> None:
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)

        # Write to a sibling file first so a failed write never truncates the document
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    async def ping(self) -> None:
        directory = self.path.parent
        if not directory.is_dir():
            raise StoreError(f"Data directory {directory} does not exist")
        if self.path.exists() and not os.access(self.path, os.R_OK | os.W_OK):
            raise StoreError(f"Data file {self.path} is not readable and writable")


class MongoDocumentStore(DocumentStore):
    """Document kept as a single MongoDB record."""

    def __init__(self, db: AsyncIOMotorDatabase, client=None):
        super().__init__()
        self.db = db
        self.client = client
        self.collection = db[items_db.Collections.DOCUMENTS]

    async def _read(self) -> Optional[dict]:
        record = await self.collection.find_one({"_id": items_db.DOCUMENT_ID})
        if record is None:
            return None
        record.pop("_id", None)
        return record

    async def _write(self, data: dict) -> None:
        await self.collection.replace_one(
            {"_id": items_db.DOCUMENT_ID},
            {"_id": items_db.DOCUMENT_ID, **data},
            upsert=True,
        )

    async def ping(self) -> None:
        await self.db.command("ping")

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()
