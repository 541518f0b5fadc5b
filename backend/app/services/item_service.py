"""
Item service: ownership-aware CRUD over the document's items.
"""
import logging
import math
from typing import Optional

from app.core.authorization import ensure_owner_or_admin
from app.core.exceptions import NotFound
from app.database.store import DocumentStore
from app.models.document import Document
from app.models.item import Item
from app.models.user import Principal
from app.schemas.item import ItemCreate, ItemUpdate

logger = logging.getLogger(__name__)


def parse_item_id(raw_id: str | int | float) -> Optional[float]:
    """
    Interpret a route identifier by numeric value.

    ``"3"``, ``"3.0"`` and ``" 3 "`` all name item 3. Text that is not a
    finite number names no item and yields None.
    """
    if isinstance(raw_id, bool):
        return None
    try:
        value = float(raw_id)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


class ItemService:
    """Service for item operations."""

    def __init__(self, store: DocumentStore):
        """Initialize with the document store."""
        self.store = store

    # ==================== Item CRUD ====================

    async def create_item(self, principal: Principal, request: ItemCreate) -> Item:
        """Create an item owned by the calling principal."""
        async with self.store.transaction() as doc:
            item = Item(
                id=doc.next_item_id(),
                **request.model_dump(),
                created_by=principal.username,
            )
            doc.items.append(item)

        logger.info(f"Item {item.id} created by {principal.username!r}")
        return item

    async def list_items(self) -> list[Item]:
        """List all items, regardless of owner."""
        doc = await self.store.snapshot()
        return doc.items

    async def update_item(
        self, principal: Principal, item_id: str, request: ItemUpdate
    ) -> Item:
        """
        Replace an item's descriptive fields.

        Raises:
            NotFound: No item with that id
            OwnershipForbidden: Principal is neither owner nor admin
        """
        async with self.store.transaction() as doc:
            index = self._find_index(doc, item_id)
            current = doc.items[index]
            ensure_owner_or_admin(current.created_by, principal, "update")

            updated = Item(
                id=current.id,
                **request.model_dump(),
                created_by=current.created_by,
            )
            doc.items[index] = updated

        logger.info(f"Item {updated.id} updated by {principal.username!r}")
        return updated

    async def delete_item(self, principal: Principal, item_id: str) -> None:
        """
        Delete a single item.

        Raises:
            NotFound: No item with that id
            OwnershipForbidden: Principal is neither owner nor admin
        """
        async with self.store.transaction() as doc:
            index = self._find_index(doc, item_id)
            current = doc.items[index]
            ensure_owner_or_admin(current.created_by, principal, "delete")
            del doc.items[index]

        logger.info(f"Item {current.id} deleted by {principal.username!r}")

    def _find_index(self, doc: Document, item_id: str) -> int:
        """Position of the item whose id equals ``item_id`` by value."""
        wanted = parse_item_id(item_id)
        if wanted is not None:
            for index, item in enumerate(doc.items):
                if item.id == wanted:
                    return index
        raise NotFound()
