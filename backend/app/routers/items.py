"""
Items router for shared item management.
"""
from fastapi import APIRouter, Depends, status

from app.database.connections import get_store
from app.dependencies.auth import CurrentPrincipal
from app.dependencies.roles import require_creator_or_admin
from app.models.item import Item
from app.models.user import Principal
from app.schemas.item import (
    ItemCreate,
    ItemMutationResponse,
    ItemUpdate,
    MessageResponse,
)
from app.services.item_service import ItemService

router = APIRouter(prefix="/items", tags=["Items"])


async def get_item_service() -> ItemService:
    """Dependency to get ItemService instance."""
    store = await get_store()
    return ItemService(store)


@router.get(
    "",
    response_model=list[Item],
    summary="List items",
)
async def list_items(
    principal: CurrentPrincipal,
    item_service: ItemService = Depends(get_item_service),
):
    """
    List all items. Any authenticated user may call this.
    """
    return await item_service.list_items()


@router.post(
    "",
    response_model=ItemMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create item",
)
async def create_item(
    body: ItemCreate,
    principal: Principal = Depends(require_creator_or_admin()),
    item_service: ItemService = Depends(get_item_service),
):
    """
    Create an item owned by the caller.

    Requires an `admin` or `creator` token.
    """
    item = await item_service.create_item(principal, body)
    return ItemMutationResponse(message="Item created", item=item)


@router.put(
    "/{item_id}",
    response_model=ItemMutationResponse,
    summary="Update item",
)
async def update_item(
    item_id: str,
    body: ItemUpdate,
    principal: Principal = Depends(require_creator_or_admin()),
    item_service: ItemService = Depends(get_item_service),
):
    """
    Replace an item's fields. Only the owner or an admin may do this.
    """
    item = await item_service.update_item(principal, item_id, body)
    return ItemMutationResponse(message="Item updated", item=item)


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    summary="Delete item",
)
async def delete_item(
    item_id: str,
    principal: Principal = Depends(require_creator_or_admin()),
    item_service: ItemService = Depends(get_item_service),
):
    """
    Delete an item. Only the owner or an admin may do this.

    **Warning**: This action cannot be undone.
    """
    await item_service.delete_item(principal, item_id)
    return MessageResponse(message="Item deleted")
