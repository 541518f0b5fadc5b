"""
Item request/response schemas.
"""
from typing import Union

from pydantic import BaseModel, Field

from app.models.item import Item


class ItemFields(BaseModel):
    """Descriptive fields of an item, all required."""
    name: str = Field(..., description="Item name")
    description: str = Field(..., description="Item description")
    price: Union[int, float] = Field(..., description="Unit price")
    category: str = Field(..., description="Item category")
    quantity: int = Field(..., description="Units available")
    image: str = Field(..., description="Image URL")


class ItemCreate(ItemFields):
    """Create item request."""
    pass


class ItemUpdate(ItemFields):
    """Update item request. Replaces every field except id and createdBy."""
    pass


class ItemMutationResponse(BaseModel):
    """Response for create and update."""
    message: str = Field(..., description="Outcome message")
    item: Item = Field(..., description="The stored item")


class MessageResponse(BaseModel):
    """Response carrying only a message."""
    message: str
