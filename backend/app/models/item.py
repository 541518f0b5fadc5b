"""
Item model for the shared document.
"""
from typing import Optional, Union

from pydantic import BaseModel, Field


class Item(BaseModel):
    """
    Item record as stored in the document's ``items`` array.

    ``created_by`` is serialized as ``createdBy`` and never changes after
    the item is created. Descriptive fields are optional here so that
    documents written by older clients, which could omit them, still load;
    the API itself requires them (see app.schemas.item).
    """
    id: int = Field(..., description="Sequential item identifier")
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Union[int, float]] = None
    category: Optional[str] = None
    quantity: Optional[int] = None
    image: Optional[str] = Field(None, description="Image URL")
    created_by: str = Field(..., alias="createdBy", description="Username of the owner")

    class Config:
        populate_by_name = True
