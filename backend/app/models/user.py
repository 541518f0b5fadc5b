"""
User model for the shared document.
"""
from enum import Enum

from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """Closed set of roles a user can hold."""
    ADMIN = "admin"
    CREATOR = "creator"
    CONSUMER = "consumer"


class User(BaseModel):
    """
    User record as stored in the document's ``users`` array.
    """
    id: int = Field(..., description="Sequential user identifier")
    username: str = Field(..., description="Unique, case-sensitive username")
    password: str = Field(..., description="Stored credential (see app.core.security)")
    role: UserRole = Field(..., description="Role governing allowed operations")

    class Config:
        use_enum_values = True


class Principal(BaseModel):
    """Authenticated identity decoded from a verified token."""
    username: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
