"""
Authentication request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field

from app.models.user import User


class RegisterRequest(BaseModel):
    """Registration request body. Presence is checked by the identity service."""
    username: Optional[str] = Field(None, description="Unique username")
    password: Optional[str] = Field(None, description="Password")
    role: Optional[str] = Field(None, description="admin, creator or consumer")


class RegisterResponse(BaseModel):
    """Registration response with token and the created user."""
    status: str = Field(default="success", description="Outcome")
    token: str = Field(..., description="JWT access token")
    user: User = Field(..., description="Created user")


class LoginRequest(BaseModel):
    """Login request body."""
    username: Optional[str] = Field(None, description="Username")
    password: Optional[str] = Field(None, description="Password")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    status: str = Field(default="success", description="Outcome")
    token: str = Field(..., description="JWT access token")
