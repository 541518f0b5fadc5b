"""
Authentication router for registration and login.
"""
from fastapi import APIRouter, Depends

from app.core.security import get_token_service
from app.database.connections import get_store
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from app.services.identity_service import IdentityService

router = APIRouter(tags=["Authentication"])


async def get_identity_service() -> IdentityService:
    """Dependency to get IdentityService instance."""
    store = await get_store()
    return IdentityService(store, get_token_service())


@router.post(
    "/register",
    response_model=RegisterResponse,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    identity_service: IdentityService = Depends(get_identity_service),
):
    """
    Register a new user account and receive a token.

    - **username**: Unique, case-sensitive username
    - **password**: Password
    - **role**: One of `admin`, `creator`, `consumer`
    """
    user, token = await identity_service.register(body.username, body.password, body.role)
    return RegisterResponse(token=token, user=user)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    identity_service: IdentityService = Depends(get_identity_service),
):
    """
    Authenticate with username and password to receive a JWT token.

    Pass the token to protected endpoints as `Authorization: Bearer <token>`.
    """
    token = await identity_service.login(body.username, body.password)
    return LoginResponse(token=token)
