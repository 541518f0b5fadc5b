"""
Users router (admin only).
"""
from fastapi import APIRouter, Depends

from app.dependencies.roles import require_admin
from app.models.user import Principal, User
from app.routers.auth import get_identity_service
from app.services.identity_service import IdentityService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=list[User],
    summary="List users",
)
async def list_users(
    principal: Principal = Depends(require_admin()),
    identity_service: IdentityService = Depends(get_identity_service),
):
    """
    List every registered user as stored.

    Requires an admin token: `Authorization: Bearer <token>`
    """
    return await identity_service.list_users()
