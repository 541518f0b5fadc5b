"""
Role-based access control dependencies.
"""
from typing import Callable

from fastapi import Depends

from app.core.authorization import check_role
from app.dependencies.auth import get_current_principal
from app.models.user import Principal, UserRole


def require_roles(*allowed_roles: UserRole) -> Callable:
    """
    Dependency factory for role-based access control.

    Usage:
        @router.post("/items")
        async def create(principal: Principal = Depends(require_roles(UserRole.ADMIN))):
            ...

    Args:
        *allowed_roles: Roles that are allowed to access the route

    Returns:
        Dependency function that validates the principal's role
    """
    async def role_checker(
        principal: Principal = Depends(get_current_principal)
    ) -> Principal:
        return check_role(principal, allowed_roles)

    return role_checker


def require_admin() -> Callable:
    """Shortcut dependency for admin-only routes."""
    return require_roles(UserRole.ADMIN)


def require_creator_or_admin() -> Callable:
    """Shortcut dependency for routes that create or modify items."""
    return require_roles(UserRole.ADMIN, UserRole.CREATOR)
