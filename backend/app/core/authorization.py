"""
Authorization predicates, evaluated in a fixed order:

1. ``extract_bearer_token`` - credential present in the Authorization header
2. ``authenticate`` - token verifies and names a principal
3. ``check_role`` - principal's role is allowed for the route
4. ``ensure_owner_or_admin`` - principal may touch the loaded resource

Each stage raises its own error type so failures can be told apart.
"""
import logging
from typing import Iterable, Optional

from app.core.exceptions import MissingToken, OwnershipForbidden, RoleForbidden
from app.core.security import TokenService
from app.models.user import Principal, UserRole

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Take the credential from an ``Authorization: <scheme> <token>`` header.

    Raises:
        MissingToken: Header absent or carrying no credential
    """
    if not authorization:
        raise MissingToken()
    parts = authorization.split(" ")
    if len(parts) < 2 or not parts[1]:
        raise MissingToken()
    return parts[1]


def authenticate(authorization: Optional[str], token_service: TokenService) -> Principal:
    """
    Derive the calling principal from the Authorization header.

    Raises:
        MissingToken: No credential supplied (401)
        InvalidToken: Credential expired, malformed or badly signed (403)
    """
    token = extract_bearer_token(authorization)
    return token_service.verify(token)


def check_role(principal: Principal, allowed_roles: Iterable[UserRole]) -> Principal:
    """
    Ensure the principal holds one of the allowed roles.

    Raises:
        RoleForbidden: Role not in ``allowed_roles``
    """
    allowed = {UserRole(role) for role in allowed_roles}
    if UserRole(principal.role) not in allowed:
        logger.info(f"Role {UserRole(principal.role).value} denied for user {principal.username!r}")
        raise RoleForbidden()
    return principal


def is_owner_or_admin(resource_owner: str, principal: Principal) -> bool:
    """True if the principal owns the resource or is an admin."""
    return principal.username == resource_owner or principal.is_admin


def ensure_owner_or_admin(resource_owner: str, principal: Principal, action: str) -> None:
    """
    Raises:
        OwnershipForbidden: Principal neither owns the resource nor is an admin
    """
    if not is_owner_or_admin(resource_owner, principal):
        logger.info(f"User {principal.username!r} may not {action} item owned by {resource_owner!r}")
        raise OwnershipForbidden(f"You are not allowed to {action} this item")
