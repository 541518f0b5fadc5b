"""
Core module - Security, authorization predicates and the error taxonomy.
"""
from app.core.security import (
    hash_password,
    verify_password,
    TokenService,
    get_token_service,
)
from app.core.authorization import (
    authenticate,
    check_role,
    ensure_owner_or_admin,
    is_owner_or_admin,
)

__all__ = [
    "hash_password",
    "verify_password",
    "TokenService",
    "get_token_service",
    "authenticate",
    "check_role",
    "ensure_owner_or_admin",
    "is_owner_or_admin",
]
