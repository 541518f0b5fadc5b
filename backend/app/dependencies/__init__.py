"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.auth import CurrentPrincipal, get_current_principal
from app.dependencies.roles import require_admin, require_creator_or_admin, require_roles

__all__ = [
    "CurrentPrincipal",
    "get_current_principal",
    "require_roles",
    "require_admin",
    "require_creator_or_admin",
]
