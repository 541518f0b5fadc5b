"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Optional

from fastapi import Depends, Header, Request

from app.core.authorization import authenticate
from app.core.security import TokenService, get_token_service
from app.models.user import Principal


async def get_current_principal(
    request: Request,
    token_service: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[
        Optional[str], Header(description="Bearer <token>")
    ] = None,
) -> Principal:
    """
    Dependency to get the calling principal from the Authorization header.

    The principal is also stored on ``request.state.principal``.

    Raises:
        MissingToken (401): No bearer credential supplied
        InvalidToken (403): Credential expired, malformed or badly signed
    """
    principal = authenticate(authorization, token_service)
    request.state.principal = principal
    return principal


# Type alias for cleaner route signatures
CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
