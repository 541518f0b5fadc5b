"""
Error taxonomy shared by the services and the HTTP layer.

Every error carries the HTTP status it is rendered with and a short
message that ends up in the ``{"error": ...}`` response body.
"""
from fastapi import status


class ServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """A required field is missing or has an unusable value."""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class DuplicateUsername(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Username already exists"


class InvalidCredentials(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


class MissingToken(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Token required"


class InvalidToken(ServiceError):
    """Token present but could not be verified."""
    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid token"


class TokenExpired(InvalidToken):
    pass


class TokenMalformed(InvalidToken):
    pass


class TokenBadSignature(InvalidToken):
    pass


class RoleForbidden(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Access denied"


class OwnershipForbidden(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "You are not allowed to modify this item"


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Item not found"


class StoreError(ServiceError):
    """The document could not be read or written."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Storage failure"
