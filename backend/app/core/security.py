"""
Password handling and JWT token management.
"""
import json
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Optional

from jose import jws, jwt
from jose.exceptions import JWSError
from passlib.context import CryptContext

from app.config import get_settings
from app.core.exceptions import TokenBadSignature, TokenExpired, TokenMalformed
from app.models.user import Principal, UserRole


@lru_cache
def get_password_context() -> CryptContext:
    """
    Password context built from the configured schemes.

    The default ``plaintext`` scheme stores passwords as submitted. Listing a
    hashing scheme first (e.g. ``["pbkdf2_sha256", "plaintext"]``) hashes new
    registrations while still accepting previously stored plaintext values.
    """
    settings = get_settings()
    return CryptContext(schemes=settings.password_schemes, deprecated="auto")


def hash_password(plain_password: str) -> str:
    """
    Produce the value stored for a password.

    Args:
        plain_password: The password submitted at registration

    Returns:
        Stored credential string
    """
    return get_password_context().hash(plain_password)


def verify_password(plain_password: str, stored_password: Optional[str]) -> bool:
    """
    Verify a submitted password against the stored credential.

    Args:
        plain_password: The password to verify
        stored_password: The value kept in the user record

    Returns:
        True if password matches, False otherwise
    """
    if not plain_password or not stored_password:
        return False
    try:
        return get_password_context().verify(plain_password, stored_password)
    except ValueError:
        # Stored value not recognised by any configured scheme
        return False


def is_token_expired(payload: dict[str, Any]) -> bool:
    """
    Check if a decoded token payload is expired.

    A token expires at its ``exp`` instant, so a zero TTL yields a token
    that is already expired.
    """
    exp = payload.get("exp")
    if exp is None:
        return True
    return datetime.now(timezone.utc) >= datetime.fromtimestamp(exp, tz=timezone.utc)


class TokenService:
    """Issues and verifies signed, time-limited identity tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        default_ttl: timedelta = timedelta(hours=1),
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.default_ttl = default_ttl

    def issue(self, principal: Principal, ttl: Optional[timedelta] = None) -> str:
        """
        Create a JWT carrying the principal's username and role.

        Args:
            principal: Identity to encode
            ttl: Optional lifetime, defaults to the service's default TTL

        Returns:
            Encoded JWT token string
        """
        if ttl is None:
            ttl = self.default_ttl

        now = datetime.now(timezone.utc)
        payload = {
            "username": principal.username,
            "role": UserRole(principal.role).value,
            "iat": now,
            "exp": now + ttl,
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> Principal:
        """
        Verify a token and return the principal it names.

        Never consults storage: a valid signature and an unexpired ``exp``
        are all that is checked.

        Raises:
            TokenBadSignature: Signature does not match the signing key
            TokenMalformed: Token cannot be parsed or lacks usable claims
            TokenExpired: Token is past its expiry
        """
        # Structure first, so a token that only fails its signature check
        # is told apart from one that is not a JWS at all
        try:
            jws.get_unverified_claims(token)
        except (JWSError, AttributeError, TypeError, ValueError) as e:
            raise TokenMalformed() from e

        try:
            raw = jws.verify(token, self.secret_key, algorithms=[self.algorithm])
        except JWSError as e:
            raise TokenBadSignature() from e

        try:
            payload = json.loads(raw)
        except ValueError as e:
            raise TokenMalformed() from e
        if not isinstance(payload, dict):
            raise TokenMalformed()

        try:
            expired = is_token_expired(payload)
        except (TypeError, ValueError, OverflowError, OSError) as e:
            raise TokenMalformed() from e
        if expired:
            raise TokenExpired()

        username = payload.get("username")
        if not isinstance(username, str) or not username:
            raise TokenMalformed()
        try:
            role = UserRole(payload.get("role"))
        except ValueError as e:
            raise TokenMalformed() from e

        return Principal(username=username, role=role)


@lru_cache
def get_token_service() -> TokenService:
    """Get the process token service built from settings."""
    settings = get_settings()
    return TokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        default_ttl=timedelta(minutes=settings.jwt_access_token_expire_minutes),
    )
