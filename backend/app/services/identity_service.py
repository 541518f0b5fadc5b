"""
Identity service: registration, login and user listing.
"""
import logging
from typing import Optional

from app.core.exceptions import DuplicateUsername, InvalidCredentials, ValidationError
from app.core.security import TokenService, hash_password, verify_password
from app.database.store import DocumentStore
from app.models.user import Principal, User, UserRole

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Username, password, and role are required"


class IdentityService:
    """Service for identity operations against the document store."""

    def __init__(self, store: DocumentStore, token_service: TokenService):
        """Initialize with the document store and token issuer."""
        self.store = store
        self.token_service = token_service

    async def register(
        self,
        username: Optional[str],
        password: Optional[str],
        role: Optional[str],
    ) -> tuple[User, str]:
        """
        Register a new user and issue a token for it.

        The duplicate check, append and save happen inside one store
        transaction so two registrations cannot claim the same username
        or id.

        Args:
            username: Unique, case-sensitive username
            password: Password to store
            role: One of admin, creator, consumer

        Returns:
            The created user and a freshly issued token

        Raises:
            ValidationError: A field is missing or the role is unknown
            DuplicateUsername: Username already taken
        """
        if not username or not password or not role:
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        try:
            user_role = UserRole(role)
        except ValueError:
            allowed = ", ".join(r.value for r in UserRole)
            raise ValidationError(f"Role must be one of: {allowed}")

        async with self.store.transaction() as doc:
            if doc.find_user(username) is not None:
                logger.info(f"Registration rejected, username {username!r} exists")
                raise DuplicateUsername()

            user = User(
                id=doc.next_user_id(),
                username=username,
                password=hash_password(password),
                role=user_role,
            )
            doc.users.append(user)

        logger.info(f"Registered user {user.username!r} (id={user.id}, role={user.role})")
        token = self.token_service.issue(Principal(username=user.username, role=user_role))
        return user, token

    async def login(self, username: Optional[str], password: Optional[str]) -> str:
        """
        Authenticate with username and password.

        Unknown usernames and wrong passwords fail identically.

        Returns:
            Token carrying the stored role

        Raises:
            InvalidCredentials: No user matches the pair
        """
        if not username or not password:
            raise InvalidCredentials()

        doc = await self.store.snapshot()
        user = doc.find_user(username)
        if user is None or not verify_password(password, user.password):
            logger.info(f"Failed login for {username!r}")
            raise InvalidCredentials()

        return self.token_service.issue(Principal(username=user.username, role=user.role))

    async def list_users(self) -> list[User]:
        """Return every user as stored."""
        doc = await self.store.snapshot()
        return doc.users
