"""User domain service."""

from datetime import datetime, timezone
from typing import Any, Mapping, Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from linkup.config import AuthSettings
from linkup.domain.error import DuplicateIdentityError, NotFoundError
from linkup.domain.model import User
from linkup.domain.repository import UserRepository
from linkup.domain.value import UserId, UserRole, VerifiedIdentity
from linkup.domain.value.types import Handle

from .base import Service

# Only these fields may be changed by the account owner
PROFILE_FIELDS = frozenset({"display_name", "bio", "location", "birth_date"})


def normalize_email(email: str) -> str:
    """Emails are compared case-insensitively."""
    return email.strip().lower()


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (admin bootstrap list)
        """
        self.user_repository = user_repository
        self.admin_emails = {normalize_email(e) for e in auth_settings.admin_emails}

    def _role_for(self, email: str) -> UserRole:
        return UserRole.ADMIN if email in self.admin_emails else UserRole.USER

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, or None if the account does not exist."""
        return await self.user_repository.find_by_id(user_id)

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: User email (any case)

        Returns:
            User if found, None otherwise
        """
        email = normalize_email(email)
        with logfire.span("user_service.get_user_by_email", email=email):
            user = await self.user_repository.find_by_email(email)
            if user:
                logfire.info("User found", email=email, user_id=str(user.id))
            else:
                logfire.warn("User not found", email=email)
            return user

    async def get_users_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Load several users at once, keyed by ID."""
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}

    async def register(self, handle: Handle, email: str, password_hash: str) -> User:
        """Create a local account.

        Args:
            handle: Chosen handle
            email: Email address (normalized here)
            password_hash: bcrypt hash of the password

        Returns:
            Created user

        Raises:
            DuplicateIdentityError: If the email or handle is taken
        """
        email = normalize_email(email)
        with logfire.span("user_service.register", handle=handle.root, email=email):
            if await self.user_repository.find_by_email(email):
                raise DuplicateIdentityError("email", email)
            if await self.user_repository.find_by_handle(handle):
                raise DuplicateIdentityError("handle", handle.root)

            now = datetime.now(timezone.utc)
            user = User(
                id=UserId(uuid4()),
                handle=handle,
                email=email,
                password_hash=password_hash,
                role=self._role_for(email),
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.user_repository.create(user)
            except IntegrityError:
                # A concurrent registration won the unique constraint
                logfire.warn("Duplicate registration", email=email)
                raise DuplicateIdentityError("email or handle", email)

            logfire.info(
                "User registered",
                user_id=str(saved.id),
                handle=saved.handle.root,
                role=saved.role.value,
            )
            return saved

    async def get_or_create_external(self, identity: VerifiedIdentity) -> User:
        """Resolve the local account for a verified external identity.

        The account is created on first login, keyed by email. External
        accounts have no password and use the email as handle.

        Args:
            identity: Identity asserted by the provider

        Returns:
            Existing or newly created user

        Raises:
            DuplicateIdentityError: If the email is already used as
                another account's handle
        """
        email = normalize_email(identity.email)
        with logfire.span("user_service.get_or_create_external", email=email):
            now = datetime.now(timezone.utc)
            candidate = User(
                id=UserId(uuid4()),
                handle=Handle(root=email),
                email=email,
                password_hash=None,
                role=self._role_for(email),
                display_name=identity.display_name,
                avatar_url=identity.avatar_url,
                created_at=now,
                updated_at=now,
            )

            user = await self.user_repository.create_or_get_by_email(candidate)
            if user is None:
                logfire.warn("External email collides with a handle", email=email)
                raise DuplicateIdentityError("handle", email)

            logfire.info(
                "External user resolved",
                user_id=str(user.id),
                created=user.id == candidate.id,
            )
            return user

    async def update_profile(
        self, user_id: UserId, values: Mapping[str, Any]
    ) -> User:
        """Update editable profile fields.

        Keys outside the profile whitelist are ignored.

        Args:
            user_id: Account to update
            values: Field name to new value

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
        """
        updates = {k: v for k, v in values.items() if k in PROFILE_FIELDS}
        with logfire.span(
            "user_service.update_profile",
            user_id=str(user_id),
            fields=sorted(updates),
        ):
            return await self._update(user_id, updates)

    async def set_avatar_url(self, user_id: UserId, url: str) -> User:
        return await self._update(user_id, {"avatar_url": url})

    async def set_cover_url(self, user_id: UserId, url: str) -> User:
        return await self._update(user_id, {"cover_url": url})

    async def ban(self, user_id: UserId) -> User:
        """Ban an account. Banning twice is a no-op.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.ban", user_id=str(user_id)):
            user = await self._update(user_id, {"banned": True})
            logfire.info("User banned", user_id=str(user_id))
            return user

    async def _update(self, user_id: UserId, values: Mapping[str, Any]) -> User:
        if not values:
            return await self.get_by_id(user_id)

        updated = await self.user_repository.update_fields(
            user_id, {**values, "updated_at": datetime.now(timezone.utc)}
        )
        if updated is None:
            raise NotFoundError("User", str(user_id))
        return updated
