"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence

from linkup.domain.model.user import User
from linkup.domain.value import UserId
from linkup.domain.value.types import Handle


class UserRepository(ABC):
    """Repository for User aggregate.

    Follow edges are changed only through the set-style methods below,
    each a single atomic statement, so concurrent follows from different
    actors never overwrite each other.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users in one query.

        Args:
            user_ids: IDs to look up

        Returns:
            Users that exist (unknown IDs are skipped)
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address (normalized, lowercase)

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle.

        Args:
            handle: The user's handle

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The saved user

        Raises:
            IntegrityError: If the email or handle is already taken
        """
        pass

    @abstractmethod
    async def create_or_get_by_email(self, user: User) -> Optional[User]:
        """Insert a user unless one with the same email exists.

        Atomic upsert: concurrent calls with the same email end with a
        single stored user, and every caller gets that user back.

        Args:
            user: The user to insert if absent

        Returns:
            The stored user for ``user.email``, or None if the insert
            lost to a different unique column (the handle)
        """
        pass

    @abstractmethod
    async def update_fields(
        self, user_id: UserId, values: Mapping[str, Any]
    ) -> Optional[User]:
        """Set scalar fields (profile, images, ban flag) on a user.

        Args:
            user_id: The user to update
            values: Column name to new value

        Returns:
            The updated user, or None if the user does not exist
        """
        pass

    @abstractmethod
    async def add_following(self, user_id: UserId, target_id: UserId) -> bool:
        """Add ``target_id`` to the user's following set.

        Returns:
            True if the edge was added, False if it already existed
            or the user does not exist
        """
        pass

    @abstractmethod
    async def add_follower(self, user_id: UserId, follower_id: UserId) -> bool:
        """Add ``follower_id`` to the user's followers set.

        Returns:
            True if the edge was added, False if it already existed
            or the user does not exist
        """
        pass

    @abstractmethod
    async def remove_following(self, user_id: UserId, target_id: UserId) -> bool:
        """Remove ``target_id`` from the user's following set.

        Returns:
            True if an edge was removed
        """
        pass

    @abstractmethod
    async def remove_follower(self, user_id: UserId, follower_id: UserId) -> bool:
        """Remove ``follower_id`` from the user's followers set.

        Returns:
            True if an edge was removed
        """
        pass
