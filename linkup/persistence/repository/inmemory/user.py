"""In-memory user repository for testing."""

from typing import Any, Mapping, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from linkup.domain.model.user import User
from linkup.domain.repository.user import UserRepository
from linkup.domain.value import UserId
from linkup.domain.value.types import Handle

from .store import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._db.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        return [self._db.users[u] for u in user_ids if u in self._db.users]

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self._db.users.values():
            if user.email == email:
                return user
        return None

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        for user in self._db.users.values():
            if user.handle == handle:
                return user
        return None

    async def create(self, user: User) -> User:
        """Insert a user.

        Raises:
            IntegrityError: If the email or handle is already taken
        """
        if self._conflicts(user):
            raise IntegrityError("Duplicate user", None, Exception())
        self._db.users[user.id] = user
        return user

    async def create_or_get_by_email(self, user: User) -> Optional[User]:
        if not self._conflicts(user):
            self._db.users[user.id] = user
        return await self.find_by_email(user.email)

    async def update_fields(
        self, user_id: UserId, values: Mapping[str, Any]
    ) -> Optional[User]:
        user = self._db.users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update=dict(values))
        self._db.users[user_id] = updated
        return updated

    async def add_following(self, user_id: UserId, target_id: UserId) -> bool:
        return self._add(user_id, "following", target_id)

    async def add_follower(self, user_id: UserId, follower_id: UserId) -> bool:
        return self._add(user_id, "followers", follower_id)

    async def remove_following(self, user_id: UserId, target_id: UserId) -> bool:
        return self._remove(user_id, "following", target_id)

    async def remove_follower(self, user_id: UserId, follower_id: UserId) -> bool:
        return self._remove(user_id, "followers", follower_id)

    def _conflicts(self, user: User) -> bool:
        return user.id in self._db.users or any(
            u.email == user.email or u.handle == user.handle
            for u in self._db.users.values()
        )

    def _add(self, user_id: UserId, field: str, member: UserId) -> bool:
        user = self._db.users.get(user_id)
        if user is None or member in getattr(user, field):
            return False
        members = [*getattr(user, field), member]
        self._db.users[user_id] = user.model_copy(update={field: members})
        return True

    def _remove(self, user_id: UserId, field: str, member: UserId) -> bool:
        user = self._db.users.get(user_id)
        if user is None or member not in getattr(user, field):
            return False
        members = [m for m in getattr(user, field) if m != member]
        self._db.users[user_id] = user.model_copy(update={field: members})
        return True
