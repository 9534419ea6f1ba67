"""PostgreSQL implementation of User repository."""

from typing import Any, List, Mapping, Optional, Sequence

from sqlalchemy import Column, func, insert, literal, select, update
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.domain.model import User
from linkup.domain.repository import UserRepository
from linkup.domain.value import UserId
from linkup.domain.value.types import Handle
from linkup.persistence.mappers import row_to_user, user_to_dict
from linkup.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users in one query."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by handle."""
        stmt = select(users_table).where(users_table.c.handle == handle.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def create(self, user: User) -> User:
        """Insert a user (raises IntegrityError on duplicate email/handle)."""
        stmt = insert(users_table).values(**user_to_dict(user))
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def create_or_get_by_email(self, user: User) -> Optional[User]:
        """Insert a user unless one exists, then read back by email."""
        stmt = (
            pg_insert(users_table)
            .values(**user_to_dict(user))
            .on_conflict_do_nothing()
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_email(user.email)

    async def update_fields(
        self, user_id: UserId, values: Mapping[str, Any]
    ) -> Optional[User]:
        """Set scalar fields on a user and return the updated row."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(**values)
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_user(row._asdict()) if row else None

    async def add_following(self, user_id: UserId, target_id: UserId) -> bool:
        return await self._add_to_set(users_table.c.following, user_id, target_id)

    async def add_follower(self, user_id: UserId, follower_id: UserId) -> bool:
        return await self._add_to_set(users_table.c.followers, user_id, follower_id)

    async def remove_following(self, user_id: UserId, target_id: UserId) -> bool:
        return await self._remove_from_set(users_table.c.following, user_id, target_id)

    async def remove_follower(self, user_id: UserId, follower_id: UserId) -> bool:
        return await self._remove_from_set(
            users_table.c.followers, user_id, follower_id
        )

    async def _add_to_set(self, column: Column, user_id: UserId, member: UserId) -> bool:
        """Append ``member`` to an array column unless already present.

        The containment guard and the append run in one UPDATE, so the
        rowcount tells whether this call created the edge.
        """
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .where(~column.contains([member]))
            .values(
                {
                    column: func.array_append(
                        column, literal(member, UUID), type_=ARRAY(UUID)
                    )
                }
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def _remove_from_set(
        self, column: Column, user_id: UserId, member: UserId
    ) -> bool:
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .where(column.contains([member]))
            .values(
                {
                    column: func.array_remove(
                        column, literal(member, UUID), type_=ARRAY(UUID)
                    )
                }
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
