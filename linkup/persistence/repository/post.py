"""PostgreSQL implementation of Post repository."""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, func, insert, literal, select, update
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.domain.model import Post
from linkup.domain.repository import PostRepository
from linkup.domain.value import PostId, UserId
from linkup.persistence.mappers import post_to_dict, row_to_post
from linkup.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_all(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> List[Post]:
        """Find posts, newest first; ``limit=None`` returns every post."""
        stmt = (
            select(posts_table)
            .order_by(posts_table.c.created_at.desc(), posts_table.c.id.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find all posts by an author, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(posts_table.c.created_at.desc(), posts_table.c.id.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Insert a post."""
        stmt = insert(posts_table).values(**post_to_dict(post))
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def update_content(self, post_id: PostId, content: str) -> Optional[Post]:
        """Replace a post's content."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(content=content, updated_at=datetime.now(timezone.utc))
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_post(row._asdict()) if row else None

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def add_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Append the user to ``likes`` unless already present (one UPDATE)."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .where(~posts_table.c.likes.contains([user_id]))
            .values(
                likes=func.array_append(
                    posts_table.c.likes, literal(user_id, UUID), type_=ARRAY(UUID)
                )
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
