"""In-memory post repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from linkup.domain.model.post import Post
from linkup.domain.repository.post import PostRepository
from linkup.domain.value import PostId, UserId

from .store import InMemoryDatabase


def newest_first(posts: list[Post]) -> list[Post]:
    # Same ordering as the SQL: created_at, then id, descending
    return sorted(posts, key=lambda p: (p.created_at, p.id), reverse=True)


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        return self._db.posts.get(post_id)

    async def find_all(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> list[Post]:
        posts = newest_first(list(self._db.posts.values()))[offset:]
        return posts if limit is None else posts[:limit]

    async def find_by_author(self, author_id: UserId) -> list[Post]:
        return newest_first(
            [p for p in self._db.posts.values() if p.author_id == author_id]
        )

    async def save(self, post: Post) -> Post:
        self._db.posts[post.id] = post
        return post

    async def update_content(self, post_id: PostId, content: str) -> Optional[Post]:
        post = self._db.posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(
            update={"content": content, "updated_at": datetime.now(timezone.utc)}
        )
        self._db.posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        if self._db.posts.pop(post_id, None) is None:
            return False
        # Mirror ON DELETE SET NULL on notifications.post_id
        for nid, notification in list(self._db.notifications.items()):
            if notification.post_id == post_id:
                self._db.notifications[nid] = notification.model_copy(
                    update={"post_id": None}
                )
        return True

    async def add_like(self, post_id: PostId, user_id: UserId) -> bool:
        post = self._db.posts.get(post_id)
        if post is None or user_id in post.likes:
            return False
        self._db.posts[post_id] = post.model_copy(
            update={"likes": [*post.likes, user_id]}
        )
        return True
