"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from linkup.domain.model.comment import Comment
from linkup.domain.repository.comment import CommentRepository
from linkup.domain.value import CommentId, PostId

from .store import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._db.comments.get(comment_id)

    async def find_by_posts(self, post_ids: Sequence[PostId]) -> list[Comment]:
        wanted = set(post_ids)
        comments = [c for c in self._db.comments.values() if c.post_id in wanted]
        return sorted(comments, key=lambda c: (c.created_at, c.id))

    async def save(self, comment: Comment) -> Comment:
        self._db.comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        return self._db.comments.pop(comment_id, None) is not None

    async def delete_by_post(self, post_id: PostId) -> int:
        doomed = [cid for cid, c in self._db.comments.items() if c.post_id == post_id]
        for cid in doomed:
            del self._db.comments[cid]
        return len(doomed)
