"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from linkup.domain.model.comment import Comment
from linkup.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_posts(self, post_ids: Sequence[PostId]) -> List[Comment]:
        """Find the comments of several posts, oldest first.

        Args:
            post_ids: Parent post IDs

        Returns:
            Comments on any of the posts
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Args:
            post_id: The parent post ID

        Returns:
            Number of comments deleted
        """
        pass
