"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from linkup.domain.model.post import Post
from linkup.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> List[Post]:
        """Find posts, newest first.

        Args:
            limit: Maximum number of posts to return (None for all)
            offset: Number of posts to skip

        Returns:
            Posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find all posts by an author, newest first.

        Args:
            author_id: The author's user ID

        Returns:
            Posts by the author
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_content(self, post_id: PostId, content: str) -> Optional[Post]:
        """Replace the text content of a post.

        Args:
            post_id: ID of the post to update
            content: New text content

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def add_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Atomically add a user to the post's like set.

        Args:
            post_id: The post ID
            user_id: The liking user

        Returns:
            True if the like was added, False if the user already liked
            the post or the post doesn't exist
        """
        pass
