"""Comment domain service."""

from collections import defaultdict
from datetime import datetime, timezone
from typing import Sequence
from uuid import uuid4

import logfire

from linkup.domain.error import NotAuthorizedError, NotFoundError
from linkup.domain.model import Comment
from linkup.domain.repository import CommentRepository, PostRepository
from linkup.domain.value import CommentId, NotificationType, PostId, UserId

from .base import Service
from .notification_service import NotificationService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            notification_service: Notification domain service
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.notification_service = notification_service

    async def add_comment(self, post_id: PostId, author_id: UserId, text: str) -> Comment:
        """Comment on a post and notify the post's author.

        Args:
            post_id: Parent post
            author_id: Commenting user
            text: Comment text

        Returns:
            Saved comment

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "comment_service.add_comment", post_id=str(post_id), author_id=str(author_id)
        ):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Comment on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                text=text,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.comment_repository.save(comment)

            await self.notification_service.notify(
                NotificationType.COMMENT, author_id, post.author_id, post_id
            )
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def delete_comment(self, comment_id: CommentId, actor_id: UserId) -> None:
        """Delete a comment.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the comment's author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            comment = await self.get_comment(comment_id)
            if comment.author_id != actor_id:
                logfire.warn(
                    "Delete by non-author",
                    comment_id=str(comment_id),
                    actor_id=str(actor_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(actor_id))

            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def comments_by_post(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, list[Comment]]:
        """Comments of several posts, grouped by post, oldest first."""
        grouped: dict[PostId, list[Comment]] = defaultdict(list)
        if not post_ids:
            return grouped
        for comment in await self.comment_repository.find_by_posts(post_ids):
            grouped[comment.post_id].append(comment)
        return grouped
