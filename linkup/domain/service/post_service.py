"""Post domain service."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError

from linkup.domain.error import (
    ForbiddenError,
    InvalidOperationError,
    NotAuthorizedError,
    NotFoundError,
)
from linkup.domain.model import Post, User
from linkup.domain.repository import CommentRepository, PostRepository
from linkup.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository (cascade on delete)
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def create_post(
        self, author_id: UserId, content: str, image_url: str | None = None
    ) -> Post:
        """Create a post.

        Args:
            author_id: Author user ID
            content: Text content (may be empty when an image is attached)
            image_url: URL returned by the image host

        Returns:
            Saved post

        Raises:
            InvalidOperationError: If the post has neither text nor image
        """
        with logfire.span(
            "post_service.create_post",
            author_id=str(author_id),
            has_image=image_url is not None,
        ):
            now = datetime.now(timezone.utc)
            try:
                post = Post(
                    id=PostId(uuid4()),
                    author_id=author_id,
                    content=content,
                    image_url=image_url,
                    created_at=now,
                    updated_at=now,
                )
            except ValidationError as e:
                raise InvalidOperationError(_first_error(e)) from e

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), author_id=str(author_id))
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_posts(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> list[Post]:
        """All posts, newest first."""
        with logfire.span("post_service.list_posts", limit=limit, offset=offset):
            return await self.post_repository.find_all(limit=limit, offset=offset)

    async def list_posts_by_author(self, author_id: UserId) -> list[Post]:
        with logfire.span("post_service.list_posts_by_author", author_id=str(author_id)):
            return await self.post_repository.find_by_author(author_id)

    async def edit_post(self, post_id: PostId, editor_id: UserId, content: str) -> Post:
        """Replace a post's text.

        Args:
            post_id: Post to edit
            editor_id: User making the edit (must be the author)
            content: New text

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the editor is not the author
            InvalidOperationError: If the edit would leave the post empty
        """
        with logfire.span(
            "post_service.edit_post", post_id=str(post_id), editor_id=str(editor_id)
        ):
            post = await self.get_post(post_id)

            if post.author_id != editor_id:
                logfire.warn(
                    "Edit by non-author", post_id=str(post_id), editor_id=str(editor_id)
                )
                raise NotAuthorizedError("post", str(post_id), str(editor_id))

            try:
                Post.model_validate({**post.model_dump(), "content": content})
            except ValidationError as e:
                raise InvalidOperationError(_first_error(e)) from e

            updated = await self.post_repository.update_content(post_id, content)
            if updated is None:
                # Deleted between the read and the update
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post edited", post_id=str(post_id))
            return updated

    async def delete_post(self, post_id: PostId, actor: User) -> int:
        """Delete a post together with its comments.

        Args:
            post_id: Post to delete
            actor: Deleting user (the author or an admin)

        Returns:
            Number of comments removed with the post

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the actor is neither the author nor an admin
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), actor_id=str(actor.id)
        ):
            post = await self.get_post(post_id)

            if post.author_id != actor.id and not actor.is_admin:
                logfire.warn(
                    "Delete by non-author", post_id=str(post_id), actor_id=str(actor.id)
                )
                raise ForbiddenError("Only the author or an admin can delete a post")

            removed_comments = await self.comment_repository.delete_by_post(post_id)
            await self.post_repository.delete(post_id)

            logfire.info(
                "Post deleted",
                post_id=str(post_id),
                removed_comments=removed_comments,
                by_admin=post.author_id != actor.id,
            )
            return removed_comments


def _first_error(error: ValidationError) -> str:
    errors = error.errors()
    if not errors:
        return str(error)
    return str(errors[0]["msg"]).removeprefix("Value error, ")
