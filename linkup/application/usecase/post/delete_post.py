"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from linkup.domain.model import User
from linkup.domain.service import PostService
from linkup.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str
    removed_comments: int


class DeletePostUseCase:
    """Use case for deleting a post and its comments."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest, actor: User) -> DeletePostResponse:
        """Execute delete post.

        Args:
            request: Post to delete
            actor: Acting user (author or admin)

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the actor is neither author nor admin
        """
        removed = await self.post_service.delete_post(
            PostId(UUID(request.post_id)), actor
        )
        return DeletePostResponse(message="Post deleted", removed_comments=removed)
