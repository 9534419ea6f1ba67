"""Admin remove post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from linkup.application.usecase.post.delete_post import DeletePostResponse
from linkup.domain.model import User
from linkup.domain.service import PostService
from linkup.domain.value import PostId


class RemovePostRequest(BaseModel):
    """Remove post request."""

    post_id: str  # UUID string


class RemovePostUseCase:
    """Admin use case for removing any post and its comments."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: RemovePostRequest, admin: User) -> DeletePostResponse:
        """Execute moderation removal.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("remove_post", admin_id=str(admin.id), post_id=request.post_id):
            removed = await self.post_service.delete_post(
                PostId(UUID(request.post_id)), admin
            )
        return DeletePostResponse(message="Post removed", removed_comments=removed)
