"""Like post use case."""

from uuid import UUID

from pydantic import BaseModel

from linkup.domain.service import GraphService
from linkup.domain.value import PostId, UserId


class LikePostRequest(BaseModel):
    """Like post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID


class LikePostResponse(BaseModel):
    """Like post response."""

    message: str
    created: bool  # False when the user had already liked the post


class LikePostUseCase:
    """Use case for liking a post. Liking twice is a no-op."""

    def __init__(self, graph_service: GraphService) -> None:
        self.graph_service = graph_service

    async def execute(self, request: LikePostRequest) -> LikePostResponse:
        """Execute like.

        Raises:
            NotFoundError: If the post does not exist
        """
        created = await self.graph_service.like(
            UserId(UUID(request.user_id)), PostId(UUID(request.post_id))
        )
        return LikePostResponse(message="Liked", created=created)
