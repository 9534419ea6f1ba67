"""Follow user use case."""

from uuid import UUID

from pydantic import BaseModel

from linkup.domain.service import GraphService
from linkup.domain.value import UserId


class FollowRequest(BaseModel):
    """Follow request."""

    actor_id: str  # Current user ID
    target_id: str  # User to follow


class FollowResponse(BaseModel):
    """Follow response."""

    message: str
    created: bool  # False when already following


class FollowUserUseCase:
    """Use case for following another user."""

    def __init__(self, graph_service: GraphService) -> None:
        self.graph_service = graph_service

    async def execute(self, request: FollowRequest) -> FollowResponse:
        """Execute follow.

        Raises:
            InvalidOperationError: If the user tries to follow themselves
            NotFoundError: If the target does not exist
        """
        created = await self.graph_service.follow(
            UserId(UUID(request.actor_id)), UserId(UUID(request.target_id))
        )
        return FollowResponse(message="Followed", created=created)
