"""Unfollow user use case."""

from uuid import UUID

from pydantic import BaseModel

from linkup.domain.service import GraphService
from linkup.domain.value import UserId


class UnfollowRequest(BaseModel):
    """Unfollow request."""

    actor_id: str  # Current user ID
    target_id: str  # User to unfollow


class UnfollowResponse(BaseModel):
    """Unfollow response."""

    message: str
    removed: bool  # False when there was nothing to remove


class UnfollowUserUseCase:
    """Use case for unfollowing a user. Idempotent."""

    def __init__(self, graph_service: GraphService) -> None:
        self.graph_service = graph_service

    async def execute(self, request: UnfollowRequest) -> UnfollowResponse:
        removed = await self.graph_service.unfollow(
            UserId(UUID(request.actor_id)), UserId(UUID(request.target_id))
        )
        return UnfollowResponse(message="Unfollowed", removed=removed)
