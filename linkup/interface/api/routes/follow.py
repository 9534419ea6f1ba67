"""Follow routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from linkup.application.usecase.follow import (
    FollowRequest,
    FollowResponse,
    FollowUserUseCase,
    UnfollowRequest,
    UnfollowResponse,
    UnfollowUserUseCase,
)
from linkup.interface.api.dependencies import CurrentUser

router = APIRouter(tags=["follow"], route_class=DishkaRoute)


@router.post("/follow/{user_id}", response_model=FollowResponse)
async def follow_user(
    user_id: UUID,
    user: CurrentUser,
    follow_use_case: FromDishka[FollowUserUseCase],
) -> FollowResponse:
    """Follow a user. Following again is a no-op.

    Returns 400 InvalidOperation for a self-follow and 404 if the target
    does not exist.
    """
    return await follow_use_case.execute(
        FollowRequest(actor_id=str(user.id), target_id=str(user_id))
    )


@router.post("/unfollow/{user_id}", response_model=UnfollowResponse)
async def unfollow_user(
    user_id: UUID,
    user: CurrentUser,
    unfollow_use_case: FromDishka[UnfollowUserUseCase],
) -> UnfollowResponse:
    """Unfollow a user. Idempotent."""
    return await unfollow_use_case.execute(
        UnfollowRequest(actor_id=str(user.id), target_id=str(user_id))
    )
