"""Admin moderation routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from linkup.application.usecase.admin import (
    BanUserRequest,
    BanUserUseCase,
    RemovePostRequest,
    RemovePostUseCase,
)
from linkup.application.usecase.post import DeletePostResponse
from linkup.application.usecase.views import MessageResponse
from linkup.interface.api.dependencies import AdminUser

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.put("/users/{user_id}/ban", response_model=MessageResponse)
async def ban_user(
    user_id: UUID,
    admin: AdminUser,
    ban_user_use_case: FromDishka[BanUserUseCase],
) -> MessageResponse:
    """Ban an account."""
    return await ban_user_use_case.execute(BanUserRequest(user_id=str(user_id)), admin)


@router.delete("/posts/{post_id}", response_model=DeletePostResponse)
async def remove_post(
    post_id: UUID,
    admin: AdminUser,
    remove_post_use_case: FromDishka[RemovePostUseCase],
) -> DeletePostResponse:
    """Remove any post and its comments."""
    return await remove_post_use_case.execute(
        RemovePostRequest(post_id=str(post_id)), admin
    )
