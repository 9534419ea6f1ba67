"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from linkup.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
)
from linkup.application.usecase.views import CommentView, MessageResponse
from linkup.interface.api.dependencies import CurrentUser

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


@router.get("/{comment_id}", response_model=CommentView)
async def get_comment(
    comment_id: UUID,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentView:
    """A single comment."""
    return await get_comment_use_case.execute(
        GetCommentRequest(comment_id=str(comment_id))
    )


@router.delete("/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: UUID,
    user: CurrentUser,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> MessageResponse:
    """Delete one of your own comments."""
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=str(comment_id), user_id=str(user.id))
    )
