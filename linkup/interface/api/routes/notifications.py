"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from linkup.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkAllReadUseCase,
)
from linkup.application.usecase.views import NotificationView
from linkup.interface.api.dependencies import CurrentUser

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=list[NotificationView])
async def list_notifications(
    user: CurrentUser,
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
) -> list[NotificationView]:
    """Current user's notifications, newest first."""
    result = await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=str(user.id))
    )
    return result.notifications


@router.put("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    user: CurrentUser,
    mark_all_read_use_case: FromDishka[MarkAllReadUseCase],
) -> MarkAllReadResponse:
    """Mark every notification read. Idempotent."""
    return await mark_all_read_use_case.execute(
        MarkAllReadRequest(user_id=str(user.id))
    )
