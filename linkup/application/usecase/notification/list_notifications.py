"""List notifications use case."""

from uuid import UUID

from pydantic import BaseModel

from linkup.application.usecase.views import NotificationView
from linkup.domain.service import NotificationService
from linkup.domain.value import UserId


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # Current user ID


class ListNotificationsResponse(BaseModel):
    """Notifications, newest first."""

    notifications: list[NotificationView]


class ListNotificationsUseCase:
    """Use case for the current user's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        notifications = await self.notification_service.list_for(
            UserId(UUID(request.user_id))
        )
        return ListNotificationsResponse(
            notifications=[
                NotificationView.from_notification(n) for n in notifications
            ],
        )
