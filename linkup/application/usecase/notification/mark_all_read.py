"""Mark all notifications read use case."""

from uuid import UUID

from pydantic import BaseModel

from linkup.domain.service import NotificationService
from linkup.domain.value import UserId


class MarkAllReadRequest(BaseModel):
    """Mark all read request."""

    user_id: str  # Current user ID


class MarkAllReadResponse(BaseModel):
    """Mark all read response."""

    message: str
    updated: int  # Notifications that were unread


class MarkAllReadUseCase:
    """Use case for marking every notification read. Idempotent."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkAllReadRequest) -> MarkAllReadResponse:
        updated = await self.notification_service.mark_all_read(
            UserId(UUID(request.user_id))
        )
        return MarkAllReadResponse(message="All read", updated=updated)
