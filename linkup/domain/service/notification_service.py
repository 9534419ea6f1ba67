"""Notification domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from linkup.domain.model import Notification
from linkup.domain.repository import NotificationRepository
from linkup.domain.value import NotificationId, NotificationType, PostId, UserId

from .base import Service


class NotificationService(Service):
    """Domain service for notification operations."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify(
        self,
        type: NotificationType,
        sender_id: UserId,
        receiver_id: UserId,
        post_id: PostId | None = None,
    ) -> Notification | None:
        """Record that ``sender_id`` acted on something ``receiver_id`` owns.

        Self-actions are skipped.

        Args:
            type: Kind of action
            sender_id: Acting user
            receiver_id: User to notify
            post_id: Related post (likes and comments)

        Returns:
            Saved notification, or None if nothing was recorded
        """
        if sender_id == receiver_id:
            return None

        with logfire.span(
            "notification_service.notify",
            type=type.value,
            sender_id=str(sender_id),
            receiver_id=str(receiver_id),
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                type=type,
                sender_id=sender_id,
                receiver_id=receiver_id,
                post_id=post_id,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info("Notification created", notification_id=str(saved.id))
            return saved

    async def list_for(self, receiver_id: UserId) -> list[Notification]:
        """Notifications for a user, newest first."""
        with logfire.span("notification_service.list_for", receiver_id=str(receiver_id)):
            return await self.notification_repository.find_by_receiver(receiver_id)

    async def mark_all_read(self, receiver_id: UserId) -> int:
        """Mark every notification of a user as read.

        Returns:
            Number of notifications that were unread
        """
        with logfire.span(
            "notification_service.mark_all_read", receiver_id=str(receiver_id)
        ):
            updated = await self.notification_repository.mark_all_read(receiver_id)
            logfire.info(
                "Notifications marked read", receiver_id=str(receiver_id), updated=updated
            )
            return updated
