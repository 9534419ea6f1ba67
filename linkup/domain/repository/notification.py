"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List

from linkup.domain.model.notification import Notification
from linkup.domain.value import UserId


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Notifications are append-only apart from the read flag.
    """

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def find_by_receiver(self, receiver_id: UserId) -> List[Notification]:
        """Find all notifications for a user, newest first.

        Args:
            receiver_id: The receiving user

        Returns:
            Notifications ordered by created_at descending
        """
        pass

    @abstractmethod
    async def mark_all_read(self, receiver_id: UserId) -> int:
        """Mark every unread notification of a user as read.

        Args:
            receiver_id: The receiving user

        Returns:
            Number of notifications that changed state
        """
        pass
