"""Notification entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from linkup.domain.model.common import DomainModel
from linkup.domain.value import NotificationId, NotificationType, PostId, UserId


class Notification(DomainModel):
    """Record of one user's action on another user's content or graph.

    Business rules:
    - Sender and receiver are always different users
    - Created unread; the only later change is marking it read
    - ``post_id`` is set for like/comment notifications
    """

    id: NotificationId
    type: NotificationType
    sender_id: UserId
    receiver_id: UserId
    post_id: Optional[PostId] = None
    read: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def validate_not_self(self) -> "Notification":
        """Self-actions never produce a notification."""
        if self.sender_id == self.receiver_id:
            raise ValueError("Notification sender and receiver must differ")
        return self
