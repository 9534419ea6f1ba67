"""Domain value objects for LinkUp."""

from linkup.domain.value.identifiers import (
    CommentId,
    NotificationId,
    PostId,
    UserId,
)
from linkup.domain.value.types import (
    Handle,
    NotificationType,
    UserRole,
    VerifiedIdentity,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "NotificationId",
    # Types
    "Handle",
    "NotificationType",
    "UserRole",
    "VerifiedIdentity",
]
