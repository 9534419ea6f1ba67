"""Repository interfaces for LinkUp domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from linkup.domain.repository.comment import CommentRepository
from linkup.domain.repository.notification import NotificationRepository
from linkup.domain.repository.post import PostRepository
from linkup.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "NotificationRepository",
]
