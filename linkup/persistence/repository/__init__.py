"""PostgreSQL repository implementations."""

from linkup.persistence.repository.comment import PostgresCommentRepository
from linkup.persistence.repository.notification import PostgresNotificationRepository
from linkup.persistence.repository.post import PostgresPostRepository
from linkup.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresNotificationRepository",
]
