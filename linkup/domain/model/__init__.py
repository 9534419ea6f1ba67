"""Domain model entities for LinkUp."""

from linkup.domain.model.comment import Comment
from linkup.domain.model.notification import Notification
from linkup.domain.model.post import Post
from linkup.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Notification",
]
