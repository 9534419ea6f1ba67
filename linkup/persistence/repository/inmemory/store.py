"""Shared state for the in-memory repositories.

Repositories are created per request, so the rows live in one object that
outlives them (one per test container).
"""

from linkup.domain.model import Comment, Notification, Post, User
from linkup.domain.value import CommentId, NotificationId, PostId, UserId


class InMemoryDatabase:
    """Tables as insertion-ordered dicts keyed by ID."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.notifications: dict[NotificationId, Notification] = {}
