"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of with SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from linkup.domain.model import Comment, Notification, Post, User
from linkup.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
    UserRole,
)
from linkup.domain.value.types import Handle


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _uuid_list(values: Optional[Iterable[Any]]) -> list[UUID]:
    return [_uuid(v) for v in values or []]


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        email=row["email"],
        password_hash=row.get("password_hash"),
        role=UserRole(row["role"]),
        banned=row["banned"],
        display_name=row.get("display_name"),
        bio=row.get("bio"),
        location=row.get("location"),
        birth_date=row.get("birth_date"),
        avatar_url=row.get("avatar_url"),
        cover_url=row.get("cover_url"),
        followers=[UserId(u) for u in _uuid_list(row.get("followers"))],
        following=[UserId(u) for u in _uuid_list(row.get("following"))],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion
    """
    data = user.model_dump()
    data["handle"] = user.handle.root
    data["role"] = user.role.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        image_url=row.get("image_url"),
        likes=[UserId(u) for u in _uuid_list(row.get("likes"))],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row["text"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    post_id = row.get("post_id")
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        type=NotificationType(row["type"]),
        sender_id=UserId(_uuid(row["sender_id"])),
        receiver_id=UserId(_uuid(row["receiver_id"])),
        post_id=PostId(_uuid(post_id)) if post_id else None,
        read=row["read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
