"""Response models shared by several use cases.

Domain entities never leave the application layer directly; they are
converted to these views (which, for users, drop the password hash).
"""

from datetime import date, datetime

from pydantic import BaseModel

from linkup.domain.model import Comment, Notification, Post, User
from linkup.domain.value import NotificationType, PostId, UserId, UserRole
from linkup.domain.value.types import Handle


class UserView(BaseModel):
    """Public representation of an account."""

    user_id: str
    handle: Handle
    email: str
    role: UserRole
    banned: bool
    display_name: str | None
    bio: str | None
    location: str | None
    birth_date: date | None
    avatar_url: str | None
    cover_url: str | None
    followers: list[str]
    following: list[str]
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            user_id=str(user.id),
            handle=user.handle,
            email=user.email,
            role=user.role,
            banned=user.banned,
            display_name=user.display_name,
            bio=user.bio,
            location=user.location,
            birth_date=user.birth_date,
            avatar_url=user.avatar_url,
            cover_url=user.cover_url,
            followers=[str(u) for u in user.followers],
            following=[str(u) for u in user.following],
            created_at=user.created_at,
        )


class AuthorSummary(BaseModel):
    """Author details embedded in posts."""

    user_id: str
    handle: Handle | None
    display_name: str | None
    avatar_url: str | None

    @classmethod
    def for_user(cls, user_id: UserId, user: User | None) -> "AuthorSummary":
        # Authors are never deleted, but tolerate a missing row
        if user is None:
            return cls(user_id=str(user_id), handle=None, display_name=None, avatar_url=None)
        return cls(
            user_id=str(user.id),
            handle=user.handle,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
        )


class CommentView(BaseModel):
    """Comment in responses."""

    comment_id: str
    post_id: str
    author_id: str
    text: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            text=comment.text,
            created_at=comment.created_at,
        )


class PostView(BaseModel):
    """Post in responses, with its author and comments (oldest first)."""

    post_id: str
    content: str
    image_url: str | None
    author: AuthorSummary
    likes: list[str]
    comments: list[CommentView]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(
        cls,
        post: Post,
        authors: dict[UserId, User],
        comments: dict[PostId, list[Comment]],
    ) -> "PostView":
        return cls(
            post_id=str(post.id),
            content=post.content,
            image_url=post.image_url,
            author=AuthorSummary.for_user(post.author_id, authors.get(post.author_id)),
            likes=[str(u) for u in post.likes],
            comments=[CommentView.from_comment(c) for c in comments.get(post.id, [])],
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class NotificationView(BaseModel):
    """Notification in responses."""

    notification_id: str
    type: NotificationType
    sender_id: str
    receiver_id: str
    post_id: str | None
    read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationView":
        return cls(
            notification_id=str(notification.id),
            type=notification.type,
            sender_id=str(notification.sender_id),
            receiver_id=str(notification.receiver_id),
            post_id=str(notification.post_id) if notification.post_id else None,
            read=notification.read,
            created_at=notification.created_at,
        )


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
