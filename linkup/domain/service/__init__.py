"""Domain services."""

from .auth_service import AuthService, IdentityVerifier
from .base import Service
from .comment_service import CommentService
from .graph_service import GraphService
from .image_service import ImageHostClient, ImageService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .password_service import PasswordService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "AuthService",
    "CommentService",
    "GraphService",
    "IdentityVerifier",
    "ImageHostClient",
    "ImageService",
    "JWTService",
    "NotificationService",
    "PasswordService",
    "PostService",
    "Service",
    "UserService",
]
