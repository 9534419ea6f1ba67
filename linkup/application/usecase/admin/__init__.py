"""Admin moderation use cases."""

from .ban_user import BanUserRequest, BanUserUseCase
from .remove_post import RemovePostRequest, RemovePostUseCase

__all__ = [
    "BanUserRequest",
    "BanUserUseCase",
    "RemovePostRequest",
    "RemovePostUseCase",
]
