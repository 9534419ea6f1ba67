"""Follow use cases."""

from .follow_user import FollowRequest, FollowResponse, FollowUserUseCase
from .unfollow_user import UnfollowRequest, UnfollowResponse, UnfollowUserUseCase

__all__ = [
    "FollowRequest",
    "FollowResponse",
    "FollowUserUseCase",
    "UnfollowRequest",
    "UnfollowResponse",
    "UnfollowUserUseCase",
]
