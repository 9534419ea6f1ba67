"""User profile use cases."""

from .update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from .update_profile_image import (
    UpdateProfileImageRequest,
    UpdateProfileImageResponse,
    UpdateProfileImageUseCase,
)

__all__ = [
    "UpdateProfileImageRequest",
    "UpdateProfileImageResponse",
    "UpdateProfileImageUseCase",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
]
