"""Update avatar or cover image use case."""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel

from linkup.domain.service import ImageService, UserService
from linkup.domain.value import UserId


class UpdateProfileImageRequest(BaseModel):
    """Update profile image request."""

    user_id: str  # Current user ID
    kind: Literal["avatar", "cover"]
    data: bytes
    filename: str | None = None


class UpdateProfileImageResponse(BaseModel):
    """Hosted URL of the new image."""

    url: str


class UpdateProfileImageUseCase:
    """Use case for replacing the current user's avatar or cover."""

    def __init__(self, image_service: ImageService, user_service: UserService) -> None:
        """Initialize update profile image use case.

        Args:
            image_service: Image relay service
            user_service: User domain service
        """
        self.image_service = image_service
        self.user_service = user_service

    async def execute(
        self, request: UpdateProfileImageRequest
    ) -> UpdateProfileImageResponse:
        """Upload the image, then store its URL on the user.

        Raises:
            UploadFailedError: If the image host fails
        """
        user_id = UserId(UUID(request.user_id))
        url = await self.image_service.relay(request.data, request.filename)

        if request.kind == "avatar":
            await self.user_service.set_avatar_url(user_id, url)
        else:
            await self.user_service.set_cover_url(user_id, url)

        return UpdateProfileImageResponse(url=url)
