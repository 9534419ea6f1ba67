"""Update user profile use case."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from linkup.application.usecase.views import UserView
from linkup.domain.service import UserService
from linkup.domain.value import UserId


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    Only fields present in the request are changed; send null to clear one.
    """

    user_id: str  # Current user ID
    display_name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    location: str | None = Field(default=None, max_length=100)
    birth_date: date | None = None


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    message: str
    user: UserView


class UpdateProfileUseCase:
    """Use case for editing the current user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute profile update.

        Raises:
            NotFoundError: If the user does not exist
        """
        values = request.model_dump(
            include=request.model_fields_set - {"user_id"}
        )
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)), values
        )
        return UpdateProfileResponse(
            message="Profile updated", user=UserView.from_user(user)
        )
