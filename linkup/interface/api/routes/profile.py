"""Profile routes."""

from datetime import date

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, UploadFile
from pydantic import BaseModel, Field

from linkup.application.usecase.user import (
    UpdateProfileImageRequest,
    UpdateProfileImageResponse,
    UpdateProfileImageUseCase,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from linkup.interface.api.dependencies import CurrentUser

router = APIRouter(prefix="/profile", tags=["profile"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the profile.

    Unknown keys (role, banned, email, ...) are ignored.
    """

    display_name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    location: str | None = Field(default=None, max_length=100)
    birth_date: date | None = None


@router.put("", response_model=UpdateProfileResponse)
async def update_profile(
    request: UpdateProfileAPIRequest,
    user: CurrentUser,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
) -> UpdateProfileResponse:
    """Update display name, bio, location or birth date."""
    use_case_request = UpdateProfileRequest(
        user_id=str(user.id),
        **request.model_dump(include=request.model_fields_set),
    )
    return await update_profile_use_case.execute(use_case_request)


@router.put("/avatar", response_model=UpdateProfileImageResponse)
async def update_avatar(
    user: CurrentUser,
    use_case: FromDishka[UpdateProfileImageUseCase],
    image: UploadFile = File(...),
) -> UpdateProfileImageResponse:
    """Upload a new avatar image. Returns the hosted URL."""
    return await use_case.execute(
        UpdateProfileImageRequest(
            user_id=str(user.id),
            kind="avatar",
            data=await image.read(),
            filename=image.filename,
        )
    )


@router.put("/cover", response_model=UpdateProfileImageResponse)
async def update_cover(
    user: CurrentUser,
    use_case: FromDishka[UpdateProfileImageUseCase],
    image: UploadFile = File(...),
) -> UpdateProfileImageResponse:
    """Upload a new cover image. Returns the hosted URL."""
    return await use_case.execute(
        UpdateProfileImageRequest(
            user_id=str(user.id),
            kind="cover",
            data=await image.read(),
            filename=image.filename,
        )
    )
