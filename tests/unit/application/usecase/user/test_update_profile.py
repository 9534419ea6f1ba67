"""Unit tests for profile use cases."""

from datetime import date

import pytest

from linkup.application.usecase.user import (
    UpdateProfileImageRequest,
    UpdateProfileImageUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from linkup.domain.error import UploadFailedError
from linkup.domain.service import UserService
from linkup.domain.value.types import Handle
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateProfileUseCase:
    """Tests for UpdateProfileUseCase."""

    @pytest.mark.asyncio
    async def test_only_sent_fields_change(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        alice = await user_service.register(Handle(root="alice"), "a@x.com", "hash")
        await user_service.update_profile(alice.id, {"location": "Lisbon"})
        update_profile = await unit_env.get(UpdateProfileUseCase)

        # Act
        response = await update_profile.execute(
            UpdateProfileRequest(
                user_id=str(alice.id),
                display_name="Alice A.",
                birth_date=date(1990, 5, 17),
            )
        )

        # Assert
        assert response.user.display_name == "Alice A."
        assert response.user.birth_date == date(1990, 5, 17)
        assert response.user.location == "Lisbon"

    @pytest.mark.asyncio
    async def test_explicit_null_clears_field(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        alice = await user_service.register(Handle(root="alice"), "a@x.com", "hash")
        await user_service.update_profile(alice.id, {"bio": "old bio"})
        update_profile = await unit_env.get(UpdateProfileUseCase)

        # Act
        response = await update_profile.execute(
            UpdateProfileRequest(user_id=str(alice.id), bio=None)
        )

        # Assert
        assert response.user.bio is None


class TestUpdateProfileImageUseCase:
    """Tests for UpdateProfileImageUseCase."""

    @pytest.mark.asyncio
    async def test_avatar_url_is_stored(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        alice = await user_service.register(Handle(root="alice"), "a@x.com", "hash")
        update_image = await unit_env.get(UpdateProfileImageUseCase)

        # Act
        response = await update_image.execute(
            UpdateProfileImageRequest(
                user_id=str(alice.id), kind="avatar", data=b"avatar-bytes"
            )
        )

        # Assert
        user = await user_service.get_by_id(alice.id)
        assert user.avatar_url == response.url
        assert user.cover_url is None

    @pytest.mark.asyncio
    async def test_cover_url_is_stored(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        alice = await user_service.register(Handle(root="alice"), "a@x.com", "hash")
        update_image = await unit_env.get(UpdateProfileImageUseCase)

        # Act
        response = await update_image.execute(
            UpdateProfileImageRequest(
                user_id=str(alice.id), kind="cover", data=b"cover-bytes"
            )
        )

        # Assert
        user = await user_service.get_by_id(alice.id)
        assert user.cover_url == response.url
        assert user.avatar_url is None

    @pytest.mark.asyncio
    async def test_empty_upload_fails(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        alice = await user_service.register(Handle(root="alice"), "a@x.com", "hash")
        update_image = await unit_env.get(UpdateProfileImageUseCase)

        # Act & Assert
        with pytest.raises(UploadFailedError):
            await update_image.execute(
                UpdateProfileImageRequest(user_id=str(alice.id), kind="avatar", data=b"")
            )
