"""Unit tests for AuthenticateUseCase, ExternalLoginUseCase and GetMeUseCase."""

from uuid import uuid4

import pytest

from linkup.application.usecase.auth import (
    AuthenticateRequest,
    AuthenticateUseCase,
    ExternalLoginRequest,
    ExternalLoginUseCase,
    GetMeUseCase,
)
from linkup.domain.error import ForbiddenError, InvalidTokenError, UnauthenticatedError
from linkup.domain.service import JWTService, PostService, UserService
from linkup.domain.value.types import Handle
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAuthenticateUseCase:
    """Tests for the access gate checks."""

    @pytest.mark.asyncio
    async def test_valid_token_resolves_user(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        jwt_service = await unit_env.get(JWTService)
        authenticate = await unit_env.get(AuthenticateUseCase)
        alice = await user_service.register(Handle(root="alice"), "a@x.com", "hash")
        token = jwt_service.create_token(str(alice.id))

        # Act
        user = await authenticate.execute(AuthenticateRequest(token=token))

        # Assert
        assert user.id == alice.id

    @pytest.mark.asyncio
    async def test_missing_token(self, unit_env):
        authenticate = await unit_env.get(AuthenticateUseCase)

        with pytest.raises(UnauthenticatedError):
            await authenticate.execute(AuthenticateRequest(token=None))

    @pytest.mark.asyncio
    async def test_garbage_token(self, unit_env):
        authenticate = await unit_env.get(AuthenticateUseCase)

        with pytest.raises(UnauthenticatedError, match="Invalid token"):
            await authenticate.execute(AuthenticateRequest(token="not.a.jwt"))

    @pytest.mark.asyncio
    async def test_token_for_unknown_user(self, unit_env):
        # Arrange
        jwt_service = await unit_env.get(JWTService)
        authenticate = await unit_env.get(AuthenticateUseCase)
        token = jwt_service.create_token(str(uuid4()))

        # Act & Assert
        with pytest.raises(UnauthenticatedError):
            await authenticate.execute(AuthenticateRequest(token=token))

    @pytest.mark.asyncio
    async def test_banned_user_is_forbidden(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        jwt_service = await unit_env.get(JWTService)
        authenticate = await unit_env.get(AuthenticateUseCase)
        alice = await user_service.register(Handle(root="alice"), "a@x.com", "hash")
        token = jwt_service.create_token(str(alice.id))
        await user_service.ban(alice.id)

        # Act & Assert
        with pytest.raises(ForbiddenError, match="banned"):
            await authenticate.execute(AuthenticateRequest(token=token))


class TestExternalLoginUseCase:
    """Tests for ExternalLoginUseCase."""

    @pytest.mark.asyncio
    async def test_first_login_creates_user_and_issues_token(self, unit_env):
        # Arrange
        external_login = await unit_env.get(ExternalLoginUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await external_login.execute(
            ExternalLoginRequest(token="mock-erin@example.com")
        )

        # Assert
        assert response.user.email == "erin@example.com"
        assert response.user.handle.root == "erin@example.com"
        assert jwt_service.verify_token(response.token).user_id == response.user.user_id

    @pytest.mark.asyncio
    async def test_repeat_login_reuses_account(self, unit_env):
        # Arrange
        external_login = await unit_env.get(ExternalLoginUseCase)
        first = await external_login.execute(
            ExternalLoginRequest(token="mock-erin@example.com")
        )

        # Act
        second = await external_login.execute(
            ExternalLoginRequest(token="mock-ERIN@example.com")
        )

        # Assert
        assert second.user.user_id == first.user.user_id

    @pytest.mark.asyncio
    async def test_rejected_token(self, unit_env):
        external_login = await unit_env.get(ExternalLoginUseCase)

        with pytest.raises(InvalidTokenError):
            await external_login.execute(ExternalLoginRequest(token="forged"))


class TestGetMeUseCase:
    """Tests for GetMeUseCase."""

    @pytest.mark.asyncio
    async def test_returns_profile_and_own_posts(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        post_service = await unit_env.get(PostService)
        get_me = await unit_env.get(GetMeUseCase)
        alice = await user_service.register(Handle(root="alice"), "a@x.com", "hash")
        bob = await user_service.register(Handle(root="bob"), "b@x.com", "hash")
        await post_service.create_post(alice.id, "first")
        await post_service.create_post(bob.id, "not mine")
        await post_service.create_post(alice.id, "second")

        # Act
        response = await get_me.execute(alice)

        # Assert
        assert response.user.user_id == str(alice.id)
        assert [p.content for p in response.posts] == ["second", "first"]
        assert "password_hash" not in response.user.model_dump()
