"""Unit tests for LoginUseCase and RegisterUseCase."""

import pytest

from linkup.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from linkup.domain.error import DuplicateIdentityError, InvalidCredentialsError
from linkup.domain.service import JWTService, UserService
from linkup.domain.value import VerifiedIdentity
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _register(unit_env, username="alice", email="a@x.com", password="pw1"):
    register = await unit_env.get(RegisterUseCase)
    return await register.execute(
        RegisterRequest(username=username, email=email, password=password)
    )


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_stores_hash_not_password(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        response = await _register(unit_env)

        # Assert
        assert response.message == "Registered"
        user = await user_service.get_user_by_email("a@x.com")
        assert str(user.id) == response.user_id
        assert user.password_hash is not None
        assert user.password_hash != "pw1"

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, unit_env):
        # Arrange
        await _register(unit_env)

        # Act & Assert
        with pytest.raises(DuplicateIdentityError):
            await _register(unit_env, username="alice2")


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_returns_token_for_user(self, unit_env):
        # Arrange
        registered = await _register(unit_env)
        login = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await login.execute(LoginRequest(email="a@x.com", password="pw1"))

        # Assert
        assert response.user.user_id == registered.user_id
        assert response.user.handle.root == "alice"
        assert jwt_service.verify_token(response.token).user_id == registered.user_id

    @pytest.mark.asyncio
    async def test_login_email_is_case_insensitive(self, unit_env):
        # Arrange
        await _register(unit_env)
        login = await unit_env.get(LoginUseCase)

        # Act
        response = await login.execute(LoginRequest(email="A@X.COM", password="pw1"))

        # Assert
        assert response.user.email == "a@x.com"

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, unit_env):
        # Arrange
        await _register(unit_env)
        login = await unit_env.get(LoginUseCase)

        # Act & Assert
        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest(email="a@x.com", password="wrong"))

    @pytest.mark.asyncio
    async def test_login_unknown_email(self, unit_env):
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(InvalidCredentialsError):
            await login.execute(LoginRequest(email="nobody@x.com", password="pw1"))

    @pytest.mark.asyncio
    async def test_external_account_cannot_use_password_login(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.get_or_create_external(
            VerifiedIdentity(email="carol@example.com")
        )
        login = await unit_env.get(LoginUseCase)

        # Act & Assert
        with pytest.raises(InvalidCredentialsError):
            await login.execute(
                LoginRequest(email="carol@example.com", password="anything")
            )
