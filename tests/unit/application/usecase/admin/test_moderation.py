"""Unit tests for admin use cases."""

from uuid import uuid4

import pytest

from linkup.application.usecase.admin import (
    BanUserRequest,
    BanUserUseCase,
    RemovePostRequest,
    RemovePostUseCase,
)
from linkup.domain.error import NotFoundError
from linkup.domain.service import CommentService, PostService, UserService
from linkup.domain.value.types import Handle
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _admin(unit_env):
    user_service = await unit_env.get(UserService)
    return await user_service.register(Handle(root="mod"), "admin@linkup.test", "hash")


class TestBanUserUseCase:
    """Tests for BanUserUseCase."""

    @pytest.mark.asyncio
    async def test_ban_user(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        admin = await _admin(unit_env)
        alice = await user_service.register(Handle(root="alice"), "a@x.com", "hash")
        ban_user = await unit_env.get(BanUserUseCase)

        # Act
        response = await ban_user.execute(BanUserRequest(user_id=str(alice.id)), admin)

        # Assert
        assert response.message == "User banned"
        assert (await user_service.get_by_id(alice.id)).banned is True

    @pytest.mark.asyncio
    async def test_ban_unknown_user(self, unit_env):
        admin = await _admin(unit_env)
        ban_user = await unit_env.get(BanUserUseCase)

        with pytest.raises(NotFoundError):
            await ban_user.execute(BanUserRequest(user_id=str(uuid4())), admin)


class TestRemovePostUseCase:
    """Tests for RemovePostUseCase."""

    @pytest.mark.asyncio
    async def test_remove_post_cascades_comments(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        admin = await _admin(unit_env)
        alice = await user_service.register(Handle(root="alice"), "a@x.com", "hash")
        post = await post_service.create_post(alice.id, "spam")
        comment = await comment_service.add_comment(post.id, alice.id, "more spam")
        remove_post = await unit_env.get(RemovePostUseCase)

        # Act
        response = await remove_post.execute(
            RemovePostRequest(post_id=str(post.id)), admin
        )

        # Assert
        assert response.message == "Post removed"
        assert response.removed_comments == 1
        with pytest.raises(NotFoundError):
            await comment_service.get_comment(comment.id)
