"""Unit tests for GraphService."""

from uuid import uuid4

import pytest

from linkup.domain.error import InvalidOperationError, NotFoundError
from linkup.domain.repository import UserRepository
from linkup.domain.service import (
    GraphService,
    NotificationService,
    PostService,
    UserService,
)
from linkup.domain.value import NotificationType, UserId
from linkup.domain.value.types import Handle
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _register(unit_env, handle: str):
    user_service = await unit_env.get(UserService)
    return await user_service.register(
        Handle(root=handle), f"{handle}@example.com", "not-a-real-hash"
    )


class TestFollow:
    """Tests for follow method."""

    @pytest.mark.asyncio
    async def test_follow_adds_both_edges(self, unit_env):
        """Following should record the edge on both users."""
        # Arrange
        graph = await unit_env.get(GraphService)
        user_repo = await unit_env.get(UserRepository)
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")

        # Act
        created = await graph.follow(alice.id, bob.id)

        # Assert
        assert created is True
        alice_after = await user_repo.find_by_id(alice.id)
        bob_after = await user_repo.find_by_id(bob.id)
        assert alice_after.following == [bob.id]
        assert bob_after.followers == [alice.id]

    @pytest.mark.asyncio
    async def test_follow_notifies_target(self, unit_env):
        """The followed user should get one follow notification."""
        # Arrange
        graph = await unit_env.get(GraphService)
        notifications = await unit_env.get(NotificationService)
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")

        # Act
        await graph.follow(alice.id, bob.id)

        # Assert
        inbox = await notifications.list_for(bob.id)
        assert len(inbox) == 1
        assert inbox[0].type == NotificationType.FOLLOW
        assert inbox[0].sender_id == alice.id
        assert inbox[0].read is False

    @pytest.mark.asyncio
    async def test_follow_twice_keeps_single_edge(self, unit_env):
        """Repeating a follow should neither duplicate the edge nor re-notify."""
        # Arrange
        graph = await unit_env.get(GraphService)
        user_repo = await unit_env.get(UserRepository)
        notifications = await unit_env.get(NotificationService)
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")
        await graph.follow(alice.id, bob.id)

        # Act
        created = await graph.follow(alice.id, bob.id)

        # Assert
        assert created is False
        bob_after = await user_repo.find_by_id(bob.id)
        assert bob_after.followers == [alice.id]
        assert len(await notifications.list_for(bob.id)) == 1

    @pytest.mark.asyncio
    async def test_follow_self_rejected(self, unit_env):
        """Following yourself should raise InvalidOperationError."""
        # Arrange
        graph = await unit_env.get(GraphService)
        user_repo = await unit_env.get(UserRepository)
        alice = await _register(unit_env, "alice")

        # Act & Assert
        with pytest.raises(InvalidOperationError, match="cannot follow yourself"):
            await graph.follow(alice.id, alice.id)

        alice_after = await user_repo.find_by_id(alice.id)
        assert alice_after.following == []
        assert alice_after.followers == []

    @pytest.mark.asyncio
    async def test_follow_unknown_user_raises_not_found(self, unit_env):
        """Following a user that does not exist should raise NotFoundError."""
        # Arrange
        graph = await unit_env.get(GraphService)
        alice = await _register(unit_env, "alice")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await graph.follow(alice.id, UserId(uuid4()))


class TestUnfollow:
    """Tests for unfollow method."""

    @pytest.mark.asyncio
    async def test_unfollow_removes_both_edges(self, unit_env):
        # Arrange
        graph = await unit_env.get(GraphService)
        user_repo = await unit_env.get(UserRepository)
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")
        await graph.follow(alice.id, bob.id)

        # Act
        removed = await graph.unfollow(alice.id, bob.id)

        # Assert
        assert removed is True
        assert (await user_repo.find_by_id(alice.id)).following == []
        assert (await user_repo.find_by_id(bob.id)).followers == []

    @pytest.mark.asyncio
    async def test_unfollow_without_edge_is_noop(self, unit_env):
        # Arrange
        graph = await unit_env.get(GraphService)
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")

        # Act
        removed = await graph.unfollow(alice.id, bob.id)

        # Assert
        assert removed is False


class TestLike:
    """Tests for like method."""

    @pytest.mark.asyncio
    async def test_like_is_idempotent(self, unit_env):
        """Liking twice should leave exactly one like."""
        # Arrange
        graph = await unit_env.get(GraphService)
        post_service = await unit_env.get(PostService)
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")
        post = await post_service.create_post(alice.id, "hello")

        # Act
        first = await graph.like(bob.id, post.id)
        second = await graph.like(bob.id, post.id)

        # Assert
        assert first is True
        assert second is False
        liked = await post_service.get_post(post.id)
        assert liked.likes == [bob.id]

    @pytest.mark.asyncio
    async def test_like_notifies_author_once(self, unit_env):
        # Arrange
        graph = await unit_env.get(GraphService)
        post_service = await unit_env.get(PostService)
        notifications = await unit_env.get(NotificationService)
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")
        post = await post_service.create_post(alice.id, "hello")

        # Act
        await graph.like(bob.id, post.id)
        await graph.like(bob.id, post.id)

        # Assert
        inbox = await notifications.list_for(alice.id)
        assert len(inbox) == 1
        assert inbox[0].type == NotificationType.LIKE
        assert inbox[0].post_id == post.id

    @pytest.mark.asyncio
    async def test_like_own_post_does_not_notify(self, unit_env):
        # Arrange
        graph = await unit_env.get(GraphService)
        post_service = await unit_env.get(PostService)
        notifications = await unit_env.get(NotificationService)
        alice = await _register(unit_env, "alice")
        post = await post_service.create_post(alice.id, "hello")

        # Act
        created = await graph.like(alice.id, post.id)

        # Assert
        assert created is True
        assert await notifications.list_for(alice.id) == []

    @pytest.mark.asyncio
    async def test_like_missing_post_raises_not_found(self, unit_env):
        # Arrange
        graph = await unit_env.get(GraphService)
        alice = await _register(unit_env, "alice")

        # Act & Assert
        with pytest.raises(NotFoundError, match="Post not found"):
            await graph.like(alice.id, uuid4())
