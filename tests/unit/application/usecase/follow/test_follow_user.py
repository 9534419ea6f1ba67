"""Unit tests for follow use cases and notifications."""

import pytest

from linkup.application.usecase.follow import (
    FollowRequest,
    FollowUserUseCase,
    UnfollowRequest,
    UnfollowUserUseCase,
)
from linkup.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkAllReadRequest,
    MarkAllReadUseCase,
)
from linkup.domain.error import InvalidOperationError
from linkup.domain.service import UserService
from linkup.domain.value import NotificationType
from linkup.domain.value.types import Handle
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _register(unit_env, handle: str):
    user_service = await unit_env.get(UserService)
    return await user_service.register(
        Handle(root=handle), f"{handle}@example.com", "hash"
    )


class TestFollowUserUseCase:
    """Tests for FollowUserUseCase and UnfollowUserUseCase."""

    @pytest.mark.asyncio
    async def test_follow_then_unfollow(self, unit_env):
        # Arrange
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")
        follow = await unit_env.get(FollowUserUseCase)
        unfollow = await unit_env.get(UnfollowUserUseCase)

        # Act
        followed = await follow.execute(
            FollowRequest(actor_id=str(alice.id), target_id=str(bob.id))
        )
        unfollowed = await unfollow.execute(
            UnfollowRequest(actor_id=str(alice.id), target_id=str(bob.id))
        )

        # Assert
        assert followed.message == "Followed"
        assert followed.created is True
        assert unfollowed.message == "Unfollowed"
        assert unfollowed.removed is True

    @pytest.mark.asyncio
    async def test_self_follow_rejected(self, unit_env):
        alice = await _register(unit_env, "alice")
        follow = await unit_env.get(FollowUserUseCase)

        with pytest.raises(InvalidOperationError):
            await follow.execute(
                FollowRequest(actor_id=str(alice.id), target_id=str(alice.id))
            )


class TestNotificationUseCases:
    """Tests for ListNotificationsUseCase and MarkAllReadUseCase."""

    @pytest.mark.asyncio
    async def test_follow_notification_then_read_all(self, unit_env):
        # Arrange
        alice = await _register(unit_env, "alice")
        bob = await _register(unit_env, "bob")
        follow = await unit_env.get(FollowUserUseCase)
        list_notifications = await unit_env.get(ListNotificationsUseCase)
        mark_all_read = await unit_env.get(MarkAllReadUseCase)
        await follow.execute(
            FollowRequest(actor_id=str(alice.id), target_id=str(bob.id))
        )

        # Act
        before = await list_notifications.execute(
            ListNotificationsRequest(user_id=str(bob.id))
        )
        marked = await mark_all_read.execute(MarkAllReadRequest(user_id=str(bob.id)))
        after = await list_notifications.execute(
            ListNotificationsRequest(user_id=str(bob.id))
        )

        # Assert
        assert len(before.notifications) == 1
        [notification] = before.notifications
        assert notification.type == NotificationType.FOLLOW
        assert notification.sender_id == str(alice.id)
        assert notification.read is False
        assert marked.updated == 1
        assert [n.read for n in after.notifications] == [True]
