"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from linkup.domain.service import NotificationService
from linkup.domain.value import NotificationType, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestNotify:
    """Tests for notify method."""

    @pytest.mark.asyncio
    async def test_self_action_is_skipped(self, unit_env):
        # Arrange
        notifications = await unit_env.get(NotificationService)
        user_id = UserId(uuid4())

        # Act
        result = await notifications.notify(NotificationType.LIKE, user_id, user_id)

        # Assert
        assert result is None
        assert await notifications.list_for(user_id) == []

    @pytest.mark.asyncio
    async def test_list_newest_first(self, unit_env):
        # Arrange
        notifications = await unit_env.get(NotificationService)
        receiver = UserId(uuid4())
        first = await notifications.notify(
            NotificationType.FOLLOW, UserId(uuid4()), receiver
        )
        second = await notifications.notify(
            NotificationType.FOLLOW, UserId(uuid4()), receiver
        )

        # Act
        inbox = await notifications.list_for(receiver)

        # Assert
        assert [n.id for n in inbox] == [second.id, first.id]


class TestMarkAllRead:
    """Tests for mark_all_read method."""

    @pytest.mark.asyncio
    async def test_marks_only_receivers_notifications(self, unit_env):
        # Arrange
        notifications = await unit_env.get(NotificationService)
        bob = UserId(uuid4())
        carol = UserId(uuid4())
        sender = UserId(uuid4())
        await notifications.notify(NotificationType.FOLLOW, sender, bob)
        await notifications.notify(NotificationType.FOLLOW, sender, carol)

        # Act
        updated = await notifications.mark_all_read(bob)

        # Assert
        assert updated == 1
        assert all(n.read for n in await notifications.list_for(bob))
        assert not any(n.read for n in await notifications.list_for(carol))

    @pytest.mark.asyncio
    async def test_second_call_updates_nothing(self, unit_env):
        # Arrange
        notifications = await unit_env.get(NotificationService)
        bob = UserId(uuid4())
        await notifications.notify(NotificationType.FOLLOW, UserId(uuid4()), bob)
        await notifications.mark_all_read(bob)

        # Act
        updated = await notifications.mark_all_read(bob)

        # Assert
        assert updated == 0
