"""Integration tests for NotificationRepository."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from linkup.domain.model import Notification, User
from linkup.domain.repository import NotificationRepository, UserRepository
from linkup.domain.value import NotificationId, NotificationType, UserId
from linkup.domain.value.types import Handle
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def create_user(user_repo: UserRepository, name: str) -> User:
    handle = f"{name}-{uuid4().hex[:12]}"
    return await user_repo.create(
        User(
            id=UserId(uuid4()),
            handle=Handle(root=handle),
            email=f"{handle}@example.com",
        )
    )


def follow_notification(
    sender: User, receiver: User, created_at: datetime | None = None
) -> Notification:
    return Notification(
        id=NotificationId(uuid4()),
        type=NotificationType.FOLLOW,
        sender_id=sender.id,
        receiver_id=receiver.id,
        created_at=created_at or datetime.now(timezone.utc),
    )


class TestNotificationRepositoryIntegration:
    """Integration tests for PostgresNotificationRepository."""

    @pytest.mark.asyncio
    async def test_mark_all_read_counts_only_unread(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        notification_repo = await integration_env.get(NotificationRepository)
        alice = await create_user(user_repo, "alice")
        bob = await create_user(user_repo, "bob")
        carol = await create_user(user_repo, "carol")
        await notification_repo.save(follow_notification(alice, bob))
        await notification_repo.save(follow_notification(carol, bob))
        await notification_repo.save(follow_notification(bob, carol))

        # Act
        first = await notification_repo.mark_all_read(bob.id)
        second = await notification_repo.mark_all_read(bob.id)

        # Assert
        assert (first, second) == (2, 0)
        assert all(n.read for n in await notification_repo.find_by_receiver(bob.id))
        [untouched] = await notification_repo.find_by_receiver(carol.id)
        assert untouched.read is False

    @pytest.mark.asyncio
    async def test_find_by_receiver_newest_first(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        notification_repo = await integration_env.get(NotificationRepository)
        alice = await create_user(user_repo, "alice")
        bob = await create_user(user_repo, "bob")
        older = await notification_repo.save(
            follow_notification(
                alice, bob, datetime(2024, 1, 1, tzinfo=timezone.utc)
            )
        )
        newer = await notification_repo.save(
            follow_notification(
                alice, bob, datetime(2024, 1, 2, tzinfo=timezone.utc)
            )
        )

        # Act
        inbox = await notification_repo.find_by_receiver(bob.id)

        # Assert
        assert [n.id for n in inbox] == [newer.id, older.id]
