"""In-memory notification repository for testing."""

from linkup.domain.model.notification import Notification
from linkup.domain.repository.notification import NotificationRepository
from linkup.domain.value import UserId

from .store import InMemoryDatabase


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    async def save(self, notification: Notification) -> Notification:
        self._db.notifications[notification.id] = notification
        return notification

    async def find_by_receiver(self, receiver_id: UserId) -> list[Notification]:
        mine = [
            n for n in self._db.notifications.values() if n.receiver_id == receiver_id
        ]
        return sorted(mine, key=lambda n: (n.created_at, n.id), reverse=True)

    async def mark_all_read(self, receiver_id: UserId) -> int:
        updated = 0
        for nid, notification in list(self._db.notifications.items()):
            if notification.receiver_id == receiver_id and not notification.read:
                self._db.notifications[nid] = notification.model_copy(
                    update={"read": True}
                )
                updated += 1
        return updated
