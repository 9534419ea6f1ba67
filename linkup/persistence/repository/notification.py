"""PostgreSQL implementation of Notification repository."""

from typing import List

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.domain.model import Notification
from linkup.domain.repository import NotificationRepository
from linkup.domain.value import UserId
from linkup.persistence.mappers import notification_to_dict, row_to_notification
from linkup.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        stmt = insert(notifications_table).values(**notification_to_dict(notification))
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def find_by_receiver(self, receiver_id: UserId) -> List[Notification]:
        """Find a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.receiver_id == receiver_id)
            .order_by(
                notifications_table.c.created_at.desc(),
                notifications_table.c.id.desc(),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def mark_all_read(self, receiver_id: UserId) -> int:
        """Mark a user's unread notifications as read."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.receiver_id == receiver_id)
            .where(notifications_table.c.read.is_(False))
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
