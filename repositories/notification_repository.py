"""Repository for notification operations."""
from typing import List

from sqlalchemy.orm import Session

from models import Notification
from repositories.base import BaseRepository


class NotificationRepository(BaseRepository[Notification]):
    """Repository for notification-specific database operations."""

    def __init__(self, db: Session):
        """
        Initialize notification repository.

        Args:
            db: Database session
        """
        super().__init__(Notification, db)

    def get_by_user(
        self,
        user_id: str,
        unread_only: bool = False,
        skip: int = 0,
        limit: int = 100
    ) -> List[Notification]:
        """
        Get a user's notifications, newest first.

        Args:
            user_id: Recipient profile ID
            unread_only: Only return unread notifications
            skip: Pagination offset
            limit: Page size

        Returns:
            List of notifications
        """
        query = self.db.query(Notification).filter(Notification.user_id == user_id)

        if unread_only:
            query = query.filter(Notification.is_read.is_(False))

        return query.order_by(
            Notification.created_at.desc()
        ).offset(skip).limit(limit).all()

    def mark_all_read(self, user_id: str) -> int:
        """
        Flip every unread notification of a user to read.

        Returns:
            Number of notifications updated
        """
        return self.update_where(
            [Notification.user_id == user_id, Notification.is_read.is_(False)],
            {"is_read": True},
        )
