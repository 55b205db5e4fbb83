"""Notification service."""
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from exceptions import NotificationDeliveryError, PersistenceError
from logging_config import get_logger
from models import Notification
from repositories import NotificationRepository
from templates import get_notification_template

logger = get_logger(__name__)


class NotificationService:
    """Write and read per-user in-app notifications.

    Delivery is best-effort: `notify` never raises, so a failed write can
    not undo the state change that triggered it.
    """

    def __init__(self, db: Session):
        """
        Initialize notification service.

        Args:
            db: Database session
        """
        self.db = db
        self.notifications = NotificationRepository(db)

    def notify(
        self,
        user_id: str,
        template_type: str,
        data: Dict[str, Any],
        load_id: Optional[str] = None
    ) -> Optional[Notification]:
        """
        Render a template and deliver it to a user.

        Args:
            user_id: Recipient profile ID
            template_type: Template key (see templates.get_notification_template)
            data: Template data
            load_id: Load the notification refers to

        Returns:
            Created notification, or None if delivery failed
        """
        template = get_notification_template(template_type, data)

        try:
            return self._deliver(
                user_id,
                template.render_title(),
                template.render_body(),
                load_id,
            )
        except NotificationDeliveryError as e:
            logger.warning(
                "Notification dropped",
                user_id=user_id,
                template=template_type,
                load_id=load_id,
                error=str(e),
            )
            return None

    def _deliver(
        self,
        user_id: str,
        title: str,
        body: str,
        load_id: Optional[str]
    ) -> Notification:
        try:
            notification = self.notifications.create(
                user_id=user_id,
                title=title,
                body=body,
                load_id=load_id,
                is_read=False,
            )
        except PersistenceError as e:
            raise NotificationDeliveryError(f"Could not notify user {user_id}") from e

        logger.info("Notification sent", user_id=user_id, title=title, load_id=load_id)
        return notification

    def list_for_user(
        self,
        user_id: str,
        unread_only: bool = False,
        skip: int = 0,
        limit: int = 100
    ) -> List[Notification]:
        """Notifications for a user, newest first."""
        return self.notifications.get_by_user(user_id, unread_only, skip, limit)

    def unread_count(self, user_id: str) -> int:
        """Number of unread notifications for a user."""
        return self.notifications.count({"user_id": user_id, "is_read": False})

    def mark_all_read(self, user_id: str) -> int:
        """
        Mark all of a user's notifications as read.

        Returns:
            Number of notifications updated
        """
        updated = self.notifications.mark_all_read(user_id)
        logger.info("Marked notifications read", user_id=user_id, count=updated)
        return updated
