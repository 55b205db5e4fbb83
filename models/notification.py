"""In-app notifications."""
import uuid

from sqlalchemy import Column, String, DateTime, ForeignKey, Text, Boolean

from models.database import Base
from utils.date_helpers import utcnow


class Notification(Base):
    """Append-only message addressed to one user."""

    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)

    # Kept after the load is deleted
    load_id = Column(String(36), index=True)

    created_at = Column(DateTime, default=utcnow)

    def __repr__(self):
        return f"<Notification(user_id='{self.user_id}', title='{self.title}', read={self.is_read})>"
