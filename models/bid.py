"""Driver bids on loads."""
import uuid

from sqlalchemy import Column, String, Float, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from models.database import Base
from utils.date_helpers import utcnow


class Bid(Base):
    """Price offer from a driver; does not change the load's status."""

    __tablename__ = "bids"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    load_id = Column(String(36), ForeignKey("loads.id", ondelete="CASCADE"), nullable=False, index=True)
    driver_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)

    price = Column(Float, nullable=False)
    message = Column(Text)

    created_at = Column(DateTime, default=utcnow)

    load = relationship("Load", back_populates="bids")
    driver = relationship("UserProfile")

    def __repr__(self):
        return f"<Bid(load_id='{self.load_id}', driver_id='{self.driver_id}', price={self.price})>"
