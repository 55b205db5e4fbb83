"""Freight load listing."""
import uuid
from enum import Enum

from sqlalchemy import Column, String, Float, Date, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from models.database import Base
from utils.date_helpers import utcnow


class LoadStatus(str, Enum):
    """Lifecycle status of a load."""
    AVAILABLE = "available"
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BodyType(str, Enum):
    """Truck body a load requires."""
    FLATBED = "flatbed"
    CURTAIN = "curtain"
    BOX = "box"
    REFRIGERATED = "refrigerated"
    LOWBOY = "lowboy"
    TANK = "tank"


class Load(Base):
    """Freight shipment posted by a shipper."""

    __tablename__ = "loads"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Parties
    owner_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    driver_id = Column(String(36), ForeignKey("profiles.id"), index=True)

    # Route
    origin = Column(String(100), nullable=False)
    destination = Column(String(100), nullable=False)
    origin_lat = Column(Float)
    origin_lng = Column(Float)
    dest_lat = Column(Float)
    dest_lng = Column(Float)
    distance = Column(Float)  # km

    # Cargo
    weight = Column(Float, nullable=False, default=0)  # tons
    price = Column(Float, nullable=False, default=0)
    truck_size = Column(String(200))
    body_type = Column(String(20), default=BodyType.FLATBED.value)
    load_type = Column(String(200), default="general")
    package_type = Column(String(200))
    pickup_date = Column(Date)
    description = Column(Text)

    # Receiver
    receiver_name = Column(String(200))
    receiver_phone = Column(String(20))
    receiver_address = Column(Text)

    # Status
    status = Column(String(20), nullable=False, default=LoadStatus.AVAILABLE.value, index=True)

    # Timestamps
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    owner = relationship("UserProfile", foreign_keys=[owner_id])
    driver = relationship("UserProfile", foreign_keys=[driver_id])
    bids = relationship("Bid", back_populates="load")

    def __repr__(self):
        return f"<Load(id='{self.id}', route='{self.origin}->{self.destination}', status='{self.status}')>"
