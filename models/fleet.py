"""Trucks and sub-drivers owned by a driver."""
import uuid
from enum import Enum

from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey

from models.database import Base
from utils.date_helpers import utcnow


class TruckType(str, Enum):
    """Truck categories."""
    TRELLA = "trella"
    LORRY = "lorry"
    DYNA = "dyna"
    PICKUP = "pickup"
    REFRIGERATED = "refrigerated"
    TANKER = "tanker"
    FLATBED = "flatbed"
    CONTAINER = "container"


class Truck(Base):
    """Truck registered by a driver."""

    __tablename__ = "trucks"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    driver_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)

    plate_number = Column(String(20), nullable=False)
    brand = Column(String(100))
    model_year = Column(Integer)
    truck_type = Column(String(20), nullable=False, default=TruckType.TRELLA.value)
    capacity = Column(Float)  # tons

    created_at = Column(DateTime, default=utcnow)

    def __repr__(self):
        return f"<Truck(plate='{self.plate_number}', type='{self.truck_type}')>"


class SubDriver(Base):
    """Driver working under another driver's account."""

    __tablename__ = "sub_drivers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    driver_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)

    full_name = Column(String(200), nullable=False)
    phone = Column(String(20), nullable=False)
    license_number = Column(String(50))

    created_at = Column(DateTime, default=utcnow)

    def __repr__(self):
        return f"<SubDriver(name='{self.full_name}', driver_id='{self.driver_id}')>"
