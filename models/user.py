"""User profile and role models."""
from enum import Enum

from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from models.database import Base
from utils.date_helpers import utcnow


class UserRole(str, Enum):
    """Marketplace roles."""
    DRIVER = "driver"
    SHIPPER = "shipper"
    ADMIN = "admin"


class UserProfile(Base):
    """Profile of a shipper, driver or admin.

    The id is the identity issued by the authentication provider.
    """

    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True)

    full_name = Column(String(200), nullable=False)
    email = Column(String(255), index=True)
    phone = Column(String(20))
    avatar_url = Column(String(500))

    created_at = Column(DateTime, default=utcnow)

    role_record = relationship("UserRoleRecord", back_populates="profile", uselist=False)

    @property
    def role(self):
        return self.role_record.role if self.role_record else None

    def __repr__(self):
        return f"<UserProfile(id='{self.id}', name='{self.full_name}')>"


class UserRoleRecord(Base):
    """Role granted to a profile (at most one per user)."""

    __tablename__ = "user_roles"

    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), primary_key=True)
    role = Column(String(20), nullable=False, index=True)

    profile = relationship("UserProfile", back_populates="role_record")

    def __repr__(self):
        return f"<UserRoleRecord(user_id='{self.user_id}', role='{self.role}')>"
