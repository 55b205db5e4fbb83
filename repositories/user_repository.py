"""Repository for user profile operations."""
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from exceptions import PersistenceError
from models import UserProfile, UserRoleRecord
from repositories.base import BaseRepository
from logging_config import get_logger

logger = get_logger(__name__)


class UserRepository(BaseRepository[UserProfile]):
    """Repository for profiles and their role records."""

    def __init__(self, db: Session):
        """
        Initialize user repository.

        Args:
            db: Database session
        """
        super().__init__(UserProfile, db)

    def create_with_role(self, role: str, **profile_fields) -> UserProfile:
        """
        Create a profile and its role record in one commit.

        Args:
            role: Role value
            **profile_fields: Profile attributes

        Returns:
            Created profile
        """
        try:
            profile = UserProfile(**profile_fields)
            profile.role_record = UserRoleRecord(role=role)
            self.db.add(profile)
            self.db.commit()
            self.db.refresh(profile)

            logger.info("Created profile", user_id=profile.id, role=role)
            return profile

        except Exception as e:
            self.db.rollback()
            logger.error("Creating profile failed", error=str(e))
            raise PersistenceError("Failed to create profile") from e

    def get_role(self, user_id: str) -> Optional[str]:
        """
        Get the role of a user.

        Returns:
            Role value or None if the user has no role
        """
        record = self.db.query(UserRoleRecord).filter(
            UserRoleRecord.user_id == user_id
        ).first()
        return record.role if record else None

    def get_all_with_roles(self, skip: int = 0, limit: int = 100) -> List[UserProfile]:
        """All profiles with roles loaded, newest first."""
        return self.db.query(UserProfile).options(
            joinedload(UserProfile.role_record)
        ).order_by(UserProfile.created_at.desc()).offset(skip).limit(limit).all()

    def count_by_role(self, role: str) -> int:
        """Count users holding a role."""
        return self.db.query(UserRoleRecord).filter(
            UserRoleRecord.role == role
        ).count()
