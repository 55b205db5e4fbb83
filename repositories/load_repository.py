"""Repository for load operations."""
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from exceptions import PersistenceError
from models import Bid, Load, LoadStatus
from repositories.base import BaseRepository
from logging_config import get_logger
from utils.date_helpers import utcnow

logger = get_logger(__name__)


class LoadRepository(BaseRepository[Load]):
    """Repository for load-specific database operations.

    Status changes are single conditional UPDATEs; each returns True only
    when the row matched its expected pre-state.
    """

    def __init__(self, db: Session):
        """
        Initialize load repository.

        Args:
            db: Database session
        """
        super().__init__(Load, db)

    def get_available(
        self,
        body_type: Optional[str] = None,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[Load]:
        """
        Get loads open for acceptance, newest first.

        Args:
            body_type: Optional body type filter
            origin: Optional case-insensitive origin substring
            destination: Optional case-insensitive destination substring
            skip: Pagination offset
            limit: Page size

        Returns:
            List of loads
        """
        try:
            query = self.db.query(Load).filter(
                Load.status == LoadStatus.AVAILABLE.value,
                Load.driver_id.is_(None)
            )

            if body_type:
                query = query.filter(Load.body_type == body_type)
            if origin:
                query = query.filter(Load.origin.ilike(f"%{origin}%"))
            if destination:
                query = query.filter(Load.destination.ilike(f"%{destination}%"))

            return query.order_by(Load.created_at.desc()).offset(skip).limit(limit).all()

        except Exception as e:
            logger.error("Listing available loads failed", error=str(e))
            raise PersistenceError("Failed to list available loads") from e

    def get_for_user(self, user_id: str, skip: int = 0, limit: int = 100) -> List[Load]:
        """
        Get loads a user owns or drives.

        Args:
            user_id: Profile ID
            skip: Pagination offset
            limit: Page size

        Returns:
            List of loads
        """
        try:
            return self.db.query(Load).filter(
                or_(Load.owner_id == user_id, Load.driver_id == user_id)
            ).order_by(Load.created_at.desc()).offset(skip).limit(limit).all()
        except Exception as e:
            logger.error("Listing user loads failed", user_id=user_id, error=str(e))
            raise PersistenceError("Failed to list loads") from e

    def assign_driver(self, load_id: str, driver_id: str) -> bool:
        """available, no driver -> in_progress with driver."""
        return self.update_where(
            [
                Load.id == load_id,
                Load.status == LoadStatus.AVAILABLE.value,
                Load.driver_id.is_(None),
            ],
            {
                "status": LoadStatus.IN_PROGRESS.value,
                "driver_id": driver_id,
                "updated_at": utcnow(),
            },
        ) == 1

    def mark_completed(self, load_id: str, driver_id: Optional[str] = None) -> bool:
        """in_progress -> completed; restricted to one driver when given."""
        filters = [
            Load.id == load_id,
            Load.status == LoadStatus.IN_PROGRESS.value,
        ]
        if driver_id is not None:
            filters.append(Load.driver_id == driver_id)

        return self.update_where(
            filters,
            {"status": LoadStatus.COMPLETED.value, "updated_at": utcnow()},
        ) == 1

    def release_driver(self, load_id: str, driver_id: str) -> bool:
        """in_progress with this driver -> available, driver cleared."""
        return self.update_where(
            [
                Load.id == load_id,
                Load.status == LoadStatus.IN_PROGRESS.value,
                Load.driver_id == driver_id,
            ],
            {
                "status": LoadStatus.AVAILABLE.value,
                "driver_id": None,
                "updated_at": utcnow(),
            },
        ) == 1

    def mark_cancelled(self, load_id: str) -> bool:
        """available -> cancelled."""
        return self.update_where(
            [
                Load.id == load_id,
                Load.status == LoadStatus.AVAILABLE.value,
                Load.driver_id.is_(None),
            ],
            {"status": LoadStatus.CANCELLED.value, "updated_at": utcnow()},
        ) == 1

    def delete_if_available(self, load_id: str) -> bool:
        """
        Delete a load that nobody has accepted, along with its bids.

        Returns:
            True if the load was deleted
        """
        try:
            deleted = self.db.query(Load).filter(
                Load.id == load_id,
                Load.status == LoadStatus.AVAILABLE.value,
                Load.driver_id.is_(None),
            ).delete(synchronize_session=False)

            if deleted:
                self.db.query(Bid).filter(Bid.load_id == load_id).delete(
                    synchronize_session=False
                )

            self.db.commit()

        except Exception as e:
            self.db.rollback()
            logger.error("Deleting load failed", load_id=load_id, error=str(e))
            raise PersistenceError("Failed to delete load") from e

        if deleted:
            logger.info("Deleted load", load_id=load_id)
        return deleted == 1
