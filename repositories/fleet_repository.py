"""Repositories for trucks and sub-drivers."""
from typing import List

from sqlalchemy.orm import Session

from models import SubDriver, Truck
from repositories.base import BaseRepository


class TruckRepository(BaseRepository[Truck]):
    """Repository for truck operations."""

    def __init__(self, db: Session):
        super().__init__(Truck, db)

    def get_by_driver(self, driver_id: str) -> List[Truck]:
        """Trucks owned by a driver, newest first."""
        return self.db.query(Truck).filter(
            Truck.driver_id == driver_id
        ).order_by(Truck.created_at.desc()).all()


class SubDriverRepository(BaseRepository[SubDriver]):
    """Repository for sub-driver operations."""

    def __init__(self, db: Session):
        super().__init__(SubDriver, db)

    def get_by_driver(self, driver_id: str) -> List[SubDriver]:
        """Sub-drivers registered by a driver, newest first."""
        return self.db.query(SubDriver).filter(
            SubDriver.driver_id == driver_id
        ).order_by(SubDriver.created_at.desc()).all()
