"""Repository for bid operations."""
from typing import List

from sqlalchemy.orm import Session

from models import Bid
from repositories.base import BaseRepository


class BidRepository(BaseRepository[Bid]):
    """Repository for bid-specific database operations."""

    def __init__(self, db: Session):
        super().__init__(Bid, db)

    def get_by_load(self, load_id: str) -> List[Bid]:
        """Bids on a load, lowest price first."""
        return self.db.query(Bid).filter(
            Bid.load_id == load_id
        ).order_by(Bid.price.asc(), Bid.created_at.asc()).all()

    def get_by_load_and_driver(self, load_id: str, driver_id: str) -> List[Bid]:
        """A driver's own bids on a load."""
        return self.db.query(Bid).filter(
            Bid.load_id == load_id,
            Bid.driver_id == driver_id
        ).order_by(Bid.created_at.desc()).all()
