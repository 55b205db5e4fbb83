"""Repository pattern for database access."""
from repositories.base import BaseRepository
from repositories.load_repository import LoadRepository
from repositories.bid_repository import BidRepository
from repositories.notification_repository import NotificationRepository
from repositories.user_repository import UserRepository
from repositories.fleet_repository import TruckRepository, SubDriverRepository

__all__ = [
    "BaseRepository",
    "LoadRepository",
    "BidRepository",
    "NotificationRepository",
    "UserRepository",
    "TruckRepository",
    "SubDriverRepository",
]
