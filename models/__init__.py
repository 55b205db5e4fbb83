"""Database models."""
from models.database import Base, get_db, init_db
from models.actor import Actor
from models.user import UserProfile, UserRoleRecord, UserRole
from models.load import Load, LoadStatus, BodyType
from models.bid import Bid
from models.notification import Notification
from models.fleet import Truck, TruckType, SubDriver

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "Actor",
    "UserProfile",
    "UserRoleRecord",
    "UserRole",
    "Load",
    "LoadStatus",
    "BodyType",
    "Bid",
    "Notification",
    "Truck",
    "TruckType",
    "SubDriver",
]
