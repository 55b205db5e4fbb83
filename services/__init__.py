"""Business logic services."""
from services.notification_service import NotificationService
from services.load_lifecycle import LoadLifecycleManager
from services.user_service import UserService
from services.fleet_service import FleetService

__all__ = ["NotificationService", "LoadLifecycleManager", "UserService", "FleetService"]
