"""Dashboard metrics for admins and drivers."""
from typing import Dict, Any
from dataclasses import dataclass, asdict

from sqlalchemy.orm import Session

from constants import ACTIVE_STATUSES, LOAD_COMPLETED, LOAD_IN_PROGRESS
from exceptions import PermissionDeniedError
from models import Actor, UserRole
from repositories import LoadRepository, UserRepository
from logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class MarketplaceMetrics:
    """Platform-wide counters shown on the admin dashboard."""

    total_users: int
    total_drivers: int
    total_shippers: int
    active_loads: int
    completed_trips: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class DriverMetrics:
    """Counters shown on a driver's dashboard."""

    active_loads: int
    completed_trips: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


class MetricsCollector:
    """Collect dashboard metrics."""

    def __init__(self, db: Session):
        """
        Initialize metrics collector.

        Args:
            db: Database session
        """
        self.db = db
        self.loads = LoadRepository(db)
        self.users = UserRepository(db)

    def get_marketplace_metrics(self, actor: Actor) -> MarketplaceMetrics:
        """
        Platform totals (admins only).

        Active loads are those available or in progress.
        """
        if not actor.is_admin:
            raise PermissionDeniedError("Only admins can view marketplace metrics")

        metrics = MarketplaceMetrics(
            total_users=self.users.count(),
            total_drivers=self.users.count_by_role(UserRole.DRIVER.value),
            total_shippers=self.users.count_by_role(UserRole.SHIPPER.value),
            active_loads=self.loads.count({"status": ACTIVE_STATUSES}),
            completed_trips=self.loads.count({"status": LOAD_COMPLETED}),
        )
        logger.info("Calculated marketplace metrics", **metrics.to_dict())
        return metrics

    def get_driver_metrics(self, driver_id: str) -> DriverMetrics:
        """Loads a driver is currently hauling and has delivered."""
        return DriverMetrics(
            active_loads=self.loads.count({"driver_id": driver_id, "status": LOAD_IN_PROGRESS}),
            completed_trips=self.loads.count({"driver_id": driver_id, "status": LOAD_COMPLETED}),
        )
