"""Load lifecycle management.

State machine:

    available --accept--> in_progress --complete--> completed
    available --delete--> (removed)
    available --cancel--> cancelled
    in_progress --cancel assignment--> available

Every transition is one conditional write whose predicate encodes the
required pre-state. The state write is committed before the counterparty
is notified; a lost notification never rolls back a transition.
"""
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from constants import MAX_BID_MESSAGE_LENGTH
from exceptions import (
    InvalidStateTransition,
    LoadAlreadyTaken,
    LoadNotFoundError,
    PermissionDeniedError,
    PersistenceError,
)
from logging_config import get_logger
from models import Actor, Bid, Load, LoadStatus, UserProfile
from repositories import BidRepository, LoadRepository, UserRepository
from services.notification_service import NotificationService
from utils.date_helpers import format_datetime_display, utcnow
from utils.validation import (
    optional_string,
    parse_amount,
    validate_load_attributes,
    validate_positive_amount,
)

logger = get_logger(__name__)


class LoadLifecycleManager:
    """Owns the status of loads and the notifications its transitions emit."""

    def __init__(self, db: Session, notifier: Optional[NotificationService] = None):
        """
        Initialize lifecycle manager.

        Args:
            db: Database session
            notifier: Notification service (default: one bound to db)
        """
        self.db = db
        self.loads = LoadRepository(db)
        self.bids = BidRepository(db)
        self.users = UserRepository(db)
        self.notifier = notifier or NotificationService(db)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_load(self, load_id: str) -> Load:
        """
        Get a load.

        Raises:
            LoadNotFoundError: If no load has this id
        """
        load = self.loads.get_by_id(load_id)
        if not load:
            raise LoadNotFoundError(f"Load {load_id} not found")
        return load

    def list_available_loads(
        self,
        body_type: Optional[str] = None,
        origin: Optional[str] = None,
        destination: Optional[str] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[Load]:
        """Loads drivers can still accept."""
        return self.loads.get_available(body_type, origin, destination, skip, limit)

    def list_loads_for_user(self, user_id: str, skip: int = 0, limit: int = 100) -> List[Load]:
        """Loads the user posted or is driving."""
        return self.loads.get_for_user(user_id, skip, limit)

    def list_all_loads(self, actor: Actor, skip: int = 0, limit: int = 100) -> List[Load]:
        """Every load (admins only)."""
        if not actor.is_admin:
            raise PermissionDeniedError("Only admins can list all loads")
        return self.loads.get_all(skip, limit)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def post_load(self, actor: Actor, attributes: Dict[str, Any]) -> Load:
        """
        Create a load in state available, owned by the actor.

        Args:
            actor: Shipper (or admin) posting the load
            attributes: Form values (see utils.validation.validate_load_attributes)

        Returns:
            Created load

        Raises:
            PermissionDeniedError: If the actor is a driver
            ValidationError: If attributes are invalid
            PersistenceError: If the insert fails
        """
        if not (actor.is_shipper or actor.is_admin):
            raise PermissionDeniedError("Only shippers can post loads")

        fields = validate_load_attributes(attributes)

        load = self.loads.create(
            owner_id=actor.id,
            driver_id=None,
            status=LoadStatus.AVAILABLE.value,
            **fields,
        )

        logger.info(
            "Load posted",
            load_id=load.id,
            owner_id=actor.id,
            origin=load.origin,
            destination=load.destination,
            distance_km=load.distance,
        )
        return load

    def accept_load(
        self,
        load_id: str,
        actor: Actor,
        driver_name: Optional[str] = None,
        driver_phone: Optional[str] = None
    ) -> Load:
        """
        Assign an available load to the acting driver.

        Only one of several concurrent acceptances can match the
        `status = available AND driver_id IS NULL` predicate.

        Args:
            load_id: Load to accept
            actor: Accepting driver
            driver_name: Name shown to the shipper (default: from profile)
            driver_phone: Phone shown to the shipper (default: from profile)

        Returns:
            Updated load

        Raises:
            LoadAlreadyTaken: If another driver holds the load
            InvalidStateTransition: If the load is not available
        """
        if not actor.is_driver:
            raise PermissionDeniedError("Only drivers can accept loads")

        load = self._get_load(load_id)

        if load.driver_id is not None or load.status in (
            LoadStatus.IN_PROGRESS.value, LoadStatus.COMPLETED.value
        ):
            raise LoadAlreadyTaken(
                f"Load {load_id} was already taken", load_id=load_id, status=load.status
            )
        self._require_status(load, LoadStatus.AVAILABLE, "accept")

        if not self.loads.assign_driver(load_id, actor.id):
            logger.info("Lost acceptance race", load_id=load_id, driver_id=actor.id)
            raise LoadAlreadyTaken(f"Load {load_id} was already taken", load_id=load_id)

        logger.info("Load accepted", load_id=load_id, driver_id=actor.id)

        if driver_name is None or driver_phone is None:
            profile = self._lookup_profile(actor.id)
            if profile:
                driver_name = driver_name or profile.full_name
                driver_phone = driver_phone or profile.phone

        self.notifier.notify(
            load.owner_id,
            "accepted",
            self._route_data(load, driver_name=driver_name, driver_phone=driver_phone),
            load_id=load_id,
        )
        return self.get_load(load_id)

    def complete_load(self, load_id: str, actor: Actor, driver_name: Optional[str] = None) -> Load:
        """
        Mark an in-progress load as delivered.

        Args:
            load_id: Load to complete
            actor: Assigned driver, or an admin
            driver_name: Name shown to the shipper (default: from profile)

        Returns:
            Updated load

        Raises:
            InvalidStateTransition: If the load is not in_progress
            PermissionDeniedError: If the actor is not the assigned driver
        """
        load = self._get_load(load_id)
        self._require_status(load, LoadStatus.IN_PROGRESS, "complete")

        if not actor.is_admin and load.driver_id != actor.id:
            raise PermissionDeniedError("Only the assigned driver can complete this load")

        driver_id = load.driver_id
        if not self.loads.mark_completed(load_id, None if actor.is_admin else actor.id):
            raise InvalidStateTransition(
                f"Load {load_id} is no longer in progress", load_id=load_id
            )

        completed_at = utcnow()
        logger.info("Load completed", load_id=load_id, driver_id=driver_id)

        if driver_name is None:
            profile = self._lookup_profile(driver_id)
            driver_name = profile.full_name if profile else None

        self.notifier.notify(
            load.owner_id,
            "completed",
            self._route_data(
                load,
                driver_name=driver_name,
                completed_at=format_datetime_display(completed_at),
            ),
            load_id=load_id,
        )
        return self.get_load(load_id)

    def cancel_load_assignment(self, load_id: str, actor: Actor) -> Load:
        """
        Release the driver of an in-progress load; the load is available again.

        Args:
            load_id: Load to release
            actor: Assigned driver, owner, or an admin

        Returns:
            Updated load

        Raises:
            InvalidStateTransition: If the load is not in_progress
        """
        load = self._get_load(load_id)
        self._require_status(load, LoadStatus.IN_PROGRESS, "cancel the assignment of")

        driver_id = load.driver_id
        if actor.id == driver_id:
            released_by = "driver"
        elif actor.id == load.owner_id:
            released_by = "shipper"
        elif actor.is_admin:
            released_by = "administrator"
        else:
            raise PermissionDeniedError("Only the driver, shipper or an admin can release this load")

        if not self.loads.release_driver(load_id, driver_id):
            raise InvalidStateTransition(
                f"Load {load_id} is no longer assigned to driver {driver_id}", load_id=load_id
            )

        logger.info("Assignment released", load_id=load_id, driver_id=driver_id, released_by=released_by)

        data = self._route_data(load, released_by=released_by)
        self.notifier.notify(load.owner_id, "released", data, load_id=load_id)
        if actor.id != driver_id:
            self.notifier.notify(driver_id, "released", data, load_id=load_id)

        return self.get_load(load_id)

    def cancel_load(self, load_id: str, actor: Actor) -> Load:
        """
        Withdraw an available load; cancelled is terminal.

        Raises:
            InvalidStateTransition: If the load is not available
        """
        load = self._get_load(load_id)
        self._require_owner_or_admin(load, actor, "cancel")
        self._require_status(load, LoadStatus.AVAILABLE, "cancel")

        if not self.loads.mark_cancelled(load_id):
            raise InvalidStateTransition(f"Load {load_id} is no longer available", load_id=load_id)

        logger.info("Load cancelled", load_id=load_id, actor_id=actor.id)

        if actor.id != load.owner_id:
            self.notifier.notify(load.owner_id, "cancelled", self._route_data(load), load_id=load_id)

        return self.get_load(load_id)

    def delete_load(self, load_id: str, actor: Actor) -> None:
        """
        Remove a load that has not been accepted.

        Raises:
            InvalidStateTransition: If the load is not available
        """
        load = self._get_load(load_id)
        self._require_owner_or_admin(load, actor, "delete")
        self._require_status(load, LoadStatus.AVAILABLE, "delete")

        if not self.loads.delete_if_available(load_id):
            raise InvalidStateTransition(f"Load {load_id} is no longer available", load_id=load_id)

        logger.info("Load deleted", load_id=load_id, actor_id=actor.id)

    # ------------------------------------------------------------------
    # Bids
    # ------------------------------------------------------------------

    def submit_bid(
        self,
        load_id: str,
        actor: Actor,
        price: Any,
        message: Optional[str] = None
    ) -> Bid:
        """
        Offer a price on an available load. The load itself is unchanged.

        Raises:
            InvalidStateTransition: If the load is not available
            ValidationError: If the price is not a positive number
        """
        if not actor.is_driver:
            raise PermissionDeniedError("Only drivers can bid on loads")

        load = self._get_load(load_id)
        self._require_status(load, LoadStatus.AVAILABLE, "bid on")

        price = validate_positive_amount(parse_amount(price, "Bid price"), "Bid price")
        message = optional_string(message, "Bid message", MAX_BID_MESSAGE_LENGTH)

        bid = self.bids.create(load_id=load_id, driver_id=actor.id, price=price, message=message)
        logger.info("Bid submitted", load_id=load_id, driver_id=actor.id, price=price)

        profile = self._lookup_profile(actor.id)
        self.notifier.notify(
            load.owner_id,
            "bid",
            self._route_data(load, driver_name=profile.full_name if profile else None, price=price),
            load_id=load_id,
        )
        return bid

    def list_bids(self, load_id: str, actor: Actor) -> List[Bid]:
        """
        Bids on a load. Owners and admins see all bids, drivers their own.
        """
        load = self._get_load(load_id)

        if actor.is_admin or actor.id == load.owner_id:
            return self.bids.get_by_load(load_id)

        if actor.is_driver:
            return self.bids.get_by_load_and_driver(load_id, actor.id)

        raise PermissionDeniedError("Only the shipper can see bids on this load")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_load(self, load_id: str) -> Load:
        return self.get_load(load_id)

    def _lookup_profile(self, user_id: str) -> Optional[UserProfile]:
        """Profile used to personalize a notification; None when unreadable."""
        try:
            return self.users.get_by_id(user_id)
        except PersistenceError as e:
            logger.warning("Profile lookup for notification failed", user_id=user_id, error=str(e))
            return None

    @staticmethod
    def _require_status(load: Load, required: LoadStatus, action: str) -> None:
        if load.status != required.value:
            raise InvalidStateTransition(
                f"Cannot {action} load {load.id} while it is {load.status}",
                load_id=load.id,
                status=load.status,
            )

    @staticmethod
    def _require_owner_or_admin(load: Load, actor: Actor, action: str) -> None:
        if not actor.is_admin and actor.id != load.owner_id:
            raise PermissionDeniedError(f"Only the shipper or an admin can {action} this load")

    @staticmethod
    def _route_data(load: Load, **extra: Any) -> Dict[str, Any]:
        return {"origin": load.origin, "destination": load.destination, **extra}
