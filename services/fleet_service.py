"""Trucks and sub-drivers belonging to a driver."""
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from constants import MAX_NAME_LENGTH, MAX_PLATE_NUMBER_LENGTH, MIN_TRUCK_MODEL_YEAR
from exceptions import (
    PermissionDeniedError,
    SubDriverNotFoundError,
    TruckNotFoundError,
    ValidationError,
)
from logging_config import get_logger
from models import Actor, SubDriver, Truck, TruckType
from repositories import SubDriverRepository, TruckRepository
from utils.date_helpers import today_in_timezone
from utils.validation import (
    optional_string,
    parse_amount,
    validate_phone_number,
    validate_required_string,
)

logger = get_logger(__name__)


class FleetService:
    """Create, list and delete a driver's trucks and sub-drivers."""

    def __init__(self, db: Session):
        self.db = db
        self.trucks = TruckRepository(db)
        self.sub_drivers = SubDriverRepository(db)

    def add_truck(self, actor: Actor, attributes: Dict[str, Any]) -> Truck:
        """
        Register a truck for the acting driver.

        Raises:
            ValidationError: If plate, type, year or capacity are invalid
        """
        self._require_driver(actor)

        truck_type = attributes.get("truck_type") or TruckType.TRELLA.value
        try:
            truck_type = TruckType(truck_type).value
        except ValueError as e:
            raise ValidationError(f"Unknown truck type: {truck_type}") from e

        truck = self.trucks.create(
            driver_id=actor.id,
            plate_number=validate_required_string(
                attributes.get("plate_number"), "Plate number", MAX_PLATE_NUMBER_LENGTH
            ).upper(),
            brand=optional_string(attributes.get("brand"), "Brand", MAX_NAME_LENGTH),
            model_year=self._validate_model_year(attributes.get("model_year")),
            truck_type=truck_type,
            capacity=parse_amount(attributes["capacity"], "Capacity")
            if attributes.get("capacity") not in (None, "") else None,
        )
        logger.info("Truck registered", driver_id=actor.id, truck_id=truck.id)
        return truck

    def list_trucks(self, actor: Actor) -> List[Truck]:
        """Trucks of the acting driver."""
        return self.trucks.get_by_driver(actor.id)

    def delete_truck(self, actor: Actor, truck_id: str) -> None:
        """Delete one of the actor's trucks (admins may delete any)."""
        truck = self.trucks.get_by_id(truck_id)
        if not truck:
            raise TruckNotFoundError(f"Truck {truck_id} not found")
        self._require_owner(actor, truck.driver_id)
        self.trucks.delete(truck_id)

    def add_sub_driver(self, actor: Actor, attributes: Dict[str, Any]) -> SubDriver:
        """
        Register a sub-driver for the acting driver.

        Raises:
            ValidationError: If name or phone are invalid
        """
        self._require_driver(actor)

        sub_driver = self.sub_drivers.create(
            driver_id=actor.id,
            full_name=validate_required_string(
                attributes.get("full_name"), "Full name", MAX_NAME_LENGTH
            ),
            phone=validate_phone_number(attributes.get("phone")),
            license_number=optional_string(attributes.get("license_number"), "License number", 50),
        )
        logger.info("Sub-driver registered", driver_id=actor.id, sub_driver_id=sub_driver.id)
        return sub_driver

    def list_sub_drivers(self, actor: Actor) -> List[SubDriver]:
        """Sub-drivers of the acting driver."""
        return self.sub_drivers.get_by_driver(actor.id)

    def delete_sub_driver(self, actor: Actor, sub_driver_id: str) -> None:
        """Delete one of the actor's sub-drivers (admins may delete any)."""
        sub_driver = self.sub_drivers.get_by_id(sub_driver_id)
        if not sub_driver:
            raise SubDriverNotFoundError(f"Sub-driver {sub_driver_id} not found")
        self._require_owner(actor, sub_driver.driver_id)
        self.sub_drivers.delete(sub_driver_id)

    @staticmethod
    def _require_driver(actor: Actor) -> None:
        if not actor.is_driver:
            raise PermissionDeniedError("Only drivers can manage a fleet")

    @staticmethod
    def _require_owner(actor: Actor, driver_id: str) -> None:
        if not actor.is_admin and actor.id != driver_id:
            raise PermissionDeniedError("This record belongs to another driver")

    @staticmethod
    def _validate_model_year(value: Any):
        if value in (None, ""):
            return None
        try:
            year = int(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Model year must be a whole number: {value}") from e

        latest = today_in_timezone().year + 1
        if not MIN_TRUCK_MODEL_YEAR <= year <= latest:
            raise ValidationError(
                f"Model year must be between {MIN_TRUCK_MODEL_YEAR} and {latest}, got {year}"
            )
        return year
