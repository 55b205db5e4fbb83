"""Validation utilities for data integrity."""
import re
from datetime import date
from typing import Any, Dict, Optional

from config import get_settings
from constants import (
    DEFAULT_BODY_TYPE,
    DEFAULT_LOAD_TYPE,
    MAX_CITY_NAME_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
)
from exceptions import ValidationError
from logging_config import get_logger
from models.load import BodyType
from utils.date_helpers import parse_date, today_in_timezone
from utils.geo import haversine_km, lookup_city, validate_coordinates

logger = get_logger(__name__)

LOAD_FIELDS = {
    "origin", "destination",
    "origin_lat", "origin_lng", "dest_lat", "dest_lng", "distance",
    "weight", "price",
    "truck_size", "body_type", "load_type", "package_type",
    "description", "pickup_date",
    "receiver_name", "receiver_phone", "receiver_address",
}


def validate_email(email: str) -> str:
    """
    Validate email address format.

    Args:
        email: Email address to validate

    Returns:
        Validated email (lowercase, trimmed)

    Raises:
        ValidationError: If email is invalid
    """
    if not email:
        raise ValidationError("Email cannot be empty")

    normalized = email.lower().strip()

    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'

    if not re.match(pattern, normalized):
        raise ValidationError(f"Invalid email format: {email}")

    return normalized


def validate_phone_number(phone: Optional[str], field_name: str = "Phone number") -> str:
    """
    Validate a local mobile number (05XXXXXXXX by default).

    Spaces and dashes are stripped before matching.

    Args:
        phone: Phone number to validate
        field_name: Name of field for error message

    Returns:
        Normalized phone number (digits only)

    Raises:
        ValidationError: If phone number is invalid
    """
    if not phone:
        raise ValidationError(f"{field_name} is required")

    digits = re.sub(r'[\s-]', '', str(phone))
    pattern = get_settings().receiver_phone_pattern

    if not re.match(pattern, digits):
        raise ValidationError(f"{field_name} must look like 05XXXXXXXX: {phone}")

    return digits


def parse_amount(value: Any, field_name: str = "Amount") -> float:
    """
    Parse a numeric form value.

    Strict mode rejects anything that is not a positive number. With
    PERMISSIVE_NUMERIC_INPUT enabled, unparseable input becomes 0 and
    negative input is clamped to 0.

    Raises:
        ValidationError: If value is missing or invalid in strict mode
    """
    permissive = get_settings().permissive_numeric_input

    if value is None or value == "":
        if permissive:
            return 0.0
        raise ValidationError(f"{field_name} is required")

    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number, got {type(value)}")

    try:
        amount = float(value)
    except (TypeError, ValueError):
        if permissive:
            logger.warning("Coerced invalid numeric input to 0", field=field_name, value=str(value))
            return 0.0
        raise ValidationError(f"{field_name} must be a number: {value}")

    if permissive:
        return amount if 0 < amount < float("inf") else 0.0

    return validate_positive_amount(amount, field_name)


def validate_positive_amount(
    amount: float,
    field_name: str = "Amount",
    allow_zero: bool = False
) -> float:
    """
    Validate that amount is positive (and optionally non-zero).

    Args:
        amount: Amount to validate
        field_name: Name of field for error message
        allow_zero: Whether to allow zero values

    Returns:
        Validated amount

    Raises:
        ValidationError: If amount is invalid
    """
    if amount is None:
        raise ValidationError(f"{field_name} cannot be None")

    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise ValidationError(f"{field_name} must be a number, got {type(amount)}")

    if amount != amount or amount in (float("inf"), float("-inf")):
        raise ValidationError(f"{field_name} must be a finite number")

    if allow_zero:
        if amount < 0:
            raise ValidationError(f"{field_name} must be non-negative, got {amount}")
    else:
        if amount <= 0:
            raise ValidationError(f"{field_name} must be positive, got {amount}")

    return float(amount)


def validate_required_string(
    value: Optional[str],
    field_name: str,
    max_length: Optional[int] = None
) -> str:
    """
    Validate required string field.

    Args:
        value: String value to validate
        field_name: Name of field for error message
        max_length: Maximum allowed length

    Returns:
        Validated string (stripped)

    Raises:
        ValidationError: If string is invalid
    """
    if not value:
        raise ValidationError(f"{field_name} is required")

    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string, got {type(value)}")

    stripped = value.strip()

    if not stripped:
        raise ValidationError(f"{field_name} cannot be empty or whitespace")

    if max_length and len(stripped) > max_length:
        raise ValidationError(
            f"{field_name} must be at most {max_length} characters, "
            f"got {len(stripped)}"
        )

    return stripped


def optional_string(value: Optional[str], field_name: str, max_length: int) -> Optional[str]:
    """Strip an optional string; empty input becomes None."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return validate_required_string(value, field_name, max_length)


def validate_pickup_date(value: Any) -> date:
    """
    Validate that the pickup date is today or later.

    Raises:
        ValidationError: If the date is missing, malformed or in the past
    """
    pickup = parse_date(value, "Pickup date")
    today = today_in_timezone()

    if pickup < today:
        raise ValidationError(f"Pickup date {pickup.isoformat()} is in the past")

    return pickup


def validate_load_attributes(attributes: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate and normalize the attributes of a new load.

    Mandatory: origin, destination, weight, price, pickup_date,
    receiver_name, receiver_phone. Coordinates missing for a known city are
    filled in, and the distance is computed when both ends are located.

    Args:
        attributes: Raw form values

    Returns:
        Column values ready for insertion

    Raises:
        ValidationError: On the first invalid field
    """
    unknown = set(attributes) - LOAD_FIELDS
    if unknown:
        logger.debug("Ignoring unknown load attributes", fields=sorted(unknown))

    origin = validate_required_string(attributes.get("origin"), "Origin", MAX_CITY_NAME_LENGTH)
    destination = validate_required_string(
        attributes.get("destination"), "Destination", MAX_CITY_NAME_LENGTH
    )

    origin_point = validate_coordinates(
        attributes.get("origin_lat"), attributes.get("origin_lng"), "Origin"
    ) or lookup_city(origin)
    dest_point = validate_coordinates(
        attributes.get("dest_lat"), attributes.get("dest_lng"), "Destination"
    ) or lookup_city(destination)

    if origin_point and dest_point:
        distance = haversine_km(*origin_point, *dest_point)
    elif attributes.get("distance") not in (None, ""):
        distance = validate_positive_amount(
            _to_float(attributes["distance"], "Distance"), "Distance", allow_zero=True
        )
    else:
        distance = None

    body_type = attributes.get("body_type") or DEFAULT_BODY_TYPE
    try:
        body_type = BodyType(body_type).value
    except ValueError as e:
        raise ValidationError(f"Unknown body type: {body_type}") from e

    return {
        "origin": origin,
        "destination": destination,
        "origin_lat": origin_point[0] if origin_point else None,
        "origin_lng": origin_point[1] if origin_point else None,
        "dest_lat": dest_point[0] if dest_point else None,
        "dest_lng": dest_point[1] if dest_point else None,
        "distance": distance,
        "weight": parse_amount(attributes.get("weight"), "Weight"),
        "price": parse_amount(attributes.get("price"), "Price"),
        "truck_size": optional_string(attributes.get("truck_size"), "Truck size", MAX_NAME_LENGTH),
        "body_type": body_type,
        "load_type": optional_string(
            attributes.get("load_type"), "Load type", MAX_NAME_LENGTH
        ) or DEFAULT_LOAD_TYPE,
        "package_type": optional_string(
            attributes.get("package_type"), "Package type", MAX_NAME_LENGTH
        ),
        "description": optional_string(
            attributes.get("description"), "Description", MAX_DESCRIPTION_LENGTH
        ),
        "pickup_date": validate_pickup_date(attributes.get("pickup_date")),
        "receiver_name": validate_required_string(
            attributes.get("receiver_name"), "Receiver name", MAX_NAME_LENGTH
        ),
        "receiver_phone": validate_phone_number(attributes.get("receiver_phone"), "Receiver phone"),
        "receiver_address": optional_string(
            attributes.get("receiver_address"), "Receiver address", MAX_DESCRIPTION_LENGTH
        ),
    }


def _to_float(value: Any, field_name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} must be a number: {value}") from e
