"""Geographic helpers for route distance."""
import math
from typing import Optional, Tuple

from constants import EARTH_RADIUS_KM, SAUDI_CITIES
from exceptions import ValidationError


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> int:
    """
    Great-circle distance between two points.

    Args:
        lat1, lon1: First point in decimal degrees
        lat2, lon2: Second point in decimal degrees

    Returns:
        Distance in kilometers, rounded to the nearest whole km
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return round(EARTH_RADIUS_KM * c)


def validate_coordinates(
    lat: Optional[float],
    lng: Optional[float],
    label: str = "Location"
) -> Optional[Tuple[float, float]]:
    """
    Validate an optional latitude/longitude pair.

    Both values must be given together or not at all.

    Returns:
        (lat, lng) tuple, or None when both are absent

    Raises:
        ValidationError: If only one value is set or a value is out of range
    """
    lat = None if lat == "" else lat
    lng = None if lng == "" else lng

    if lat is None and lng is None:
        return None

    if lat is None or lng is None:
        raise ValidationError(f"{label} needs both latitude and longitude")

    try:
        lat = float(lat)
        lng = float(lng)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{label} coordinates must be numbers") from e

    if not -90 <= lat <= 90:
        raise ValidationError(f"{label} latitude out of range: {lat}")

    if not -180 <= lng <= 180:
        raise ValidationError(f"{label} longitude out of range: {lng}")

    return (lat, lng)


def lookup_city(name: Optional[str]) -> Optional[Tuple[float, float]]:
    """
    Coordinates of a known city, matched by key or display name.

    Returns:
        (lat, lng) tuple, or None for unknown cities
    """
    if not name:
        return None

    key = name.strip().lower().replace(" ", "_")
    if key in SAUDI_CITIES:
        _, lat, lng = SAUDI_CITIES[key]
        return (lat, lng)

    for label, lat, lng in SAUDI_CITIES.values():
        if label.lower() == name.strip().lower():
            return (lat, lng)

    return None
