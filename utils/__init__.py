"""Utility modules."""
from utils.date_helpers import (
    get_current_utc,
    utcnow,
    today_in_timezone,
    parse_date,
)
from utils.geo import (
    haversine_km,
    lookup_city,
    validate_coordinates,
)

__all__ = [
    "get_current_utc",
    "utcnow",
    "today_in_timezone",
    "parse_date",
    "haversine_km",
    "lookup_city",
    "validate_coordinates",
]
