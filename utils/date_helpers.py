"""Date and time utility functions."""
from datetime import date, datetime
from typing import Optional, Union

import pytz
from config import get_settings
from constants import DATE_FORMAT_ISO, DATETIME_FORMAT_DISPLAY
from exceptions import ValidationError


def get_current_utc() -> datetime:
    """
    Get current UTC datetime.

    Returns:
        Current UTC datetime
    """
    return datetime.now(pytz.UTC)


def utcnow() -> datetime:
    """Naive UTC timestamp for database columns."""
    return get_current_utc().replace(tzinfo=None)


def today_in_timezone(timezone_str: Optional[str] = None) -> date:
    """
    Get today's calendar date in the marketplace timezone.

    Args:
        timezone_str: Timezone name (default: configured TIMEZONE)

    Returns:
        Current local date
    """
    tz = pytz.timezone(timezone_str or get_settings().timezone)
    return get_current_utc().astimezone(tz).date()


def convert_to_timezone(
    dt: datetime,
    timezone_str: Optional[str] = None
) -> datetime:
    """
    Convert datetime to specific timezone.

    Args:
        dt: Datetime to convert (assumed UTC if naive)
        timezone_str: Target timezone (default: configured TIMEZONE)

    Returns:
        Datetime in target timezone
    """
    if dt.tzinfo is None:
        # Assume UTC if naive
        dt = pytz.UTC.localize(dt)

    target_tz = pytz.timezone(timezone_str or get_settings().timezone)
    return dt.astimezone(target_tz)


def parse_date(value: Union[date, datetime, str, None], field_name: str = "Date") -> date:
    """
    Parse a calendar date from a date object or ISO string.

    Args:
        value: Date, datetime or "YYYY-MM-DD" string
        field_name: Name of field for error message

    Returns:
        Parsed date

    Raises:
        ValidationError: If value is missing or not a valid date
    """
    if value is None or value == "":
        raise ValidationError(f"{field_name} is required")

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a date, got {type(value)}")

    text = value.strip()

    try:
        return datetime.strptime(text, DATE_FORMAT_ISO).date()
    except ValueError:
        pass

    # Full ISO timestamps are accepted; any other trailing text is not
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise ValidationError(f"{field_name} must be formatted YYYY-MM-DD: {value}") from e


def format_datetime_display(dt: Optional[datetime]) -> str:
    """
    Format a UTC timestamp in the marketplace timezone for messages.

    Returns:
        Formatted string, or empty string if None
    """
    if dt is None:
        return ""
    return convert_to_timezone(dt).strftime(DATETIME_FORMAT_DISPLAY)
