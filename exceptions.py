"""Custom exceptions for the load board core."""
from typing import Optional


class LoadBoardException(Exception):
    """Base exception for load board errors."""
    pass


class ValidationError(LoadBoardException):
    """Raised when input is malformed or a mandatory field is missing."""
    pass


class PermissionDeniedError(LoadBoardException):
    """Raised when the acting user may not perform an operation."""
    pass


class InvalidStateTransition(LoadBoardException):
    """Raised when a load is not in the state an operation requires."""

    def __init__(self, message: str, load_id: Optional[str] = None, status: Optional[str] = None):
        super().__init__(message)
        self.load_id = load_id
        self.status = status


class LoadAlreadyTaken(InvalidStateTransition):
    """Raised when another driver accepted the load first."""
    pass


class PersistenceError(LoadBoardException):
    """Raised when the storage layer rejects or fails an operation."""
    pass


class NotificationDeliveryError(LoadBoardException):
    """Raised when a notification could not be written."""
    pass


class LoadNotFoundError(LoadBoardException):
    """Raised when load is not found."""
    pass


class UserNotFoundError(LoadBoardException):
    """Raised when a user profile is not found."""
    pass


class TruckNotFoundError(LoadBoardException):
    """Raised when truck is not found."""
    pass


class SubDriverNotFoundError(LoadBoardException):
    """Raised when sub-driver is not found."""
    pass


class ConfigurationError(LoadBoardException):
    """Raised when configuration is invalid or missing."""
    pass
