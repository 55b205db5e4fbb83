"""Acting user passed explicitly into service calls."""
from dataclasses import dataclass

from models.user import UserRole


@dataclass(frozen=True)
class Actor:
    """Identity and role of the user performing an operation."""

    id: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_driver(self) -> bool:
        return self.role == UserRole.DRIVER

    @property
    def is_shipper(self) -> bool:
        return self.role == UserRole.SHIPPER
