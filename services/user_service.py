"""User profile service."""
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from constants import MAX_NAME_LENGTH
from exceptions import PermissionDeniedError, UserNotFoundError, ValidationError
from models import Actor, UserProfile, UserRole
from repositories import UserRepository
from utils.validation import validate_email, validate_phone_number, validate_required_string


class UserService:
    """Profiles and roles of marketplace users.

    Sign-up and sessions belong to the authentication provider; this
    service only keeps the profile record keyed by the provider's user id.
    """

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def create_profile(
        self,
        user_id: str,
        full_name: str,
        role: Union[UserRole, str],
        email: Optional[str] = None,
        phone: Optional[str] = None,
        avatar_url: Optional[str] = None
    ) -> UserProfile:
        """
        Create the profile and role record for an authenticated user.

        Raises:
            ValidationError: On invalid fields or a duplicate user id
        """
        user_id = validate_required_string(user_id, "User ID", 36)

        try:
            role = UserRole(role)
        except ValueError as e:
            raise ValidationError(f"Unknown role: {role}") from e

        if self.users.exists(user_id):
            raise ValidationError(f"Profile {user_id} already exists")

        return self.users.create_with_role(
            role.value,
            id=user_id,
            full_name=validate_required_string(full_name, "Full name", MAX_NAME_LENGTH),
            email=validate_email(email) if email else None,
            phone=validate_phone_number(phone) if phone else None,
            avatar_url=avatar_url,
        )

    def get_profile(self, user_id: str) -> UserProfile:
        """
        Get a profile.

        Raises:
            UserNotFoundError: If no profile has this id
        """
        profile = self.users.get_by_id(user_id)
        if not profile:
            raise UserNotFoundError(f"User {user_id} not found")
        return profile

    def get_actor(self, user_id: str) -> Actor:
        """
        Resolve a user id to an Actor carrying the stored role.

        Raises:
            UserNotFoundError: If the user has no profile or no role
        """
        role = self.users.get_role(user_id)
        if role is None:
            raise UserNotFoundError(f"User {user_id} has no role")
        return Actor(id=user_id, role=UserRole(role))

    def list_users(self, actor: Actor, skip: int = 0, limit: int = 100) -> List[UserProfile]:
        """All profiles with their roles (admins only)."""
        if not actor.is_admin:
            raise PermissionDeniedError("Only admins can list users")
        return self.users.get_all_with_roles(skip, limit)
