"""User entity: the account that places orders."""

from dataclasses import dataclass
from datetime import datetime

from ordertrack.domain.common.entity import Entity
from ordertrack.domain.common.exceptions import ValidationError
from ordertrack.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_USERNAME_LENGTH = 255
MAX_EMAIL_LENGTH = 255


def _validate_username(username: str | None) -> None:
    if not username or not username.strip():
        raise ValidationError("Username cannot be empty", field="username", value=username)
    if len(username) > MAX_USERNAME_LENGTH:
        raise ValidationError(
            f"Username cannot exceed {MAX_USERNAME_LENGTH} characters",
            field="username",
            value=username,
        )


def _validate_email(email: str | None) -> None:
    if not email or not email.strip():
        raise ValidationError("Email cannot be empty", field="email", value=email)
    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(
            f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", field="email", value=email
        )


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity.

    Business Rules:
    - Username and email are required and non-empty
    - Uniqueness of username/email is left to storage constraints
    - Timestamps are assigned by the store, never by the domain
    - A user's orders are not held here; they are queried by user id
    """

    id: UserId
    username: str
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_username(self.username)
        _validate_email(self.email)

    def update_username(self, new_username: str) -> None:
        """
        Update the username.

        Raises:
            ValidationError: If username is empty or too long
        """
        _validate_username(new_username)
        self.username = new_username

    def update_email(self, new_email: str) -> None:
        """
        Update the email address.

        Raises:
            ValidationError: If email is empty or too long
        """
        _validate_email(new_email)
        self.email = new_email

    @classmethod
    def create(cls, username: str, email: str) -> "User":
        """Create a new user (ID will be 0 until persisted)."""
        return cls(
            id=UserId.generate(),
            username=username,
            email=email,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        username: str,
        email: str,
        created_at: datetime | None,
        updated_at: datetime | None,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            username=username,
            email=email,
            created_at=created_at,
            updated_at=updated_at,
        )
