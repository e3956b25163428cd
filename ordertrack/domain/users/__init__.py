"""Users domain layer."""

from ordertrack.domain.users.entities.user import User
from ordertrack.domain.users.exceptions import UserNotFoundError

__all__ = [
    "User",
    "UserNotFoundError",
]
