"""User context schemas."""

from ordertrack.infrastructure.users.schemas.user_schemas import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
