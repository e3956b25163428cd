"""Use case for reading users."""

from ordertrack.application.users.protocols.user_repository import UserRepositoryProtocol
from ordertrack.domain.common.value_objects.ids import UserId
from ordertrack.domain.users.entities.user import User
from ordertrack.domain.users.exceptions import UserNotFoundError


class UserQueryUseCase:
    """Read-only access to users."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository

    def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If user is not found
        """
        # Stored ids start at 1
        if user_id < 1:
            raise UserNotFoundError(user_id)

        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        return user

    def list_users(self) -> list[User]:
        return self.user_repository.find_all()
