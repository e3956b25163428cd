"""Use case for creating, updating and deleting users."""

import structlog

from ordertrack.application.users.protocols.user_repository import UserRepositoryProtocol
from ordertrack.domain.common.value_objects.ids import UserId
from ordertrack.domain.users.entities.user import User
from ordertrack.domain.users.exceptions import UserNotFoundError

logger = structlog.get_logger(__name__)


class UserCommandUseCase:
    """Use case for user mutations."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository

    def create_user(self, username: str, email: str) -> int:
        """
        Create a new user.

        Args:
            username: Username (required, non-empty)
            email: Email address (required, non-empty)

        Returns:
            ID assigned to the new user by the store

        Raises:
            ValidationError: If username or email is empty
        """
        user = User.create(username=username, email=email)
        user = self.user_repository.save(user)

        logger.info("user_created", user_id=user.id.value, username=username)

        return user.id.value

    def update_user(
        self,
        user_id: int,
        username: str | None = None,
        email: str | None = None,
    ) -> User:
        """
        Apply a partial update to a user.

        Only the fields that are given are overwritten; the rest keep
        their stored values.

        Args:
            user_id: ID of the user to update
            username: New username (optional)
            email: New email address (optional)

        Returns:
            Updated user entity

        Raises:
            UserNotFoundError: If user is not found
            ValidationError: If a given field is empty
        """
        if user_id < 1:
            raise UserNotFoundError(user_id)

        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)

        if username is not None:
            user.update_username(username)
        if email is not None:
            user.update_email(email)

        user = self.user_repository.save(user)

        logger.info(
            "user_updated",
            user_id=user_id,
            username_changed=username is not None,
            email_changed=email is not None,
        )

        return user

    def delete_user(self, user_id: int) -> None:
        """
        Delete a user together with the user's orders.

        Raises:
            UserNotFoundError: If user is not found
        """
        if user_id < 1:
            raise UserNotFoundError(user_id)

        deleted = self.user_repository.delete(UserId(user_id))
        if not deleted:
            raise UserNotFoundError(user_id)

        logger.info("user_deleted", user_id=user_id)
