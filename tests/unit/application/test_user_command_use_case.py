"""Unit tests for the user use cases with a mocked repository."""

from unittest.mock import MagicMock

import pytest

from ordertrack.application.users.use_cases.user_command_use_case import UserCommandUseCase
from ordertrack.application.users.use_cases.user_query_use_case import UserQueryUseCase
from ordertrack.domain.common.exceptions import ValidationError
from ordertrack.domain.common.value_objects.ids import UserId
from ordertrack.domain.users.entities.user import User
from ordertrack.domain.users.exceptions import UserNotFoundError


def stored_user() -> User:
    return User.create_with_id(UserId(5), "testuser", "test@example.com", None, None)


@pytest.fixture
def user_repository() -> MagicMock:
    repository = MagicMock()
    repository.save.side_effect = lambda user: user
    return repository


def test_create_user_returns_store_assigned_id(user_repository: MagicMock) -> None:
    user_repository.save.side_effect = lambda user: User.create_with_id(
        UserId(5), user.username, user.email, None, None
    )

    user_id = UserCommandUseCase(user_repository).create_user("testuser", "test@example.com")

    assert user_id == 5
    saved = user_repository.save.call_args.args[0]
    assert not saved.id.is_persisted


def test_create_user_with_empty_email_is_rejected(user_repository: MagicMock) -> None:
    with pytest.raises(ValidationError):
        UserCommandUseCase(user_repository).create_user("testuser", "")

    user_repository.save.assert_not_called()


def test_update_username_only(user_repository: MagicMock) -> None:
    user_repository.find_by_id.return_value = stored_user()

    updated = UserCommandUseCase(user_repository).update_user(5, username="updateduser")

    assert updated.username == "updateduser"
    assert updated.email == "test@example.com"


def test_update_email_only(user_repository: MagicMock) -> None:
    user_repository.find_by_id.return_value = stored_user()

    updated = UserCommandUseCase(user_repository).update_user(5, email="x")

    assert updated.username == "testuser"
    assert updated.email == "x"


def test_update_missing_user_raises_not_found(user_repository: MagicMock) -> None:
    user_repository.find_by_id.return_value = None

    with pytest.raises(UserNotFoundError):
        UserCommandUseCase(user_repository).update_user(5, username="updateduser")

    user_repository.save.assert_not_called()


def test_delete_missing_user_raises_not_found(user_repository: MagicMock) -> None:
    user_repository.delete.return_value = False

    with pytest.raises(UserNotFoundError, match="User with id 5 not found"):
        UserCommandUseCase(user_repository).delete_user(5)


def test_get_user_raises_not_found(user_repository: MagicMock) -> None:
    user_repository.find_by_id.return_value = None

    with pytest.raises(UserNotFoundError):
        UserQueryUseCase(user_repository).get_user(1)


def test_list_users_empty(user_repository: MagicMock) -> None:
    user_repository.find_all.return_value = []

    assert UserQueryUseCase(user_repository).list_users() == []
