from typing import Protocol

from ordertrack.domain.common.value_objects.ids import UserId
from ordertrack.domain.users.entities.user import User


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: UserId) -> User | None: ...

    def find_all(self) -> list[User]: ...

    def save(self, user: User) -> User: ...

    def delete(self, user_id: UserId) -> bool: ...
