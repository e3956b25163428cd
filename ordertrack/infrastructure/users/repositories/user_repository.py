"""Repository for User domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ordertrack.domain.common.value_objects.ids import UserId
from ordertrack.domain.users.entities.user import User
from ordertrack.infrastructure.users.mappers.user_mapper import UserMapper
from ordertrack.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self) -> list[User]:
        """
        Get all users.

        Returns:
            List of user entities ordered by ID
        """
        stmt = select(UserORM).order_by(UserORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, user: User) -> User:
        """
        Save a user entity.

        Args:
            user: The user entity to save

        Returns:
            Saved user entity with database-generated values
        """
        if not user.id.is_persisted:
            orm_model = self.mapper.to_orm(user)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(f"Created user {orm_model.username} (id={orm_model.id})")
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(UserORM, user.id.value)
        if not orm_model:
            raise ValueError(f"User with id {user.id.value} not found")

        orm_model = self.mapper.to_orm(user, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.info(f"Updated user {user.id.value}")
        return self.mapper.to_domain(orm_model)

    def delete(self, user_id: UserId) -> bool:
        """
        Delete a user and, through the ORM cascade, the user's orders.

        Args:
            user_id: The user ID

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(UserORM, user_id.value)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.commit()
        logger.info(f"Deleted user {user_id.value}")
        return True
