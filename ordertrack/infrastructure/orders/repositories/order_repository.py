"""Repository for Order domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ordertrack.domain.common.value_objects.ids import OrderId, UserId
from ordertrack.domain.orders.entities.order import Order
from ordertrack.infrastructure.orders.mappers.order_mapper import OrderMapper
from ordertrack.models import Order as OrderORM

logger = logging.getLogger(__name__)


class OrderRepository:
    """Repository for Order domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = OrderMapper()

    def find_by_id(self, order_id: OrderId) -> Order | None:
        """
        Find an order by ID.

        Args:
            order_id: The order ID

        Returns:
            Order entity if found, None otherwise
        """
        stmt = select(OrderORM).where(OrderORM.id == order_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_id_for_update(self, order_id: OrderId) -> Order | None:
        """
        Find an order by ID and hold a row lock until the transaction ends.

        SQLite ignores FOR UPDATE; its writes are serialized anyway.

        Args:
            order_id: The order ID

        Returns:
            Order entity if found, None otherwise
        """
        stmt = select(OrderORM).where(OrderORM.id == order_id.value).with_for_update()
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self) -> list[Order]:
        """
        Get all orders.

        Returns:
            List of order entities ordered by ID
        """
        stmt = select(OrderORM).order_by(OrderORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_user(self, user_id: UserId) -> list[Order]:
        """
        Get all orders placed by a user.

        Args:
            user_id: The owning user's ID

        Returns:
            List of order entities ordered by ID
        """
        stmt = select(OrderORM).where(OrderORM.user_id == user_id.value).order_by(OrderORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, order: Order) -> Order:
        """
        Save an order entity (create or update).

        Args:
            order: The order entity to save

        Returns:
            Saved order entity with database-generated values
        """
        if not order.id.is_persisted:
            orm_model = self.mapper.to_orm(order)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            logger.info(f"Created order {orm_model.id} for user {orm_model.user_id}")
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(OrderORM, order.id.value)
        if not orm_model:
            raise ValueError(f"Order {order.id.value} not found")
        self.mapper.to_orm(order, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, order_id: OrderId) -> bool:
        """
        Delete an order.

        Args:
            order_id: The order ID

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(OrderORM, order_id.value)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.commit()
        logger.info(f"Deleted order {order_id.value}")
        return True
