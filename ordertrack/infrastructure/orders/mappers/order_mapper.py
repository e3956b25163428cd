"""Mapper for Order ORM ↔ Domain conversion."""

from ordertrack.domain.common.value_objects.ids import OrderId, UserId
from ordertrack.domain.orders.entities.order import Order
from ordertrack.models import Order as OrderORM


class OrderMapper:
    """Mapper for Order ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: OrderORM) -> Order:
        """Convert ORM model to domain entity."""
        return Order.create_with_id(
            id=OrderId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            product_name=orm_model.product_name,
            delivery_date=orm_model.delivery_date,
            status=orm_model.status,
            total=orm_model.total,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Order, orm_model: OrderORM | None = None) -> OrderORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Only the mutable fields; the owning user never changes
            orm_model.delivery_date = domain_entity.delivery_date
            orm_model.total = domain_entity.total
            return orm_model

        # Create new
        return OrderORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            user_id=domain_entity.user_id.value,
            product_name=domain_entity.product_name,
            delivery_date=domain_entity.delivery_date,
            status=domain_entity.status,
            total=domain_entity.total,
        )
