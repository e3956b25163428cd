"""
Order entity.

An order belongs to exactly one user for its whole lifetime. Only the
delivery date and the total change after creation, and the delivery date
can only move forward.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from ordertrack.domain.common.entity import Entity
from ordertrack.domain.common.exceptions import ValidationError
from ordertrack.domain.common.value_objects.ids import OrderId, UserId
from ordertrack.domain.orders.exceptions import DeliveryDateRegressionError


class OrderStatus(str, Enum):
    """Closed set of order states. Set at creation, never transitioned here."""

    CREATED = "CREATED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


@dataclass(eq=False)
class Order(Entity[OrderId]):
    """
    Order placed by a user.

    Business Rules:
    - Owning user is required and immutable
    - Delivery date, status and total are required
    - Total is an arbitrary precision Decimal (non-negative by convention, not enforced)
    - On update the delivery date may stay the same or move later, never earlier
    """

    id: OrderId
    user_id: UserId
    product_name: str
    delivery_date: date
    status: OrderStatus
    total: Decimal
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.user_id is None:
            raise ValidationError("Order must belong to a user", field="user_id")
        if self.product_name is None:
            raise ValidationError("Product name is required", field="product_name")
        if self.delivery_date is None:
            raise ValidationError("Delivery date is required", field="delivery_date")
        if not isinstance(self.status, OrderStatus):
            raise ValidationError("Order status is required", field="status", value=self.status)
        if self.total is None:
            raise ValidationError("Order total is required", field="total")

    def reschedule_delivery(self, new_date: date) -> None:
        """
        Move the delivery date.

        Raises:
            DeliveryDateRegressionError: If new_date is earlier than the stored date
        """
        if new_date < self.delivery_date:
            raise DeliveryDateRegressionError(self.delivery_date, new_date)
        self.delivery_date = new_date

    def update_total(self, new_total: Decimal) -> None:
        self.total = new_total

    @classmethod
    def create(
        cls,
        user_id: UserId,
        product_name: str,
        delivery_date: date,
        status: OrderStatus,
        total: Decimal,
    ) -> "Order":
        """Create a new order (ID will be 0 until persisted)."""
        return cls(
            id=OrderId.generate(),
            user_id=user_id,
            product_name=product_name,
            delivery_date=delivery_date,
            status=status,
            total=total,
        )

    @classmethod
    def create_with_id(
        cls,
        id: OrderId,
        user_id: UserId,
        product_name: str,
        delivery_date: date,
        status: OrderStatus,
        total: Decimal,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "Order":
        """Reconstitute an order from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            product_name=product_name,
            delivery_date=delivery_date,
            status=status,
            total=total,
            created_at=created_at,
            updated_at=updated_at,
        )
