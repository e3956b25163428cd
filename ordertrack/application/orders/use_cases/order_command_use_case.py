"""Use case for creating, updating and deleting orders."""

from datetime import date
from decimal import Decimal

import structlog

from ordertrack.application.orders.protocols.order_repository import OrderRepositoryProtocol
from ordertrack.application.users.use_cases.user_query_use_case import UserQueryUseCase
from ordertrack.domain.common.exceptions import ValidationError
from ordertrack.domain.common.value_objects.ids import OrderId
from ordertrack.domain.orders.entities.order import Order, OrderStatus
from ordertrack.domain.orders.exceptions import (
    DeliveryDateRegressionError,
    OrderNotFoundError,
    OrderUserNotFoundError,
)
from ordertrack.domain.users.exceptions import UserNotFoundError

logger = structlog.get_logger(__name__)


class OrderCommandUseCase:
    """Use case for order mutations."""

    def __init__(
        self,
        order_repository: OrderRepositoryProtocol,
        user_query_use_case: UserQueryUseCase,
    ) -> None:
        """Initialize use case with dependencies."""
        self.order_repository = order_repository
        self.user_query_use_case = user_query_use_case

    def create_order(
        self,
        user_id: int | None,
        product_name: str,
        delivery_date: date,
        status: OrderStatus,
        total: Decimal,
    ) -> int:
        """
        Create an order for an existing user.

        Args:
            user_id: ID of the owning user (required)
            product_name: Product being ordered
            delivery_date: Planned delivery date
            status: Initial status
            total: Order total

        Returns:
            ID assigned to the new order by the store

        Raises:
            ValidationError: If user_id is missing or a required field is absent
            OrderUserNotFoundError: If no user has the given ID
        """
        if user_id is None:
            raise ValidationError("User id is required", field="user_id")

        try:
            user = self.user_query_use_case.get_user(user_id)
        except UserNotFoundError:
            raise OrderUserNotFoundError(user_id) from None

        order = Order.create(
            user_id=user.id,
            product_name=product_name,
            delivery_date=delivery_date,
            status=status,
            total=total,
        )
        order = self.order_repository.save(order)

        logger.info("order_created", order_id=order.id.value, user_id=user_id)

        return order.id.value

    def update_order(
        self,
        order_id: int,
        delivery_date: date | None = None,
        total: Decimal | None = None,
    ) -> Order:
        """
        Apply a partial update to an order.

        The order row is locked while the new delivery date is checked
        against the stored one, so the check and the write see the same
        value. Nothing is written when the check fails.

        Args:
            order_id: ID of the order to update
            delivery_date: New delivery date (optional, not earlier than the current one)
            total: New total (optional)

        Returns:
            Updated order entity

        Raises:
            OrderNotFoundError: If order is not found
            DeliveryDateRegressionError: If delivery_date is earlier than the stored date
        """
        if order_id < 1:
            raise OrderNotFoundError(order_id)

        order = self.order_repository.find_by_id_for_update(OrderId(order_id))
        if not order:
            raise OrderNotFoundError(order_id)

        if delivery_date is not None:
            try:
                order.reschedule_delivery(delivery_date)
            except DeliveryDateRegressionError:
                logger.warning(
                    "order_delivery_date_rejected",
                    order_id=order_id,
                    current=order.delivery_date.isoformat(),
                    requested=delivery_date.isoformat(),
                )
                raise
        if total is not None:
            order.update_total(total)

        order = self.order_repository.save(order)

        logger.info(
            "order_updated",
            order_id=order_id,
            delivery_date_changed=delivery_date is not None,
            total_changed=total is not None,
        )

        return order

    def delete_order(self, order_id: int) -> None:
        """
        Delete an order.

        Raises:
            OrderNotFoundError: If order is not found
        """
        if order_id < 1:
            raise OrderNotFoundError(order_id)

        deleted = self.order_repository.delete(OrderId(order_id))
        if not deleted:
            raise OrderNotFoundError(order_id)

        logger.info("order_deleted", order_id=order_id)
