"""Use case for reading orders."""

from ordertrack.application.orders.protocols.order_repository import OrderRepositoryProtocol
from ordertrack.domain.common.value_objects.ids import OrderId, UserId
from ordertrack.domain.orders.entities.order import Order
from ordertrack.domain.orders.exceptions import OrderNotFoundError


class OrderQueryUseCase:
    """Read-only access to orders."""

    def __init__(self, order_repository: OrderRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.order_repository = order_repository

    def get_order(self, order_id: int) -> Order:
        """
        Get an order by ID.

        Raises:
            OrderNotFoundError: If order is not found
        """
        if order_id < 1:
            raise OrderNotFoundError(order_id)

        order = self.order_repository.find_by_id(OrderId(order_id))
        if not order:
            raise OrderNotFoundError(order_id)
        return order

    def list_orders(self) -> list[Order]:
        return self.order_repository.find_all()

    def list_orders_for_user(self, user_id: int) -> list[Order]:
        """Orders placed by a user; empty if the user has none or does not exist."""
        if user_id < 1:
            return []
        return self.order_repository.find_by_user(UserId(user_id))

    def list_orders_by_user(self) -> dict[UserId, list[Order]]:
        """All orders grouped by owning user, in storage order within each group."""
        grouped: dict[UserId, list[Order]] = {}
        for order in self.order_repository.find_all():
            grouped.setdefault(order.user_id, []).append(order)
        return grouped
