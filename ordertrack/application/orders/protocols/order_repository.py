"""Protocol for Order repository."""

from typing import Protocol

from ordertrack.domain.common.value_objects.ids import OrderId, UserId
from ordertrack.domain.orders.entities.order import Order


class OrderRepositoryProtocol(Protocol):
    """Protocol for Order repository operations."""

    def find_by_id(self, order_id: OrderId) -> Order | None:
        """
        Find an order by ID.

        Returns:
            Order entity if found, None otherwise
        """
        ...

    def find_by_id_for_update(self, order_id: OrderId) -> Order | None:
        """
        Find an order by ID and lock its row until the next save.

        Returns:
            Order entity if found, None otherwise
        """
        ...

    def find_all(self) -> list[Order]:
        """
        Get all orders.

        Returns:
            List of order entities in storage order
        """
        ...

    def find_by_user(self, user_id: UserId) -> list[Order]:
        """
        Get all orders placed by a user.

        Returns:
            List of order entities in storage order
        """
        ...

    def save(self, order: Order) -> Order:
        """
        Save an order entity (create or update).

        Returns:
            Saved order entity with database-generated values
        """
        ...

    def delete(self, order_id: OrderId) -> bool:
        """
        Delete an order.

        Returns:
            True if deleted, False if not found
        """
        ...
