"""Orders domain layer."""

from ordertrack.domain.orders.entities.order import Order, OrderStatus
from ordertrack.domain.orders.exceptions import (
    DeliveryDateRegressionError,
    OrderNotFoundError,
    OrderUserNotFoundError,
)

__all__ = [
    "DeliveryDateRegressionError",
    "Order",
    "OrderNotFoundError",
    "OrderStatus",
    "OrderUserNotFoundError",
]
