"""Order context schemas."""

from ordertrack.infrastructure.orders.schemas.order_schemas import (
    OrderCreateRequest,
    OrderResponse,
    OrderUpdateRequest,
)

__all__ = [
    "OrderCreateRequest",
    "OrderResponse",
    "OrderUpdateRequest",
]
