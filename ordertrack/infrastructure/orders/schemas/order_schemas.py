"""Pydantic schemas for Order API request/response validation."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ordertrack.domain.orders.entities.order import Order, OrderStatus


class OrderCreateRequest(BaseModel):
    """
    Schema for creating an order.

    Every field is optional here so that a missing user id is reported by
    the order service as an invalid argument, before the user lookup.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: int | None = Field(None, alias="userId", description="ID of the owning user")
    product_name: str | None = Field(None, description="Product being ordered")
    delivery_date: date | None = Field(None, description="Planned delivery date")
    status: OrderStatus | None = Field(None, description="Initial order status")
    total: Decimal | None = Field(
        None, description="Order total; send it as a string to keep every digit"
    )


class OrderUpdateRequest(BaseModel):
    """Schema for a partial order update. Absent or null fields are left unchanged."""

    delivery_date: date | None = Field(
        None, description="New delivery date, not earlier than the current one"
    )
    total: Decimal | None = Field(None, description="New order total, as a string or a number")


class OrderResponse(BaseModel):
    """
    Schema for Order response.

    ``total`` is written to JSON as a decimal string so no digits are lost.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    user_id: int
    product_name: str
    delivery_date: date
    status: OrderStatus
    total: Decimal

    @classmethod
    def from_entity(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id.value,
            user_id=order.user_id.value,
            product_name=order.product_name,
            delivery_date=order.delivery_date,
            status=order.status,
            total=order.total,
        )
