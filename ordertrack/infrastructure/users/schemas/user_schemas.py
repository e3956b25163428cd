"""Pydantic schemas for User API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ordertrack.domain.orders.entities.order import Order
from ordertrack.domain.users.entities.user import User
from ordertrack.infrastructure.orders.schemas.order_schemas import OrderResponse


class UserCreateRequest(BaseModel):
    """Schema for creating a user."""

    username: str = Field(..., description="Username")
    email: str = Field(..., description="Email address")


class UserUpdateRequest(BaseModel):
    """Schema for a partial user update. Absent or null fields are left unchanged."""

    username: str | None = Field(None, description="New username")
    email: str | None = Field(None, description="New email address")


class UserResponse(BaseModel):
    """Schema for User response, including the user's orders."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    username: str
    email: str
    created_at: datetime | None
    updated_at: datetime | None
    orders: list[OrderResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, user: User, orders: list[Order]) -> "UserResponse":
        return cls(
            id=user.id.value,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
            orders=[OrderResponse.from_entity(order) for order in orders],
        )
