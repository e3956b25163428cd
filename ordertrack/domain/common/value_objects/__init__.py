"""Common value objects shared across all domain modules."""

from .ids import OrderId, UserId

__all__ = [
    "OrderId",
    "UserId",
]
