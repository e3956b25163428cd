from .order import Order, OrderStatus

__all__ = ["Order", "OrderStatus"]
