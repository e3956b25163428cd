from .order_repository import OrderRepositoryProtocol

__all__ = ["OrderRepositoryProtocol"]
