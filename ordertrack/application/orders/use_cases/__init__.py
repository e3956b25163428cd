from .order_command_use_case import OrderCommandUseCase
from .order_query_use_case import OrderQueryUseCase

__all__ = [
    "OrderCommandUseCase",
    "OrderQueryUseCase",
]
