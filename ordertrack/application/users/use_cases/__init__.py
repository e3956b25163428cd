from .user_command_use_case import UserCommandUseCase
from .user_query_use_case import UserQueryUseCase

__all__ = [
    "UserCommandUseCase",
    "UserQueryUseCase",
]
