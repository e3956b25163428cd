"""API routes for user management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ordertrack.application.orders.use_cases.order_query_use_case import OrderQueryUseCase
from ordertrack.application.users.use_cases.user_command_use_case import UserCommandUseCase
from ordertrack.application.users.use_cases.user_query_use_case import UserQueryUseCase
from ordertrack.core import container
from ordertrack.domain.common.exceptions import DomainError
from ordertrack.infrastructure.common.di import inject_use_case
from ordertrack.infrastructure.orders.schemas import OrderResponse
from ordertrack.infrastructure.users.schemas import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

UserIdPath = Annotated[int, Path(ge=0, description="User ID")]


@router.get("", response_model=list[UserResponse])
def list_users(
    user_queries: UserQueryUseCase = Depends(inject_use_case(container.user_query_use_case)),
    order_queries: OrderQueryUseCase = Depends(inject_use_case(container.order_query_use_case)),
) -> list[UserResponse]:
    """List all users with their orders."""
    orders_by_user = order_queries.list_orders_by_user()
    return [
        UserResponse.from_entity(user, orders_by_user.get(user.id, []))
        for user in user_queries.list_users()
    ]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: UserIdPath,
    user_queries: UserQueryUseCase = Depends(inject_use_case(container.user_query_use_case)),
    order_queries: OrderQueryUseCase = Depends(inject_use_case(container.order_query_use_case)),
) -> UserResponse:
    """Get a single user with the user's orders. Returns 404 if it does not exist."""
    user = user_queries.get_user(user_id)
    return UserResponse.from_entity(user, order_queries.list_orders_for_user(user_id))


@router.get("/{user_id}/orders", response_model=list[OrderResponse])
def get_user_orders(
    user_id: UserIdPath,
    user_queries: UserQueryUseCase = Depends(inject_use_case(container.user_query_use_case)),
    order_queries: OrderQueryUseCase = Depends(inject_use_case(container.order_query_use_case)),
) -> list[OrderResponse]:
    """List the orders placed by a user. Returns 404 if the user does not exist."""
    user_queries.get_user(user_id)
    return [OrderResponse.from_entity(o) for o in order_queries.list_orders_for_user(user_id)]


@router.put("/create", response_model=int, status_code=status.HTTP_200_OK)
def create_user(
    request: UserCreateRequest,
    use_case: UserCommandUseCase = Depends(inject_use_case(container.user_command_use_case)),
) -> int:
    """
    Create a user.

    Returns:
        ID of the new user
    """
    try:
        return use_case.create_user(username=request.username, email=request.email)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to create user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/update/{user_id}", status_code=status.HTTP_200_OK)
def update_user(
    user_id: UserIdPath,
    request: UserUpdateRequest,
    use_case: UserCommandUseCase = Depends(inject_use_case(container.user_command_use_case)),
) -> None:
    """
    Update a user's username and/or email.

    - To change the username: provide `username`
    - To change the email: provide `email`
    """
    try:
        use_case.update_user(user_id=user_id, username=request.username, email=request.email)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to update user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{user_id}", status_code=status.HTTP_200_OK)
def delete_user(
    user_id: UserIdPath,
    use_case: UserCommandUseCase = Depends(inject_use_case(container.user_command_use_case)),
) -> None:
    """Delete a user and the user's orders. Returns 404 if it does not exist."""
    try:
        use_case.delete_user(user_id)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to delete user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
