"""API routes for order management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ordertrack.application.orders.use_cases.order_command_use_case import OrderCommandUseCase
from ordertrack.application.orders.use_cases.order_query_use_case import OrderQueryUseCase
from ordertrack.core import container
from ordertrack.domain.common.exceptions import DomainError
from ordertrack.infrastructure.common.di import inject_use_case
from ordertrack.infrastructure.orders.schemas import (
    OrderCreateRequest,
    OrderResponse,
    OrderUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])

OrderIdPath = Annotated[int, Path(ge=0, description="Order ID")]


@router.get("", response_model=list[OrderResponse])
def list_orders(
    use_case: OrderQueryUseCase = Depends(inject_use_case(container.order_query_use_case)),
) -> list[OrderResponse]:
    """List all orders."""
    return [OrderResponse.from_entity(order) for order in use_case.list_orders()]


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: OrderIdPath,
    use_case: OrderQueryUseCase = Depends(inject_use_case(container.order_query_use_case)),
) -> OrderResponse:
    """Get a single order. Returns 404 if it does not exist."""
    return OrderResponse.from_entity(use_case.get_order(order_id))


@router.put("/create", response_model=int, status_code=status.HTTP_200_OK)
def create_order(
    request: OrderCreateRequest,
    use_case: OrderCommandUseCase = Depends(inject_use_case(container.order_command_use_case)),
) -> int:
    """
    Create an order for an existing user.

    Returns:
        ID of the new order

    Raises:
        HTTPException: 400 if userId is missing, the user does not exist,
            or a required field is absent
    """
    try:
        return use_case.create_order(
            user_id=request.user_id,
            product_name=request.product_name,  # type: ignore[arg-type]
            delivery_date=request.delivery_date,  # type: ignore[arg-type]
            status=request.status,  # type: ignore[arg-type]
            total=request.total,  # type: ignore[arg-type]
        )
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to create order: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/update/{order_id}", status_code=status.HTTP_200_OK)
def update_order(
    order_id: OrderIdPath,
    request: OrderUpdateRequest,
    use_case: OrderCommandUseCase = Depends(inject_use_case(container.order_command_use_case)),
) -> None:
    """
    Update an order's delivery date and/or total.

    Raises:
        HTTPException: 404 if the order does not exist, 400 if the delivery
            date would move earlier
    """
    try:
        use_case.update_order(
            order_id=order_id,
            delivery_date=request.delivery_date,
            total=request.total,
        )
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to update order {order_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{order_id}", status_code=status.HTTP_200_OK)
def delete_order(
    order_id: OrderIdPath,
    use_case: OrderCommandUseCase = Depends(inject_use_case(container.order_command_use_case)),
) -> None:
    """Delete an order. Returns 404 if it does not exist."""
    try:
        use_case.delete_order(order_id)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to delete order {order_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
