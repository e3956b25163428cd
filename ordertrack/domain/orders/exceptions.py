"""Order domain exceptions."""

from datetime import date

from ordertrack.domain.common.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order cannot be found."""

    def __init__(self, order_id: int) -> None:
        super().__init__("Order", order_id)
        self.order_id = order_id


class OrderUserNotFoundError(ValidationError):
    """Raised when an order references a user that does not exist."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User with id {user_id} does not exist", field="user_id", value=user_id)
        self.user_id = user_id


class DeliveryDateRegressionError(BusinessRuleViolationError):
    """Raised when an update would move a delivery date earlier."""

    def __init__(self, current: date, requested: date) -> None:
        super().__init__(
            "delivery_date_not_earlier",
            f"Delivery date cannot be moved earlier (current {current.isoformat()}, "
            f"requested {requested.isoformat()})",
        )
        self.current = current
        self.requested = requested
