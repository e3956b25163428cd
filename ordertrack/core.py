from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from ordertrack.application.orders.use_cases.order_command_use_case import OrderCommandUseCase
from ordertrack.application.orders.use_cases.order_query_use_case import OrderQueryUseCase
from ordertrack.application.users.use_cases.user_command_use_case import UserCommandUseCase
from ordertrack.application.users.use_cases.user_query_use_case import UserQueryUseCase
from ordertrack.infrastructure.orders.repositories.order_repository import OrderRepository
from ordertrack.infrastructure.users.repositories.user_repository import UserRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    order_repository = providers.Factory(OrderRepository, db=db)

    # Users module use cases
    user_query_use_case = providers.Factory(
        UserQueryUseCase,
        user_repository=user_repository,
    )
    user_command_use_case = providers.Factory(
        UserCommandUseCase,
        user_repository=user_repository,
    )

    # Orders module use cases
    order_query_use_case = providers.Factory(
        OrderQueryUseCase,
        order_repository=order_repository,
    )
    order_command_use_case = providers.Factory(
        OrderCommandUseCase,
        order_repository=order_repository,
        user_query_use_case=user_query_use_case,
    )


# Initialize container
container = Container()
