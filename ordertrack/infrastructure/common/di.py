"""FastAPI glue for the use-case container."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from ordertrack.core import container
from ordertrack.database import DatabaseSession

UseCase = TypeVar("UseCase")


def inject_use_case(provider: Provider[UseCase]) -> Callable[[DatabaseSession], UseCase]:
    """
    Turn a container provider into a FastAPI dependency.

    The use case and its repositories are built against the session of the
    current request. The override only lasts for construction: the built
    objects keep their own reference to the session.
    """

    def build(db: DatabaseSession) -> UseCase:
        with container.db.override(db):
            return provider()

    return build
