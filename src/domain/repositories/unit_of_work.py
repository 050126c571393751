"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.activity_repository import IActivityRepository
from domain.repositories.attribute_repository import IAttributeRepository
from domain.repositories.event_repository import IEventRepository
from domain.repositories.member_repository import IMemberRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions."""

    attributes: IAttributeRepository
    members: IMemberRepository
    events: IEventRepository
    activities: IActivityRepository

    def commit(self) -> None:
        """Commit the current transaction."""
        ...

    def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    def __enter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
