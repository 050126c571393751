"""Conflict detection service: advisory double-booking checks."""

from collections.abc import Callable

from core.exceptions import EventNotFoundError
from domain.conflicts import find_conflict, find_conflicts_for_event
from domain.entities.event import AppEvent
from domain.repositories.unit_of_work import IUnitOfWork


class ConflictService:
    """Read-only checks run by callers before deciding to assign.

    A conflict is a normal result, never an error; whether to warn, block
    or proceed is up to the caller.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def find_conflict(self, member_id: str, event_id: str) -> AppEvent | None:
        """First other event overlapping ``event_id`` that already holds the member.

        An unknown or deleted member has no assignments and yields ``None``.
        """
        with self._uow_factory() as uow:
            target = uow.events.get(event_id)
            if not target:
                raise EventNotFoundError(event_id)
            return find_conflict(member_id, target, uow.events.get_all())

    def conflicts_for_event(self, event_id: str) -> dict[str, AppEvent]:
        """Conflicting events for every member currently placed in ``event_id``."""
        with self._uow_factory() as uow:
            target = uow.events.get(event_id)
            if not target:
                raise EventNotFoundError(event_id)
            return find_conflicts_for_event(target, uow.events.get_all())
