"""Assignment engine: the only way members enter or leave event groups."""

from collections.abc import Callable

import structlog

from core.exceptions import EventNotFoundError, GroupNotFoundError
from domain.entities.event import AppEvent
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class AssignmentService:
    """Places members into event groups under per-event exclusivity.

    Assignments are not written to the audit log; placement is a
    high-frequency interaction and is only traced at debug level.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def assign(self, event_id: str, group_id: str, member_id: str) -> AppEvent:
        """Place a member in a group, moving it out of any other group of the event.

        Idempotent. Cross-event conflicts are not checked here; callers run
        ``ConflictService.find_conflict`` first when they want to warn.
        """
        with self._uow_factory() as uow:
            event = uow.events.get(event_id)
            if not event:
                raise EventNotFoundError(event_id)
            if not event.get_group(group_id):
                raise GroupNotFoundError(event_id, group_id)

            uow.events.remove_from_event(event_id, member_id)
            uow.events.add_to_group(event_id, group_id, member_id)
            uow.commit()
            result = uow.events.get(event_id)

        logger.debug("member_assigned", event_id=event_id, group_id=group_id, member_id=member_id)
        return result  # type: ignore[return-value]

    def unassign(self, event_id: str, group_id: str, member_id: str) -> AppEvent:
        """Remove a member from one group. No-op when it is not there."""
        with self._uow_factory() as uow:
            event = uow.events.get(event_id)
            if not event:
                raise EventNotFoundError(event_id)
            if not event.get_group(group_id):
                raise GroupNotFoundError(event_id, group_id)

            removed = uow.events.remove_from_group(event_id, group_id, member_id)
            uow.commit()
            result = uow.events.get(event_id)

        if removed:
            logger.debug(
                "member_unassigned", event_id=event_id, group_id=group_id, member_id=member_id
            )
        return result  # type: ignore[return-value]
