"""Event store service layer: events and their groups."""

from collections.abc import Callable
from datetime import datetime
from typing import Optional

import structlog

from core.config import settings
from core.exceptions import (
    ErrorCode,
    EventNotFoundError,
    GroupNotFoundError,
    ValidationError,
)
from core.providers import Clock, IdFactory, new_id, utc_now
from domain.entities.activity import Actions
from domain.entities.event import AppEvent, EventGroup, ensure_aware
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.activity_service import ActivityService

logger = structlog.get_logger()


def _require_valid_range(start: datetime, end: datetime) -> None:
    if ensure_aware(start) >= ensure_aware(end):
        raise ValidationError(
            "Event start must be before its end",
            error_code=ErrorCode.INVALID_TIME_RANGE,
            details={"start": start.isoformat(), "end": end.isoformat()},
        )


class EventService:
    """Service layer for events and event groups."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        activity_service: Optional["ActivityService"] = None,
        id_factory: IdFactory = new_id,
        clock: Clock = utc_now,
    ) -> None:
        self._uow_factory = uow_factory
        self._activity = activity_service
        self._id_factory = id_factory
        self._clock = clock

    def get_all(self) -> list[AppEvent]:
        """Get all events in store order."""
        with self._uow_factory() as uow:
            return uow.events.get_all()

    def get(self, event_id: str) -> AppEvent:
        """Get an event by ID."""
        with self._uow_factory() as uow:
            event = uow.events.get(event_id)
            if not event:
                raise EventNotFoundError(event_id)
            return event

    def upcoming(self, now: datetime | None = None) -> list[AppEvent]:
        """Events that have not ended yet, earliest start first."""
        reference = ensure_aware(now) if now else self._clock()
        return sorted(
            (e for e in self.get_all() if e.end > reference),
            key=lambda e: e.start,
        )

    def create(
        self,
        name: str,
        location: str,
        start: datetime,
        end: datetime,
    ) -> AppEvent:
        """Create an event holding a single empty default group."""
        name = name.strip()
        if not name:
            raise ValidationError("Event name must not be empty")
        _require_valid_range(start, end)

        event = AppEvent(
            id=self._id_factory(),
            name=name,
            location=location.strip(),
            start=start,
            end=end,
            groups=[
                EventGroup(
                    id=self._id_factory(),
                    name=settings.default_group_name,
                    color=settings.default_group_color,
                )
            ],
        )

        with self._uow_factory() as uow:
            created = uow.events.create(event)
            if self._activity:
                self._activity.log(uow, Actions.EVENT_CREATED, f"Created event {created.name}")
            uow.commit()

        logger.info("event_created", event_id=created.id)
        return created

    def update(
        self,
        event_id: str,
        name: str | None = None,
        location: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> AppEvent:
        """Partially update an event; the resulting range must stay valid."""
        with self._uow_factory() as uow:
            event = uow.events.get(event_id)
            if not event:
                raise EventNotFoundError(event_id)

            if name is not None:
                name = name.strip()
                if not name:
                    raise ValidationError("Event name must not be empty")
                event.name = name
            if location is not None:
                event.location = location.strip()
            new_start = ensure_aware(start) if start is not None else event.start
            new_end = ensure_aware(end) if end is not None else event.end
            _require_valid_range(new_start, new_end)
            event.start, event.end = new_start, new_end

            updated = uow.events.update(event)
            if self._activity:
                self._activity.log(uow, Actions.EVENT_UPDATED, f"Updated event {updated.name}")
            uow.commit()

        logger.info("event_updated", event_id=event_id)
        return updated

    def remove(self, event_id: str) -> None:
        """Delete an event together with its groups."""
        with self._uow_factory() as uow:
            event = uow.events.get(event_id)
            if not event:
                raise EventNotFoundError(event_id)

            uow.events.delete(event_id)
            if self._activity:
                self._activity.log(uow, Actions.EVENT_DELETED, f"Deleted event {event.name}")
            uow.commit()

        logger.info("event_removed", event_id=event_id)

    def add_group(
        self,
        event_id: str,
        name: str | None = None,
        color: str | None = None,
    ) -> EventGroup:
        """Append an empty group. A blank name becomes "Group <n>"."""
        with self._uow_factory() as uow:
            event = uow.events.get(event_id)
            if not event:
                raise EventNotFoundError(event_id)

            label = (name or "").strip() or f"Group {len(event.groups) + 1}"
            group = EventGroup(
                id=self._id_factory(),
                name=label,
                color=color or settings.new_group_color,
            )
            created = uow.events.add_group(event_id, group)
            uow.commit()

        logger.info("group_added", event_id=event_id, group_id=created.id)
        return created

    def rename_group(self, event_id: str, group_id: str, name: str) -> EventGroup | None:
        """Rename a group. A name that trims to empty is ignored.

        Returns the renamed group, or ``None`` when nothing changed.
        """
        name = name.strip()
        if not name:
            return None

        with self._uow_factory() as uow:
            event = uow.events.get(event_id)
            if not event:
                raise EventNotFoundError(event_id)
            group = event.get_group(group_id)
            if not group:
                raise GroupNotFoundError(event_id, group_id)

            group.name = name
            uow.events.update(event)
            uow.commit()

        return group
