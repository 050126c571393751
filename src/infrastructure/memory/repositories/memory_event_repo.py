"""In-memory implementation of the event repository."""

import copy

import structlog

from domain.entities.event import AppEvent, EventGroup
from infrastructure.memory.store import InMemoryStore, StoreJournal

logger = structlog.get_logger()


class InMemoryEventRepository:
    """In-memory implementation of IEventRepository."""

    def __init__(self, store: InMemoryStore, journal: StoreJournal) -> None:
        self._store = store
        self._journal = journal

    @property
    def _events(self) -> dict[str, AppEvent]:
        return self._store.state.events

    def _stored(self, event_id: str) -> AppEvent:
        event = self._events.get(event_id)
        if not event:
            raise ValueError(f"Event {event_id} not found")
        return event

    def _writable(self, event_id: str) -> AppEvent:
        """Stored event, journalled before it is changed in place."""
        event = self._stored(event_id)
        self._journal.events(event_id)
        return event

    def _writable_group(self, event_id: str, group_id: str) -> EventGroup:
        group = self._stored(event_id).get_group(group_id)
        if not group:
            raise ValueError(f"Group {group_id} not found in event {event_id}")
        self._journal.events(event_id)
        return group

    def get(self, id: str) -> AppEvent | None:
        """Get an event by ID."""
        event = self._events.get(id)
        return copy.deepcopy(event) if event else None

    def get_all(self) -> list[AppEvent]:
        """Get all events in store order."""
        return [copy.deepcopy(e) for e in self._events.values()]

    def create(self, event: AppEvent) -> AppEvent:
        """Create a new event."""
        self._journal.events()
        self._events[event.id] = copy.deepcopy(event)
        return copy.deepcopy(event)

    def update(self, event: AppEvent) -> AppEvent:
        """Update event fields and group names, keeping stored member sets."""
        stored = self._writable(event.id)
        stored.name = event.name
        stored.location = event.location
        stored.start = event.start
        stored.end = event.end
        for group in event.groups:
            target = stored.get_group(group.id)
            if target:
                target.name = group.name
                target.color = group.color
        return copy.deepcopy(stored)

    def delete(self, id: str) -> bool:
        """Delete an event."""
        if id not in self._events:
            return False
        self._journal.events()
        del self._events[id]
        return True

    def add_group(self, event_id: str, group: EventGroup) -> EventGroup:
        """Append a group to an event."""
        self._writable(event_id).groups.append(copy.deepcopy(group))
        return copy.deepcopy(group)

    def add_to_group(self, event_id: str, group_id: str, member_id: str) -> None:
        """Add a member id to a group's set."""
        group = self._writable_group(event_id, group_id)
        if member_id not in group.member_ids:
            group.member_ids.append(member_id)

    def remove_from_group(self, event_id: str, group_id: str, member_id: str) -> bool:
        """Remove a member id from one group."""
        group = self._writable_group(event_id, group_id)
        if member_id in group.member_ids:
            group.member_ids.remove(member_id)
            return True
        return False

    def remove_from_event(self, event_id: str, member_id: str) -> int:
        """Remove a member id from every group of one event."""
        removed = 0
        for group in self._stored(event_id).groups:
            if member_id in group.member_ids:
                self._journal.events(event_id)
                group.member_ids = [m for m in group.member_ids if m != member_id]
                removed += 1
        return removed

    def remove_member_everywhere(self, member_id: str) -> int:
        """Remove a member id from every group of every event.

        A group that cannot be cleaned is logged and skipped; the sweep always
        visits every event.
        """
        removed = 0
        for event in self._events.values():
            for group in event.groups:
                try:
                    if member_id in group.member_ids:
                        self._journal.events(event.id)
                        group.member_ids = [m for m in group.member_ids if m != member_id]
                        removed += 1
                except (AttributeError, TypeError):
                    logger.warning(
                        "cascade_group_skipped",
                        event_id=event.id,
                        group=repr(group),
                        member_id=member_id,
                    )
        return removed
