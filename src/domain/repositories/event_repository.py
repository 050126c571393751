"""Event repository protocol."""

from typing import Protocol

from domain.entities.event import AppEvent, EventGroup


class IEventRepository(Protocol):
    """Repository interface for AppEvent entities and their groups.

    ``add_to_group``, ``remove_from_group``, ``remove_from_event`` and
    ``remove_member_everywhere`` are the only calls that change group
    membership; ``update`` persists event fields and group names but keeps
    the stored member sets.
    """

    def get(self, id: str) -> AppEvent | None:
        """Get an event by ID."""
        ...

    def get_all(self) -> list[AppEvent]:
        """Get all events in store order."""
        ...

    def create(self, event: AppEvent) -> AppEvent:
        """Create a new event."""
        ...

    def update(self, event: AppEvent) -> AppEvent:
        """Update event fields and group names."""
        ...

    def delete(self, id: str) -> bool:
        """Delete an event."""
        ...

    def add_group(self, event_id: str, group: EventGroup) -> EventGroup:
        """Append a group to an event."""
        ...

    def add_to_group(self, event_id: str, group_id: str, member_id: str) -> None:
        """Add a member id to a group's set."""
        ...

    def remove_from_group(self, event_id: str, group_id: str, member_id: str) -> bool:
        """Remove a member id from one group."""
        ...

    def remove_from_event(self, event_id: str, member_id: str) -> int:
        """Remove a member id from every group of one event."""
        ...

    def remove_member_everywhere(self, member_id: str) -> int:
        """Remove a member id from every group of every event."""
        ...
