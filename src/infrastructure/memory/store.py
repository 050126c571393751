"""In-memory store holding the whole planner state."""

import copy
import threading
from dataclasses import dataclass, field

from domain.entities.activity import AuditLogEntry
from domain.entities.attribute import AttributeDefinition
from domain.entities.event import AppEvent
from domain.entities.member import Member


@dataclass
class StoreState:
    """Everything the engine owns. Dict order is the store iteration order.

    ``activities`` is append-only and kept oldest first.
    """

    attributes: list[AttributeDefinition] = field(default_factory=list)
    members: dict[str, Member] = field(default_factory=dict)
    events: dict[str, AppEvent] = field(default_factory=dict)
    activities: list[AuditLogEntry] = field(default_factory=list)


class InMemoryStore:
    """Single-writer store.

    One re-entrant lock covers the roster, the events and the log together,
    because the exclusivity invariant and the member-delete cascade span
    several entities. Units of work hold the lock for their whole lifetime.
    """

    def __init__(self, state: StoreState | None = None) -> None:
        self.state = state or StoreState()
        self.lock = threading.RLock()


class StoreJournal:
    """Undo information for one unit of work.

    Repositories report a collection before they first change it. Attribute
    definitions and members are replaced, never changed in place, so a
    shallow copy of their container is enough. Events are changed in place,
    so each one is also deep-copied before its first change. The audit log
    only grows; its length is enough to undo it. Nothing is copied until the
    first write.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self.clear()

    def clear(self) -> None:
        """Forget recorded changes, e.g. after a commit."""
        self._attributes: list[AttributeDefinition] | None = None
        self._members: dict[str, Member] | None = None
        self._events: dict[str, AppEvent] | None = None
        self._event_copies: dict[str, AppEvent] = {}
        self._log_length: int | None = None

    @property
    def dirty(self) -> bool:
        return not (
            self._attributes is None
            and self._members is None
            and self._events is None
            and self._log_length is None
        )

    def attributes(self) -> None:
        if self._attributes is None:
            self._attributes = list(self._store.state.attributes)

    def members(self) -> None:
        if self._members is None:
            self._members = dict(self._store.state.members)

    def events(self, event_id: str | None = None) -> None:
        """Record the event container, and ``event_id`` before an in-place change."""
        if self._events is None:
            self._events = dict(self._store.state.events)
        if event_id is None or event_id in self._event_copies:
            return
        original = self._events.get(event_id)
        if original is not None:
            self._event_copies[event_id] = copy.deepcopy(original)

    def activities(self) -> None:
        if self._log_length is None:
            self._log_length = len(self._store.state.activities)

    def undo(self) -> None:
        """Put every recorded collection back as it was, keeping store order."""
        state = self._store.state
        if self._attributes is not None:
            state.attributes[:] = self._attributes
        if self._members is not None:
            state.members.clear()
            state.members.update(self._members)
        if self._events is not None:
            restored = {
                event_id: self._event_copies.get(event_id, event)
                for event_id, event in self._events.items()
            }
            state.events.clear()
            state.events.update(restored)
        if self._log_length is not None:
            del state.activities[self._log_length :]
        self.clear()
