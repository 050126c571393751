"""In-memory implementation of the audit log repository."""

from domain.entities.activity import AuditLogEntry
from infrastructure.memory.store import InMemoryStore, StoreJournal


class InMemoryActivityRepository:
    """In-memory implementation of IActivityRepository.

    Entries are frozen, so they are shared rather than copied. The store keeps
    them oldest first; reads walk the list backwards.
    """

    def __init__(self, store: InMemoryStore, journal: StoreJournal) -> None:
        self._store = store
        self._journal = journal

    def create(self, entry: AuditLogEntry) -> AuditLogEntry:
        """Record a new entry."""
        self._journal.activities()
        self._store.state.activities.append(entry)
        return entry

    def get_all(self, limit: int | None = None, offset: int = 0) -> list[AuditLogEntry]:
        """Get entries, newest first."""
        entries = self._store.state.activities
        stop = len(entries) - max(offset, 0)
        if stop <= 0:
            return []
        start = 0 if limit is None else max(stop - max(limit, 0), 0)
        return entries[start:stop][::-1]

    def count(self) -> int:
        """Number of entries."""
        return len(self._store.state.activities)
