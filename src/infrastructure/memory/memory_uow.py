"""In-memory Unit of Work implementation."""

from typing import Any, Optional

from infrastructure.memory.repositories.memory_activity_repo import InMemoryActivityRepository
from infrastructure.memory.repositories.memory_attribute_repo import InMemoryAttributeRepository
from infrastructure.memory.repositories.memory_event_repo import InMemoryEventRepository
from infrastructure.memory.repositories.memory_member_repo import InMemoryMemberRepository
from infrastructure.memory.store import InMemoryStore, StoreJournal


class InMemoryUnitOfWork:
    """Unit of Work over an InMemoryStore.

    Entering takes the store lock. Repositories record undo information in a
    journal before their first write, so a read-only unit copies nothing.
    Changes not committed when the context exits, or interrupted by an
    exception, are undone, so every operation applies fully or not at all.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._journal: Optional[StoreJournal] = None

    def _require_active(self) -> StoreJournal:
        if self._journal is None:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._journal

    @property
    def attributes(self) -> InMemoryAttributeRepository:
        """Get attribute definition repository."""
        return InMemoryAttributeRepository(self._store, self._require_active())

    @property
    def members(self) -> InMemoryMemberRepository:
        """Get member repository."""
        return InMemoryMemberRepository(self._store, self._require_active())

    @property
    def events(self) -> InMemoryEventRepository:
        """Get event repository."""
        return InMemoryEventRepository(self._store, self._require_active())

    @property
    def activities(self) -> InMemoryActivityRepository:
        """Get audit log repository."""
        return InMemoryActivityRepository(self._store, self._require_active())

    @property
    def has_pending_changes(self) -> bool:
        """Whether anything was written since entering or the last commit."""
        return self._journal is not None and self._journal.dirty

    def commit(self) -> None:
        """Commit the current transaction."""
        if self._journal is not None:
            self._journal.clear()

    def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._journal is not None and self._journal.dirty:
            self._journal.undo()

    def __enter__(self) -> "InMemoryUnitOfWork":
        """Enter the context manager and lock the store."""
        self._store.lock.acquire()
        self._journal = StoreJournal(self._store)
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager, dropping uncommitted changes."""
        try:
            self.rollback()
        finally:
            self._journal = None
            self._store.lock.release()
