"""Audit log repository protocol."""

from typing import Protocol

from domain.entities.activity import AuditLogEntry


class IActivityRepository(Protocol):
    """Repository interface for the append-only audit log."""

    def create(self, entry: AuditLogEntry) -> AuditLogEntry:
        """Prepend a new entry."""
        ...

    def get_all(self, limit: int | None = None, offset: int = 0) -> list[AuditLogEntry]:
        """Get entries, newest first."""
        ...

    def count(self) -> int:
        """Number of entries."""
        ...
