"""Activity service layer for recording and querying the audit log."""

from collections.abc import Callable

from core.config import settings
from core.providers import ActorProvider, Clock, IdFactory, fixed_actor, new_id, utc_now
from domain.entities.activity import AuditLogEntry
from domain.repositories.unit_of_work import IUnitOfWork


class ActivityService:
    """Service layer for the append-only audit log.

    Entries are never updated or deleted. The log grows without bound for
    the lifetime of the store.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        id_factory: IdFactory = new_id,
        clock: Clock = utc_now,
        actor_provider: ActorProvider | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._id_factory = id_factory
        self._clock = clock
        self._actor = actor_provider or fixed_actor(settings.system_actor)

    def log(
        self,
        uow: IUnitOfWork,
        action: str,
        details: str,
        actor: str | None = None,
    ) -> AuditLogEntry:
        """Record an entry within an existing UoW transaction.

        This method is designed to be called from other services within
        their existing transaction context, so the entry is committed or
        rolled back together with the change it describes.

        Args:
            uow: The active Unit of Work (caller manages commit).
            action: The action string (use Actions constants).
            details: Human-readable summary of the change.
            actor: Operator identity; defaults to the injected actor provider.

        Returns:
            The created AuditLogEntry.
        """
        entry = AuditLogEntry(
            id=self._id_factory(),
            timestamp=self._clock(),
            actor=actor or self._actor(),
            action=action,
            details=details,
        )
        return uow.activities.create(entry)

    def record(self, action: str, details: str, actor: str | None = None) -> AuditLogEntry:
        """Record an entry in its own transaction.

        Used by collaborators outside the engine, such as sign-in and
        sign-out, that share the same log.
        """
        with self._uow_factory() as uow:
            entry = self.log(uow, action, details, actor=actor)
            uow.commit()
            return entry

    def list_log(self, limit: int | None = None, offset: int = 0) -> list[AuditLogEntry]:
        """Get audit log entries, newest first."""
        with self._uow_factory() as uow:
            return uow.activities.get_all(limit=limit, offset=offset)

    def count(self) -> int:
        """Total number of audit log entries."""
        with self._uow_factory() as uow:
            return uow.activities.count()
