"""Environment services injected into the engine: ids, time and actor identity."""

from collections.abc import Callable
from contextvars import ContextVar
from datetime import datetime, timezone
from uuid import uuid4

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]
ActorProvider = Callable[[], str]

# Operator identity of the current request/task, set by the presentation layer.
current_actor: ContextVar[str | None] = ContextVar("current_actor", default=None)


def new_id() -> str:
    """Opaque, globally unique string id."""
    return uuid4().hex


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def fixed_actor(name: str) -> ActorProvider:
    """Actor provider that always reports the same identity."""

    def provider() -> str:
        return name

    return provider


def context_actor(default: str) -> ActorProvider:
    """Actor provider reading ``current_actor``, falling back to ``default``."""

    def provider() -> str:
        return current_actor.get() or default

    return provider
