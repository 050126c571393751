"""Shared fixtures for unit tests."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any
from unittest.mock import MagicMock

import pytest

from infrastructure.memory.memory_uow import InMemoryUnitOfWork
from infrastructure.memory.store import InMemoryStore

MONDAY = datetime(2024, 6, 3, tzinfo=timezone.utc)


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.attributes = MagicMock()
        self.members = MagicMock()
        self.events = MagicMock()
        self.activities = MagicMock()
        self.committed = False
        self.rolled_back = False

    def commit(self) -> None:
        self.committed = True

    def rollback(self) -> None:
        self.rolled_back = True

    def __enter__(self) -> "FakeUnitOfWork":
        return self

    def __exit__(self, *args: Any) -> None:
        pass


class FakeClock:
    """Clock that advances one second per reading."""

    def __init__(self, start: datetime = MONDAY) -> None:
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture
def at() -> Callable[..., datetime]:
    """Build instants on the test Monday: ``at(9)``, ``at(10, 30)``, ``at(9, day=1)``."""

    def make(hour: int, minute: int = 0, day: int = 0) -> datetime:
        return MONDAY + timedelta(days=day, hours=hour, minutes=minute)

    return make


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def uow_factory(store: InMemoryStore) -> Callable[[], InMemoryUnitOfWork]:
    return lambda: InMemoryUnitOfWork(store)


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()
