"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.engine import PlannerEngine, build_engine
from infrastructure.memory.store import InMemoryStore


class SequentialIds:
    """Deterministic id factory: id-1, id-2, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self._prefix = prefix
        self._counter = 0

    def __call__(self) -> str:
        self._counter += 1
        return f"{self._prefix}-{self._counter}"


@pytest.fixture
def store() -> InMemoryStore:
    """A fresh, empty store."""
    return InMemoryStore()


@pytest.fixture
def engine(store: InMemoryStore) -> PlannerEngine:
    """Engine with deterministic ids and a fixed operator."""
    return build_engine(
        store=store,
        id_factory=SequentialIds(),
        actor_provider=lambda: "tester@example.com",
    )


@pytest.fixture
def api_engine(store: InMemoryStore) -> PlannerEngine:
    """Engine attributing changes to the X-Actor header, like production."""
    return build_engine(store=store, id_factory=SequentialIds())


@pytest.fixture
async def client(api_engine: PlannerEngine) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client whose routes share the ``api_engine`` fixture."""
    from api.v1.dependencies import get_engine
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_engine] = lambda: api_engine
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
