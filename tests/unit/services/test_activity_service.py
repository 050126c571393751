"""Unit tests for ActivityService."""

from collections.abc import Callable
from datetime import datetime

import pytest

from core.exceptions import MemberNotFoundError
from domain.entities.activity import Actions, AuditLogEntry
from domain.services.activity_service import ActivityService
from infrastructure.engine import PlannerEngine
from infrastructure.memory.memory_uow import InMemoryUnitOfWork


@pytest.fixture
def service(
    uow_factory: Callable[[], InMemoryUnitOfWork], clock: Callable[[], datetime]
) -> ActivityService:
    counter = iter(range(1, 1000))
    return ActivityService(
        uow_factory,
        id_factory=lambda: f"log-{next(counter)}",
        clock=clock,
        actor_provider=lambda: "julia@example.com",
    )


# --- log ---


class TestLog:
    def test_creates_entry_in_callers_uow(self, uow) -> None:
        service = ActivityService(lambda: uow, actor_provider=lambda: "julia@example.com")
        uow.activities.create.side_effect = lambda entry: entry

        result = service.log(uow, Actions.MEMBER_CREATED, "Created member Max Mustermann")

        assert result.action == "member.created"
        assert result.actor == "julia@example.com"
        uow.activities.create.assert_called_once()
        assert not uow.committed

    def test_explicit_actor_wins(self, uow) -> None:
        service = ActivityService(lambda: uow, actor_provider=lambda: "julia@example.com")
        uow.activities.create.side_effect = lambda entry: entry

        service.log(uow, Actions.SESSION_LOGIN, "Signed in", actor="tim@example.com")

        entry = uow.activities.create.call_args[0][0]
        assert isinstance(entry, AuditLogEntry)
        assert entry.actor == "tim@example.com"

    def test_defaults_to_system_actor(self, uow) -> None:
        service = ActivityService(lambda: uow)
        uow.activities.create.side_effect = lambda entry: entry

        entry = service.log(uow, Actions.EVENT_CREATED, "Created event Training")

        assert entry.actor == "System"


# --- record / list_log ---


class TestRecord:
    def test_record_commits_its_own_entry(self, service: ActivityService) -> None:
        entry = service.record(Actions.SESSION_LOGIN, "Signed in")

        assert service.list_log() == [entry]
        assert entry.id == "log-1"

    def test_list_is_newest_first(self, service: ActivityService) -> None:
        first = service.record(Actions.SESSION_LOGIN, "Signed in")
        second = service.record(Actions.SESSION_LOGOUT, "Signed out")

        log = service.list_log()

        assert [e.id for e in log] == [second.id, first.id]
        assert log[0].timestamp > log[1].timestamp

    def test_pagination(self, service: ActivityService) -> None:
        for i in range(5):
            service.record(Actions.SESSION_LOGIN, f"login {i}")

        page = service.list_log(limit=2, offset=1)

        assert [e.details for e in page] == ["login 3", "login 2"]
        assert service.count() == 5


# --- audit completeness ---


class TestAuditTrail:
    def test_every_audited_change_leaves_one_entry(
        self, engine: PlannerEngine, at: Callable[..., datetime]
    ) -> None:
        position = engine.attributes.define("Position", "select", "Striker")
        member = engine.members.add("Max", "Mustermann")
        engine.members.update(member.id, attributes={position.id: "Striker"})
        event = engine.events.create("Training", "", at(9), at(10))
        engine.events.update(event.id, location="North pitch")
        engine.assignments.assign(event.id, event.groups[0].id, member.id)
        engine.events.remove(event.id)
        engine.members.remove(member.id)
        engine.attributes.remove(position.id)

        actions = [e.action for e in reversed(engine.activity.list_log())]

        assert actions == [
            "attribute.created",
            "member.created",
            "member.updated",
            "event.created",
            "event.updated",
            "event.deleted",
            "member.deleted",
            "attribute.deleted",
        ]
        assert {e.actor for e in engine.activity.list_log()} == {"tester@example.com"}

    def test_failed_operation_leaves_no_entry(self, engine: PlannerEngine) -> None:
        with pytest.raises(MemberNotFoundError):
            engine.members.update("ghost", first_name="Max")

        assert engine.activity.count() == 0
