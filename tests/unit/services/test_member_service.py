"""Unit tests for MemberService."""

from collections.abc import Callable
from datetime import datetime

import pytest

from core.exceptions import EventNotFoundError, MemberNotFoundError, ValidationError
from domain.entities.member import Member
from domain.services.member_service import MemberService
from infrastructure.engine import PlannerEngine


@pytest.fixture
def service(engine: PlannerEngine) -> MemberService:
    return engine.members


@pytest.fixture
def max_(service: MemberService) -> Member:
    return service.add("Max", "Mustermann", {"pos": "Striker", "skill": "Pro"})


# --- add ---


class TestAdd:
    def test_generates_distinct_ids(self, service: MemberService) -> None:
        first = service.add("Max", "Mustermann")
        second = service.add("Max", "Mustermann")

        assert first.id != second.id
        assert len(service.get_all()) == 2

    def test_trims_names(self, service: MemberService) -> None:
        member = service.add("  Julia ", " Müller")

        assert (member.first_name, member.last_name) == ("Julia", "Müller")

    @pytest.mark.parametrize(("first", "last"), [("", "Müller"), ("Julia", "  ")])
    def test_blank_names_are_rejected(self, service: MemberService, first: str, last: str) -> None:
        with pytest.raises(ValidationError):
            service.add(first, last)

        assert service.get_all() == []

    def test_logs_creation(self, engine: PlannerEngine, max_: Member) -> None:
        entry = engine.activity.list_log()[0]

        assert entry.action == "member.created"
        assert entry.details == "Created member Max Mustermann"


# --- update ---


class TestUpdate:
    def test_merges_attributes(self, service: MemberService, max_: Member) -> None:
        updated = service.update(max_.id, attributes={"skill": "Advanced", "dob": "2001-02-03"})

        assert dict(updated.attributes) == {
            "pos": "Striker",
            "skill": "Advanced",
            "dob": "2001-02-03",
        }

    def test_replaces_given_names_only(self, service: MemberService, max_: Member) -> None:
        updated = service.update(max_.id, last_name="Meier")

        assert updated.first_name == "Max"
        assert updated.last_name == "Meier"
        assert service.get(max_.id).last_name == "Meier"

    def test_blank_name_is_rejected_without_change(
        self, service: MemberService, max_: Member
    ) -> None:
        with pytest.raises(ValidationError):
            service.update(max_.id, first_name=" ", attributes={"skill": "Beginner"})

        assert service.get(max_.id) == max_

    def test_unknown_member_raises(self, service: MemberService) -> None:
        with pytest.raises(MemberNotFoundError):
            service.update("ghost", first_name="Max")

    def test_logs_update(self, engine: PlannerEngine, service: MemberService, max_: Member) -> None:
        service.update(max_.id, first_name="Maximilian")

        entry = engine.activity.list_log()[0]
        assert entry.action == "member.updated"
        assert entry.details == "Updated member Maximilian Mustermann"


# --- remove ---


class TestRemove:
    def test_cascades_out_of_every_group(
        self, engine: PlannerEngine, max_: Member, at: Callable[..., datetime]
    ) -> None:
        training = engine.events.create("Training", "Pitch", at(9), at(11))
        match = engine.events.create("Match", "Stadium", at(9, day=1), at(11, day=1))
        red = engine.events.add_group(match.id, "Red")
        engine.assignments.assign(training.id, training.groups[0].id, max_.id)
        engine.assignments.assign(match.id, red.id, max_.id)

        engine.members.remove(max_.id)

        for event in engine.events.get_all():
            assert max_.id not in event.assigned_member_ids()
        with pytest.raises(MemberNotFoundError):
            engine.members.get(max_.id)

    def test_leaves_other_members_in_place(
        self, engine: PlannerEngine, max_: Member, at: Callable[..., datetime]
    ) -> None:
        tim = engine.members.add("Tim", "Werner")
        event = engine.events.create("Training", "Pitch", at(9), at(11))
        group_id = event.groups[0].id
        engine.assignments.assign(event.id, group_id, max_.id)
        engine.assignments.assign(event.id, group_id, tim.id)

        engine.members.remove(max_.id)

        assert engine.events.get(event.id).assigned_member_ids() == [tim.id]

    def test_unknown_member_raises(self, service: MemberService) -> None:
        with pytest.raises(MemberNotFoundError):
            service.remove("ghost")

    def test_logs_deletion(
        self, engine: PlannerEngine, service: MemberService, max_: Member
    ) -> None:
        service.remove(max_.id)

        entry = engine.activity.list_log()[0]
        assert entry.action == "member.deleted"
        assert entry.details == "Deleted member Max Mustermann"


# --- find ---


class TestFind:
    @pytest.fixture
    def roster(self, service: MemberService) -> list[Member]:
        return [
            service.add("Max", "Mustermann", {"pos": "Striker"}),
            service.add("Julia", "Müller", {"pos": "Defender"}),
            service.add("Tim", "Werner", {"pos": "Goalkeeper"}),
        ]

    def test_empty_query_returns_everyone(
        self, service: MemberService, roster: list[Member]
    ) -> None:
        assert service.find("") == roster
        assert service.find(None) == roster

    def test_matches_names(self, service: MemberService, roster: list[Member]) -> None:
        assert [m.first_name for m in service.find("MÜL")] == ["Julia"]

    def test_matches_attribute_values(self, service: MemberService, roster: list[Member]) -> None:
        assert [m.first_name for m in service.find("keeper")] == ["Tim"]

    def test_attribute_filter_is_exact(self, service: MemberService, roster: list[Member]) -> None:
        assert [m.first_name for m in service.find(attribute_filter=("pos", "Defender"))] == [
            "Julia"
        ]
        assert service.find(attribute_filter=("pos", "defender")) == []

    def test_combines_query_and_filter(self, service: MemberService, roster: list[Member]) -> None:
        assert service.find("max", ("pos", "Defender")) == []


# --- available_for_event ---


class TestAvailableForEvent:
    def test_excludes_members_already_placed(
        self, engine: PlannerEngine, max_: Member, at: Callable[..., datetime]
    ) -> None:
        julia = engine.members.add("Julia", "Müller")
        event = engine.events.create("Training", "Pitch", at(9), at(11))
        engine.assignments.assign(event.id, event.groups[0].id, max_.id)

        available = engine.members.available_for_event(event.id)

        assert [m.id for m in available] == [julia.id]

    def test_applies_search(
        self, engine: PlannerEngine, max_: Member, at: Callable[..., datetime]
    ) -> None:
        engine.members.add("Julia", "Müller")
        event = engine.events.create("Training", "Pitch", at(9), at(11))

        assert [m.id for m in engine.members.available_for_event(event.id, "muster")] == [max_.id]

    def test_unknown_event_raises(self, service: MemberService) -> None:
        with pytest.raises(EventNotFoundError):
            service.available_for_event("missing")
