"""Event and event group domain entities."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def ensure_aware(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC so instants stay comparable."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def intervals_overlap(
    a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime
) -> bool:
    """Half-open interval overlap; touching endpoints do not overlap."""
    return a_start < b_end and a_end > b_start


@dataclass
class EventGroup:
    """A named team/shift inside an event.

    ``member_ids`` has set semantics; insertion order is kept for display.
    """

    id: str
    name: str
    color: str = "slate"
    member_ids: list[str] = field(default_factory=list)

    def has_member(self, member_id: str) -> bool:
        return member_id in self.member_ids


@dataclass
class AppEvent:
    """Domain entity for a time-bounded occasion with ordered groups."""

    id: str
    name: str
    start: datetime
    end: datetime
    location: str = ""
    groups: list[EventGroup] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.start = ensure_aware(self.start)
        self.end = ensure_aware(self.end)

    def get_group(self, group_id: str) -> EventGroup | None:
        return next((g for g in self.groups if g.id == group_id), None)

    def group_of(self, member_id: str) -> EventGroup | None:
        """The group holding ``member_id`` in this event, if any."""
        return next((g for g in self.groups if g.has_member(member_id)), None)

    def has_member(self, member_id: str) -> bool:
        return self.group_of(member_id) is not None

    def assigned_member_ids(self) -> list[str]:
        return [member_id for group in self.groups for member_id in group.member_ids]

    def overlaps(self, other: "AppEvent") -> bool:
        return intervals_overlap(self.start, self.end, other.start, other.end)
