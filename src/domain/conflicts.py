"""Temporal conflict detection between events."""

from collections.abc import Iterable

from domain.entities.event import AppEvent


def find_conflict(
    member_id: str,
    target: AppEvent,
    events: Iterable[AppEvent],
) -> AppEvent | None:
    """Return the first other event that overlaps ``target`` and holds the member.

    Overlap is half-open: events that merely touch do not conflict. ``events``
    is scanned in the order given (store order), so with several conflicting
    events the earliest-created one wins. ``target`` itself is skipped by id.
    """
    for other in events:
        if other.id == target.id:
            continue
        if target.overlaps(other) and other.has_member(member_id):
            return other
    return None


def find_conflicts_for_event(
    target: AppEvent,
    events: Iterable[AppEvent],
) -> dict[str, AppEvent]:
    """Map every member assigned to ``target`` to its first conflicting event."""
    others = list(events)
    conflicts: dict[str, AppEvent] = {}
    for member_id in target.assigned_member_ids():
        conflict = find_conflict(member_id, target, others)
        if conflict:
            conflicts[member_id] = conflict
    return conflicts
