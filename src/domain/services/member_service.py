"""Roster service layer: members, their attribute values and search."""

from collections.abc import Callable, Mapping
from typing import Optional

import structlog

from core.exceptions import EventNotFoundError, MemberNotFoundError, ValidationError
from core.providers import IdFactory, new_id
from domain.entities.activity import Actions
from domain.entities.member import AttributeValues, Member
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.activity_service import ActivityService

logger = structlog.get_logger()

# (definition id, exact value)
AttributeFilter = tuple[str, str]


def _require_name(value: str, field_name: str) -> str:
    value = value.strip()
    if not value:
        raise ValidationError(f"{field_name} must not be empty", details={"field": field_name})
    return value


def filter_members(
    members: list[Member],
    query: str | None = None,
    attribute_filter: AttributeFilter | None = None,
) -> list[Member]:
    """Keep members matching the search term and the attribute filter."""
    result = members
    if query:
        result = [m for m in result if m.matches(query)]
    if attribute_filter:
        key, value = attribute_filter
        result = [m for m in result if m.attributes.lookup(key) == value]
    return result


class MemberService:
    """Service layer for the member roster."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        activity_service: Optional["ActivityService"] = None,
        id_factory: IdFactory = new_id,
    ) -> None:
        self._uow_factory = uow_factory
        self._activity = activity_service
        self._id_factory = id_factory

    def get_all(self) -> list[Member]:
        """Get all members in roster order."""
        with self._uow_factory() as uow:
            return uow.members.get_all()

    def get(self, member_id: str) -> Member:
        """Get a member by ID."""
        with self._uow_factory() as uow:
            member = uow.members.get(member_id)
            if not member:
                raise MemberNotFoundError(member_id)
            return member

    def add(
        self,
        first_name: str,
        last_name: str,
        attributes: Mapping[str, str] | None = None,
    ) -> Member:
        """Create a member with a freshly generated id."""
        member = Member(
            id=self._id_factory(),
            first_name=_require_name(first_name, "first_name"),
            last_name=_require_name(last_name, "last_name"),
            attributes=AttributeValues(attributes),
        )

        with self._uow_factory() as uow:
            created = uow.members.create(member)
            if self._activity:
                self._activity.log(
                    uow, Actions.MEMBER_CREATED, f"Created member {created.full_name}"
                )
            uow.commit()

        logger.info("member_added", member_id=created.id)
        return created

    def update(
        self,
        member_id: str,
        first_name: str | None = None,
        last_name: str | None = None,
        attributes: Mapping[str, str] | None = None,
    ) -> Member:
        """Partially update a member.

        Names are replaced when given. ``attributes`` is merged shallowly over
        the stored values; keys missing from the patch stay as they are.
        """
        with self._uow_factory() as uow:
            member = uow.members.get(member_id)
            if not member:
                raise MemberNotFoundError(member_id)

            if first_name is not None:
                member.first_name = _require_name(first_name, "first_name")
            if last_name is not None:
                member.last_name = _require_name(last_name, "last_name")
            if attributes is not None:
                member.attributes = member.attributes.merged(AttributeValues(attributes))

            updated = uow.members.update(member)
            if self._activity:
                self._activity.log(
                    uow, Actions.MEMBER_UPDATED, f"Updated member {updated.full_name}"
                )
            uow.commit()

        logger.info("member_updated", member_id=member_id)
        return updated

    def remove(self, member_id: str) -> None:
        """Delete a member after removing it from every group of every event.

        The cascade and the deletion commit together, so no event is ever
        left pointing at a deleted member.
        """
        with self._uow_factory() as uow:
            member = uow.members.get(member_id)
            if not member:
                raise MemberNotFoundError(member_id)

            released = uow.events.remove_member_everywhere(member_id)
            uow.members.delete(member_id)
            if self._activity:
                self._activity.log(
                    uow, Actions.MEMBER_DELETED, f"Deleted member {member.full_name}"
                )
            uow.commit()

        logger.info("member_removed", member_id=member_id, released_groups=released)

    def find(
        self,
        query: str | None = None,
        attribute_filter: AttributeFilter | None = None,
    ) -> list[Member]:
        """Search names and attribute values, case-insensitively.

        An empty query matches everyone. ``attribute_filter`` keeps only
        members whose value for the given definition equals the given value.
        """
        return filter_members(self.get_all(), query, attribute_filter)

    def available_for_event(
        self,
        event_id: str,
        query: str | None = None,
        attribute_filter: AttributeFilter | None = None,
    ) -> list[Member]:
        """Members matching the search that are not yet placed in the event."""
        with self._uow_factory() as uow:
            event = uow.events.get(event_id)
            if not event:
                raise EventNotFoundError(event_id)
            assigned = set(event.assigned_member_ids())
            candidates = [m for m in uow.members.get_all() if m.id not in assigned]
        return filter_members(candidates, query, attribute_filter)
