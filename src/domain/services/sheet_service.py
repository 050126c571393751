"""Read-only roster sheet for printing or exporting an event's groups."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime

from core.exceptions import EventNotFoundError
from core.providers import Clock, utc_now
from domain.entities.attribute import AttributeDefinition
from domain.entities.event import AppEvent
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.attribute_service import leading_columns

MISSING_VALUE = "–"


@dataclass(frozen=True, slots=True)
class SheetRow:
    member_id: str
    first_name: str
    last_name: str
    values: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class SheetSection:
    group_id: str
    group_name: str
    color: str
    rows: tuple[SheetRow, ...]


@dataclass(frozen=True, slots=True)
class RosterSheet:
    """Snapshot of an event's groups with the chosen attribute columns."""

    event: AppEvent
    columns: tuple[AttributeDefinition, ...]
    sections: tuple[SheetSection, ...]
    generated_at: datetime

    @property
    def total_members(self) -> int:
        return sum(len(section.rows) for section in self.sections)


class RosterSheetService:
    """Builds roster sheets from the current event and roster snapshot."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        clock: Clock = utc_now,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock

    def build(self, event_id: str, attribute_ids: Sequence[str] | None = None) -> RosterSheet:
        """Build the sheet for ``event_id``.

        Columns default to the leading attribute definitions; unknown ids in
        ``attribute_ids`` are ignored. Group references to deleted members
        are skipped.
        """
        with self._uow_factory() as uow:
            event = uow.events.get(event_id)
            if not event:
                raise EventNotFoundError(event_id)
            definitions = uow.attributes.get_all()
            members = {m.id: m for m in uow.members.get_all()}

        if attribute_ids is None:
            columns = tuple(leading_columns(definitions))
        else:
            by_id = {d.id: d for d in definitions}
            columns = tuple(by_id[a] for a in attribute_ids if a in by_id)

        sections = []
        for group in event.groups:
            rows = []
            for member_id in group.member_ids:
                member = members.get(member_id)
                if member is None:
                    continue
                rows.append(
                    SheetRow(
                        member_id=member.id,
                        first_name=member.first_name,
                        last_name=member.last_name,
                        values=tuple(
                            member.attributes.lookup(column.id) or MISSING_VALUE
                            for column in columns
                        ),
                    )
                )
            sections.append(
                SheetSection(
                    group_id=group.id,
                    group_name=group.name,
                    color=group.color,
                    rows=tuple(rows),
                )
            )

        return RosterSheet(
            event=event,
            columns=columns,
            sections=tuple(sections),
            generated_at=self._clock(),
        )
