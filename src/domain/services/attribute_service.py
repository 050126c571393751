"""Attribute schema registry service."""

from collections.abc import Callable, Iterable, Sequence
from typing import Optional

import structlog

from core.config import settings
from core.exceptions import (
    AttributeNotFoundError,
    ErrorCode,
    ReorderIndexError,
    ValidationError,
)
from core.providers import IdFactory, new_id
from domain.entities.activity import Actions
from domain.entities.attribute import AttributeDefinition, AttributeType, parse_options
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.activity_service import ActivityService

logger = structlog.get_logger()


def leading_columns(
    definitions: Sequence[AttributeDefinition], count: int | None = None
) -> list[AttributeDefinition]:
    """The first ``count`` definitions; defaults to the configured display count."""
    limit = settings.display_attribute_count if count is None else count
    return list(definitions[: max(limit, 0)])


class AttributeService:
    """Service layer for the ordered set of custom member fields."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        activity_service: Optional["ActivityService"] = None,
        id_factory: IdFactory = new_id,
    ) -> None:
        self._uow_factory = uow_factory
        self._activity = activity_service
        self._id_factory = id_factory

    def get_all(self) -> list[AttributeDefinition]:
        """Get all definitions in registry order."""
        with self._uow_factory() as uow:
            return uow.attributes.get_all()

    def get(self, attribute_id: str) -> AttributeDefinition:
        """Get a definition by ID."""
        with self._uow_factory() as uow:
            definition = uow.attributes.get(attribute_id)
            if not definition:
                raise AttributeNotFoundError(attribute_id)
            return definition

    def display_columns(self, count: int | None = None) -> list[AttributeDefinition]:
        """The leading definitions used as default display and print columns."""
        return leading_columns(self.get_all(), count)

    def define(
        self,
        name: str,
        type: AttributeType | str = AttributeType.TEXT,
        options: str | Iterable[str] | None = None,
    ) -> AttributeDefinition:
        """Append a new definition at the end of the order."""
        name = name.strip()
        if not name:
            raise ValidationError("Attribute name must not be empty")

        try:
            attr_type = AttributeType(type)
        except ValueError:
            raise ValidationError(
                f"Unknown attribute type: {type}",
                details={"allowed": [t.value for t in AttributeType]},
            ) from None

        parsed: tuple[str, ...] = ()
        if attr_type == AttributeType.SELECT:
            parsed = parse_options(options)
            if not parsed:
                raise ValidationError(
                    "Select attributes need at least one option",
                    error_code=ErrorCode.MISSING_SELECT_OPTIONS,
                    details={"name": name},
                )

        definition = AttributeDefinition(
            id=self._id_factory(),
            name=name,
            type=attr_type,
            options=parsed,
        )

        with self._uow_factory() as uow:
            created = uow.attributes.append(definition)
            if self._activity:
                self._activity.log(
                    uow, Actions.ATTRIBUTE_CREATED, f"Created attribute {created.name}"
                )
            uow.commit()

        logger.info("attribute_defined", attribute_id=created.id, type=created.type.value)
        return created

    def remove(self, attribute_id: str) -> None:
        """Remove a definition. Member values for it are left in place."""
        with self._uow_factory() as uow:
            definition = uow.attributes.get(attribute_id)
            if not definition:
                raise AttributeNotFoundError(attribute_id)

            uow.attributes.delete(attribute_id)
            if self._activity:
                self._activity.log(
                    uow, Actions.ATTRIBUTE_DELETED, f"Deleted attribute {definition.name}"
                )
            uow.commit()

        logger.info("attribute_removed", attribute_id=attribute_id)

    def reorder(self, from_index: int, to_index: int) -> list[AttributeDefinition]:
        """Move one definition to a new position, shifting the others.

        Returns the resulting order.
        """
        with self._uow_factory() as uow:
            size = len(uow.attributes.get_all())
            if size == 0 or from_index == to_index:
                return uow.attributes.get_all()
            if not (0 <= from_index < size and 0 <= to_index < size):
                raise ReorderIndexError(from_index, to_index, size)

            uow.attributes.move(from_index, to_index)
            uow.commit()
            return uow.attributes.get_all()
