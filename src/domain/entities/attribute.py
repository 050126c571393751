"""Attribute schema domain entities."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class AttributeType(str, Enum):
    """Value domain of a custom member field."""

    TEXT = "text"
    DATE = "date"
    SELECT = "select"


@dataclass
class AttributeDefinition:
    """Domain entity for a custom field attachable to members."""

    id: str
    name: str
    type: AttributeType = AttributeType.TEXT
    options: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_select(self) -> bool:
        return self.type == AttributeType.SELECT


def parse_options(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize select options.

    Accepts a comma-separated string or a sequence. Entries are trimmed and
    blank entries dropped; duplicates and order are kept as given.
    """
    if raw is None:
        return ()
    parts = raw.split(",") if isinstance(raw, str) else raw
    return tuple(part.strip() for part in parts if part.strip())
