"""Attribute definition repository protocol."""

from typing import Protocol

from domain.entities.attribute import AttributeDefinition


class IAttributeRepository(Protocol):
    """Repository interface for the ordered attribute registry."""

    def get(self, id: str) -> AttributeDefinition | None:
        """Get a definition by ID."""
        ...

    def get_all(self) -> list[AttributeDefinition]:
        """Get all definitions in registry order."""
        ...

    def append(self, definition: AttributeDefinition) -> AttributeDefinition:
        """Add a definition at the end of the order."""
        ...

    def delete(self, id: str) -> bool:
        """Delete a definition."""
        ...

    def move(self, from_index: int, to_index: int) -> None:
        """Move the definition at ``from_index`` to ``to_index``."""
        ...
