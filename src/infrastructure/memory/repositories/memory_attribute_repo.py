"""In-memory implementation of the attribute definition repository."""

import copy

from domain.entities.attribute import AttributeDefinition
from infrastructure.memory.store import InMemoryStore, StoreJournal


class InMemoryAttributeRepository:
    """In-memory implementation of IAttributeRepository."""

    def __init__(self, store: InMemoryStore, journal: StoreJournal) -> None:
        self._store = store
        self._journal = journal

    @property
    def _definitions(self) -> list[AttributeDefinition]:
        return self._store.state.attributes

    def get(self, id: str) -> AttributeDefinition | None:
        """Get a definition by ID."""
        found = next((d for d in self._definitions if d.id == id), None)
        return copy.deepcopy(found) if found else None

    def get_all(self) -> list[AttributeDefinition]:
        """Get all definitions in registry order."""
        return copy.deepcopy(self._definitions)

    def append(self, definition: AttributeDefinition) -> AttributeDefinition:
        """Add a definition at the end of the order."""
        self._journal.attributes()
        self._definitions.append(copy.deepcopy(definition))
        return copy.deepcopy(definition)

    def delete(self, id: str) -> bool:
        """Delete a definition."""
        for index, definition in enumerate(self._definitions):
            if definition.id == id:
                self._journal.attributes()
                del self._definitions[index]
                return True
        return False

    def move(self, from_index: int, to_index: int) -> None:
        """Move the definition at ``from_index`` to ``to_index``."""
        self._journal.attributes()
        moved = self._definitions.pop(from_index)
        self._definitions.insert(to_index, moved)
