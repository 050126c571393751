"""In-memory implementation of the member repository."""

import copy

from domain.entities.member import Member
from infrastructure.memory.store import InMemoryStore, StoreJournal


class InMemoryMemberRepository:
    """In-memory implementation of IMemberRepository."""

    def __init__(self, store: InMemoryStore, journal: StoreJournal) -> None:
        self._store = store
        self._journal = journal

    @property
    def _members(self) -> dict[str, Member]:
        return self._store.state.members

    def get(self, id: str) -> Member | None:
        """Get a member by ID."""
        member = self._members.get(id)
        return copy.deepcopy(member) if member else None

    def get_all(self) -> list[Member]:
        """Get all members in insertion order."""
        return [copy.deepcopy(m) for m in self._members.values()]

    def create(self, member: Member) -> Member:
        """Create a new member."""
        self._journal.members()
        self._members[member.id] = copy.deepcopy(member)
        return copy.deepcopy(member)

    def update(self, member: Member) -> Member:
        """Update an existing member."""
        if member.id not in self._members:
            raise ValueError(f"Member {member.id} not found")
        self._journal.members()
        self._members[member.id] = copy.deepcopy(member)
        return copy.deepcopy(member)

    def delete(self, id: str) -> bool:
        """Delete a member."""
        if id not in self._members:
            return False
        self._journal.members()
        del self._members[id]
        return True
