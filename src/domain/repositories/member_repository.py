"""Member repository protocol."""

from typing import Protocol

from domain.entities.member import Member


class IMemberRepository(Protocol):
    """Repository interface for Member entities."""

    def get(self, id: str) -> Member | None:
        """Get a member by ID."""
        ...

    def get_all(self) -> list[Member]:
        """Get all members in insertion order."""
        ...

    def create(self, member: Member) -> Member:
        """Create a new member."""
        ...

    def update(self, member: Member) -> Member:
        """Update an existing member."""
        ...

    def delete(self, id: str) -> bool:
        """Delete a member."""
        ...
