"""Port for tag data access."""

from typing import Protocol

from domain.model.vocabulary import Tag


class TagRepository(Protocol):
    """Protocol for tag persistence."""

    def save(self, tag: Tag) -> str | None:
        """Insert a tag. Returns its ID, or None on failure."""
        ...

    def get_by_id(self, tag_id: str) -> Tag | None:
        ...

    def find(self, user_id: str) -> list[Tag]:
        """Get a user's tags sorted by name."""
        ...

    def delete(self, tag_id: str) -> bool:
        """Delete a tag and every word association pointing at it."""
        ...
