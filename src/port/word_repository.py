"""Port for saved-word data access."""

from typing import Protocol

from domain.model.vocabulary import Word


class WordRepository(Protocol):
    """Protocol for vocabulary word persistence (CRUD + tag associations)."""

    def save(self, word: Word) -> str | None:
        """Insert a word. Returns its ID, or None on failure. No dedup."""
        ...

    def get_by_id(self, word_id: str) -> Word | None:
        """Get a single word with its tags."""
        ...

    def find(self, user_id: str) -> list[Word]:
        """Get a user's words with their tags, sorted by created_at descending."""
        ...

    def update(self, word_id: str, updates: dict) -> bool:
        """Apply a partial update. Returns True if the word exists."""
        ...

    def delete(self, word_id: str) -> bool:
        """Delete a word and its tag associations. Returns False if not found."""
        ...

    def add_tag(self, word_id: str, tag_id: str) -> bool:
        """Associate a tag with a word. Idempotent."""
        ...

    def remove_tag(self, word_id: str, tag_id: str) -> bool:
        """Remove a tag association. Returns False if it did not exist."""
        ...
