"""In-memory implementation of WordRepository for testing."""

from dataclasses import replace
from datetime import datetime, timezone

from adapter.fake.tag_repository import FakeTagRepository
from domain.model.vocabulary import Word


class FakeWordRepository:
    def __init__(self, tags: FakeTagRepository | None = None):
        self.store: dict[str, Word] = {}
        self.tags = tags or FakeTagRepository()

    def _with_tags(self, word: Word) -> Word:
        tag_ids = {t for w, t in self.tags.links if w == word.id}
        tags = sorted(
            (self.tags.store[t] for t in tag_ids if t in self.tags.store),
            key=lambda t: t.name,
        )
        return replace(word, tags=tags)

    # ── CRUD ──────────────────────────────────────────────────

    def save(self, word: Word) -> str | None:
        self.store[word.id] = replace(word, tags=[])
        return word.id

    def get_by_id(self, word_id: str) -> Word | None:
        word = self.store.get(word_id)
        return self._with_tags(word) if word else None

    def find(self, user_id: str) -> list[Word]:
        words = [self._with_tags(w) for w in self.store.values() if w.user_id == user_id]
        return sorted(words, key=lambda w: w.created_at, reverse=True)

    def update(self, word_id: str, updates: dict) -> bool:
        if word_id not in self.store:
            return False
        self.store[word_id] = replace(
            self.store[word_id], **updates, updated_at=datetime.now(timezone.utc),
        )
        return True

    def delete(self, word_id: str) -> bool:
        self.tags.links = {(w, t) for w, t in self.tags.links if w != word_id}
        if word_id in self.store:
            del self.store[word_id]
            return True
        return False

    # ── tag associations ──────────────────────────────────────

    def add_tag(self, word_id: str, tag_id: str) -> bool:
        self.tags.links.add((word_id, tag_id))
        return True

    def remove_tag(self, word_id: str, tag_id: str) -> bool:
        if (word_id, tag_id) not in self.tags.links:
            return False
        self.tags.links.discard((word_id, tag_id))
        return True
