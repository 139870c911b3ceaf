"""In-memory implementation of TagRepository for testing."""

from domain.model.vocabulary import Tag


class FakeTagRepository:
    def __init__(self):
        self.store: dict[str, Tag] = {}
        # (word_id, tag_id) pairs, shared with FakeWordRepository
        self.links: set[tuple[str, str]] = set()

    def save(self, tag: Tag) -> str | None:
        self.store[tag.id] = tag
        return tag.id

    def get_by_id(self, tag_id: str) -> Tag | None:
        return self.store.get(tag_id)

    def find(self, user_id: str) -> list[Tag]:
        tags = [t for t in self.store.values() if t.user_id == user_id]
        return sorted(tags, key=lambda t: t.name)

    def delete(self, tag_id: str) -> bool:
        self.links = {(w, t) for w, t in self.links if t != tag_id}
        if tag_id in self.store:
            del self.store[tag_id]
            return True
        return False
