"""Vocabulary domain models: saved words and tags."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from domain.model.errors import PermissionDeniedError

DEFAULT_TAG_COLOR = "#F59E0B"


@dataclass
class Tag:
    """A user-defined label with a display color."""
    id: str
    user_id: str
    name: str
    color: str
    created_at: datetime

    @staticmethod
    def create(user_id: str, name: str, color: str | None = None) -> 'Tag':
        return Tag(
            id=str(uuid.uuid4()),
            user_id=user_id,
            name=name,
            color=color or DEFAULT_TAG_COLOR,
            created_at=datetime.now(timezone.utc),
        )

    def check_ownership(self, user_id: str) -> None:
        """Verify ownership. Raises PermissionDeniedError on mismatch."""
        if self.user_id != user_id:
            raise PermissionDeniedError("Not authorized to access this tag")


@dataclass
class Word:
    """A word saved to a user's vocabulary, with its translation and context."""

    EDITABLE_FIELDS = ('word', 'translation', 'context_sentence', 'sentence_translation')

    id: str
    user_id: str
    word: str
    created_at: datetime
    updated_at: datetime
    translation: str | None = None
    context_sentence: str | None = None
    sentence_translation: str | None = None
    source_file_id: str | None = None
    source_file_name: str | None = None
    tags: list[Tag] = field(default_factory=list)

    @staticmethod
    def create(
        user_id: str,
        word: str,
        translation: str | None = None,
        context_sentence: str | None = None,
        sentence_translation: str | None = None,
        source_file_id: str | None = None,
        source_file_name: str | None = None,
    ) -> 'Word':
        """Factory method, stamps id and timestamps."""
        now = datetime.now(timezone.utc)
        return Word(
            id=str(uuid.uuid4()),
            user_id=user_id,
            word=word,
            created_at=now,
            updated_at=now,
            translation=translation,
            context_sentence=context_sentence,
            sentence_translation=sentence_translation,
            source_file_id=source_file_id,
            source_file_name=source_file_name,
        )

    def check_ownership(self, user_id: str) -> None:
        """Verify ownership. Raises PermissionDeniedError on mismatch."""
        if self.user_id != user_id:
            raise PermissionDeniedError("Not authorized to access this word")

    def has_tag(self, tag_id: str) -> bool:
        return any(t.id == tag_id for t in self.tags)

    def matches(self, search: str) -> bool:
        """Case-insensitive match against the word and its translation."""
        needle = search.lower()
        if needle in self.word.lower():
            return True
        return bool(self.translation) and needle in self.translation.lower()
