"""Vocabulary service: business logic for the user's word book and tags.

Every operation is scoped to the calling user: entities owned by someone
else raise PermissionDeniedError, missing ones raise NotFoundError.
"""

import logging
import re

from domain.model.errors import DomainError, NotFoundError, ValidationError
from domain.model.vocabulary import Tag, Word
from port.tag_repository import TagRepository
from port.word_repository import WordRepository

logger = logging.getLogger(__name__)

_HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")

MAX_TAG_NAME_LENGTH = 50


# ── words ─────────────────────────────────────────────────────


def add_word(
    repo: WordRepository,
    user_id: str,
    word: str,
    translation: str | None = None,
    context_sentence: str | None = None,
    sentence_translation: str | None = None,
    source_file_id: str | None = None,
    source_file_name: str | None = None,
) -> Word:
    """Persist a new word. Identical earlier words are not deduplicated."""
    word = word.strip()
    if not word:
        raise ValidationError("Word must not be empty")

    entry = Word.create(
        user_id=user_id,
        word=word,
        translation=translation,
        context_sentence=context_sentence,
        sentence_translation=sentence_translation,
        source_file_id=source_file_id,
        source_file_name=source_file_name,
    )
    if not repo.save(entry):
        raise DomainError("Failed to save word")
    return repo.get_by_id(entry.id) or entry


def get_owned_word(repo: WordRepository, user_id: str, word_id: str) -> Word:
    word = repo.get_by_id(word_id)
    if not word:
        raise NotFoundError("Word not found")
    word.check_ownership(user_id)
    return word


def list_words(
    repo: WordRepository,
    user_id: str,
    tag_id: str | None = None,
    search: str | None = None,
) -> list[Word]:
    """Newest first, optionally narrowed to one tag and a search string."""
    words = repo.find(user_id)
    if tag_id:
        words = [w for w in words if w.has_tag(tag_id)]
    if search and search.strip():
        words = [w for w in words if w.matches(search.strip())]
    return words


def update_word(repo: WordRepository, user_id: str, word_id: str, updates: dict) -> Word:
    get_owned_word(repo, user_id, word_id)
    changes = {k: v for k, v in updates.items() if k in Word.EDITABLE_FIELDS}
    if 'word' in changes and not (changes['word'] or '').strip():
        raise ValidationError("Word must not be empty")
    if changes and not repo.update(word_id, changes):
        raise DomainError("Failed to update word")
    return repo.get_by_id(word_id)


def delete_word(repo: WordRepository, user_id: str, word_id: str) -> None:
    get_owned_word(repo, user_id, word_id)
    repo.delete(word_id)


# ── tags ──────────────────────────────────────────────────────


def create_tag(repo: TagRepository, user_id: str, name: str, color: str | None = None) -> Tag:
    name = name.strip()
    if not name:
        raise ValidationError("Tag name must not be empty")
    if len(name) > MAX_TAG_NAME_LENGTH:
        raise ValidationError(f"Tag name must be at most {MAX_TAG_NAME_LENGTH} characters")
    if color is not None and not _HEX_COLOR_RE.match(color):
        raise ValidationError("Tag color must be a hex color like #F59E0B")

    tag = Tag.create(user_id=user_id, name=name, color=color)
    if not repo.save(tag):
        raise DomainError("Failed to create tag")
    return tag


def get_owned_tag(repo: TagRepository, user_id: str, tag_id: str) -> Tag:
    tag = repo.get_by_id(tag_id)
    if not tag:
        raise NotFoundError("Tag not found")
    tag.check_ownership(user_id)
    return tag


def delete_tag(repo: TagRepository, user_id: str, tag_id: str) -> None:
    """Delete a tag. Its word associations go with it."""
    get_owned_tag(repo, user_id, tag_id)
    repo.delete(tag_id)


def tag_word(
    words: WordRepository, tags: TagRepository, user_id: str, word_id: str, tag_id: str,
) -> Word:
    get_owned_word(words, user_id, word_id)
    get_owned_tag(tags, user_id, tag_id)
    if not words.add_tag(word_id, tag_id):
        raise DomainError("Failed to add tag")
    return words.get_by_id(word_id)


def untag_word(
    words: WordRepository, tags: TagRepository, user_id: str, word_id: str, tag_id: str,
) -> Word:
    get_owned_word(words, user_id, word_id)
    get_owned_tag(tags, user_id, tag_id)
    words.remove_tag(word_id, tag_id)
    return words.get_by_id(word_id)
