"""Vocabulary store port: the reader's view of saved-word persistence."""

from typing import Protocol

from domain.model.vocabulary import Word


class VocabularyStoreError(Exception):
    """Saving to the vocabulary store failed."""


class VocabularyStorePort(Protocol):
    """Persists words chosen from the translation popup."""

    async def add_word(
        self,
        word: str,
        translation: str | None,
        context_sentence: str | None,
        sentence_translation: str | None,
        source_file_id: str | None = None,
        source_file_name: str | None = None,
    ) -> Word: ...
