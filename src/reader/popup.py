"""Translation popup state machine.

Holds the one translation shown for the current selection: loading and
error state, and a save action that persists at most once per opened
translation.

Overlapping loads are not cancelled. If the selection changes while a
request is in flight, whichever response resolves last is what the popup
shows, even if it belongs to a word that is no longer selected.
"""

import logging

from domain.model.errors import MissingCredentialError
from domain.model.selection import PopupPosition, Selection
from domain.model.translation import TranslationResult
from domain.model.vocabulary import Word
from port.translator import (
    TranslationError,
    TranslationQuotaError,
    TranslationRateLimitError,
    TranslatorPort,
)
from port.vocabulary_store import VocabularyStoreError, VocabularyStorePort

logger = logging.getLogger(__name__)

# error_kind values
ERROR_RATE_LIMIT = "rate_limit"
ERROR_QUOTA = "quota"
ERROR_AUTH = "auth"
ERROR_FAILED = "failed"

ERROR_MESSAGES = {
    ERROR_RATE_LIMIT: "Rate limit exceeded. Please wait a moment and try again.",
    ERROR_QUOTA: "Translation credits exhausted. Please add credits to continue.",
    ERROR_AUTH: "Please sign in again to translate words.",
    ERROR_FAILED: "Failed to translate. Please try again.",
}


class TranslationPopup:
    """Popup for one open document. ``open`` resets it for a new selection."""

    def __init__(
        self,
        translator: TranslatorPort,
        store: VocabularyStorePort,
        file_id: str | None = None,
        file_name: str | None = None,
    ):
        self.translator = translator
        self.store = store
        self.file_id = file_id
        self.file_name = file_name

        self.selection: Selection | None = None
        self.position: PopupPosition | None = None
        self.translation: TranslationResult | None = None
        self.loading = False
        self.error_kind: str | None = None
        self.saving = False
        self.saved = False
        self.save_error: str | None = None

    @property
    def is_open(self) -> bool:
        return self.selection is not None

    @property
    def error(self) -> str | None:
        return ERROR_MESSAGES.get(self.error_kind) if self.error_kind else None

    @property
    def can_save(self) -> bool:
        return self.translation is not None and not self.loading and not self.saving and not self.saved

    def open(self, selection: Selection, position: PopupPosition | None = None) -> None:
        self.selection = selection
        self.position = position
        self.translation = None
        self.loading = True
        self.error_kind = None
        self.saving = False
        self.saved = False
        self.save_error = None

    def close(self) -> None:
        self.selection = None
        self.position = None
        self.translation = None
        self.loading = False
        self.error_kind = None

    async def load(self) -> TranslationResult | None:
        """Request the translation for the current selection. One attempt."""
        selection = self.selection
        if selection is None:
            return None

        self.loading = True
        self.error_kind = None
        translation = None
        error_kind = None
        try:
            translation = await self.translator.request(
                selection.derived_word, selection.enclosing_sentence,
            )
        except TranslationRateLimitError:
            error_kind = ERROR_RATE_LIMIT
        except TranslationQuotaError:
            error_kind = ERROR_QUOTA
        except MissingCredentialError:
            error_kind = ERROR_AUTH
        except TranslationError as e:
            logger.error("Translation error", extra={"word": selection.derived_word, "error": str(e)})
            error_kind = ERROR_FAILED

        if self.selection is None:
            # Closed while loading
            return None

        self.translation = translation
        self.error_kind = error_kind
        self.loading = False
        return translation

    async def save(self) -> Word | None:
        """Save the displayed translation to the vocabulary.

        No-op while a save is in flight or after one succeeded. A failed
        save leaves the popup saveable.
        """
        if not self.can_save or self.selection is None:
            return None

        selection = self.selection
        translation = self.translation
        self.saving = True
        self.save_error = None
        try:
            entry = await self.store.add_word(
                word=selection.derived_word,
                translation=translation.word_translation,
                context_sentence=selection.enclosing_sentence,
                sentence_translation=translation.sentence_translation,
                source_file_id=self.file_id,
                source_file_name=self.file_name,
            )
        except (VocabularyStoreError, MissingCredentialError) as e:
            logger.error("Error adding word", extra={"word": selection.derived_word, "error": str(e)})
            self.save_error = "Failed to save word"
            return None
        finally:
            self.saving = False

        self.saved = True
        logger.info("Word saved to vocabulary", extra={"word": selection.derived_word, "wordId": entry.id})
        return entry
