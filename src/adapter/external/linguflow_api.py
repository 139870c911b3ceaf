"""LinguFlow API client adapter.

Implements TranslatorPort and VocabularyStorePort for the reader by calling
the LinguFlow HTTP API. Credentials come from an injected SessionProvider.
One request per call, no retries, httpx's default timeout.
"""

import logging
import os
from datetime import datetime
from typing import Any

import httpx

from domain.model.errors import MissingCredentialError
from domain.model.translation import TranslationResult
from domain.model.vocabulary import DEFAULT_TAG_COLOR, Tag, Word
from port.session import SessionProvider
from port.translator import TranslationError, TranslationQuotaError, TranslationRateLimitError
from port.vocabulary_store import VocabularyStoreError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = os.getenv("LINGUFLOW_API_URL", "http://localhost:8000")
SESSION_EXPIRED_MESSAGE = "Your session has expired. Please sign in again."


def _parse_datetime(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _tag_from_payload(data: dict[str, Any]) -> Tag:
    return Tag(
        id=data["id"],
        user_id=data.get("user_id", ""),
        name=data["name"],
        color=data.get("color") or DEFAULT_TAG_COLOR,
        created_at=_parse_datetime(data["created_at"]),
    )


def word_from_payload(data: dict[str, Any]) -> Word:
    """Build a Word from the API's word response body."""
    return Word(
        id=data["id"],
        user_id=data["user_id"],
        word=data["word"],
        created_at=_parse_datetime(data["created_at"]),
        updated_at=_parse_datetime(data.get("updated_at") or data["created_at"]),
        translation=data.get("translation"),
        context_sentence=data.get("context_sentence"),
        sentence_translation=data.get("sentence_translation"),
        source_file_id=data.get("source_file_id"),
        source_file_name=data.get("source_file_name"),
        tags=[_tag_from_payload(t) for t in data.get("tags") or []],
    )


def read_translation(response: httpx.Response) -> TranslationResult:
    """Read a 2xx translation response.

    A JSON object with ``wordTranslation`` is taken as is. Anything else is
    raw text and goes through the fence-strip / strict-parse / fallback
    pipeline.
    """
    try:
        data = response.json()
    except ValueError:
        return TranslationResult.from_text(response.text)

    if isinstance(data, dict):
        result = TranslationResult.from_payload(data)
        if result is not None:
            return result
    if isinstance(data, str):
        return TranslationResult.from_text(data)
    return TranslationResult.from_text(response.text)


class LinguFlowApiClient:
    """HTTP client for the reader: translation and saving words."""

    def __init__(
        self,
        session: SessionProvider,
        base_url: str = DEFAULT_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.session = session
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        token = self.session.get_access_token()
        if not token:
            raise MissingCredentialError("Please sign in to continue")
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {token}"},
            transport=self._transport,
        )

    async def request(
        self, word: str, context_sentence: str | None = None,
    ) -> TranslationResult:
        """Translate ``word``, optionally within its sentence.

        Raises:
            MissingCredentialError: no active session, or the API rejected it.
            TranslationRateLimitError: HTTP 429.
            TranslationQuotaError: HTTP 402.
            TranslationError: any other failure.
        """
        body: dict[str, str] = {"word": word}
        if context_sentence:
            body["contextSentence"] = context_sentence

        try:
            async with self._client() as client:
                response = await client.post("/translate", json=body)
        except httpx.HTTPError as e:
            logger.error("Translation request failed", extra={
                "word": word, "error_type": type(e).__name__,
            })
            raise TranslationError("Failed to translate. Please try again.") from e

        if response.status_code == 401:
            raise MissingCredentialError(SESSION_EXPIRED_MESSAGE)
        if response.status_code == 429:
            raise TranslationRateLimitError("Rate limit exceeded. Please wait a moment and try again.")
        if response.status_code == 402:
            raise TranslationQuotaError("Translation credits exhausted. Please add credits to continue.")
        if not response.is_success:
            logger.error("Translation service error", extra={
                "word": word, "status_code": response.status_code,
            })
            raise TranslationError("Failed to translate. Please try again.")

        return read_translation(response)

    async def add_word(
        self,
        word: str,
        translation: str | None,
        context_sentence: str | None,
        sentence_translation: str | None,
        source_file_id: str | None = None,
        source_file_name: str | None = None,
    ) -> Word:
        """Save a word to the signed-in reader's vocabulary.

        Raises:
            MissingCredentialError: no active session, or the API rejected it.
            VocabularyStoreError: the API failed the save or answered with
                an unreadable entry.
        """
        body = {
            "word": word,
            "translation": translation,
            "context_sentence": context_sentence,
            "sentence_translation": sentence_translation,
            "source_file_id": source_file_id,
            "source_file_name": source_file_name,
        }
        try:
            async with self._client() as client:
                response = await client.post("/words", json=body)
        except httpx.HTTPError as e:
            logger.error("Save word request failed", extra={
                "word": word, "error_type": type(e).__name__,
            })
            raise VocabularyStoreError("Failed to save word") from e

        if response.status_code == 401:
            raise MissingCredentialError(SESSION_EXPIRED_MESSAGE)
        if not response.is_success:
            logger.error("Save word rejected", extra={
                "word": word, "status_code": response.status_code,
            })
            raise VocabularyStoreError("Failed to save word")

        try:
            return word_from_payload(response.json())
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logger.error("Save word response unreadable", extra={
                "word": word, "error_type": type(e).__name__,
            })
            raise VocabularyStoreError("Failed to save word") from e
