"""Translator port: the reader's view of the translation boundary."""

from typing import Protocol

from domain.model.translation import TranslationResult


class TranslationError(Exception):
    """Generic "translation failed" condition (upstream or network failure)."""


class TranslationRateLimitError(TranslationError):
    """The language model provider is rate limiting requests."""


class TranslationQuotaError(TranslationError):
    """The language model provider's credits are exhausted."""


class TranslatorPort(Protocol):
    """Requests one translation per call. No retry, no cancellation."""

    async def request(
        self, word: str, context_sentence: str | None = None,
    ) -> TranslationResult: ...
