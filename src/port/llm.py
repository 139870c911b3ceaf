"""LLM port: outbound interface for large language model calls."""

from typing import Protocol

from domain.model.token_usage import LLMCallResult


class LLMError(Exception):
    """Base exception for LLM port errors."""


class LLMTimeoutError(LLMError):
    """LLM request timed out."""


class LLMRateLimitError(LLMError):
    """LLM provider rate limit exceeded."""


class LLMQuotaExceededError(LLMError):
    """LLM provider credits or budget exhausted."""


class LLMAuthError(LLMError):
    """LLM provider authentication failed."""


class LLMPort(Protocol):
    """Port for making a single LLM completion call."""

    async def call(
        self,
        messages: list[dict[str, str]],
        model: str = "gemini/gemini-1.5-flash",
        timeout: float = 30.0,
        **kwargs,
    ) -> tuple[str, LLMCallResult]: ...
