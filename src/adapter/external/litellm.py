"""LiteLLM adapter: implements LLMPort using LiteLLM for provider-agnostic LLM calls."""

import logging

import litellm
from litellm import acompletion, completion_cost

from domain.model.token_usage import LLMCallResult
from port.llm import (
    LLMAuthError,
    LLMError,
    LLMQuotaExceededError,
    LLMRateLimitError,
    LLMTimeoutError,
)

# Suppress LiteLLM's verbose logging (proxy server warnings, etc.)
litellm.suppress_debug_info = True
logging.getLogger("LiteLLM").setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)

# Providers signal exhausted credits with 402 Payment Required
QUOTA_EXHAUSTED_STATUS = 402


def _extract_provider_from_model(model: str) -> str | None:
    """Extract provider name from model string.

    Args:
        model: Model string (e.g., "gpt-4.1-mini", "gemini/gemini-1.5-flash")

    Returns:
        Provider name or None if not specified in model string.
    """
    if "/" in model:
        return model.split("/")[0]
    if model.startswith("gpt-") or model.startswith("o1") or model.startswith("o3"):
        return "openai"
    return None


class LiteLLMAdapter:
    """Adapter that implements LLMPort using LiteLLM."""

    async def call(
        self,
        messages: list[dict[str, str]],
        model: str = "gemini/gemini-1.5-flash",
        timeout: float = 30.0,
        **kwargs,
    ) -> tuple[str, LLMCallResult]:
        """Make one completion call. No retries.

        Args:
            messages: List of message dicts with 'role' and 'content' keys.
            model: LiteLLM model identifier.
            timeout: Request timeout in seconds.
            **kwargs: Additional arguments passed to litellm.acompletion().

        Returns:
            Tuple of (content, stats).

        Raises:
            ValueError: If messages list is empty.
            LLMRateLimitError: Provider rate limit hit (429).
            LLMQuotaExceededError: Provider credits or budget exhausted (402).
            LLMTimeoutError / LLMAuthError / LLMError: other provider failures.
            RuntimeError: If no content is returned from the API.
        """
        if not messages:
            raise ValueError("messages list cannot be empty")

        try:
            response = await acompletion(
                model=model,
                messages=messages,
                timeout=timeout,
                num_retries=0,
                **kwargs,
            )
        except litellm.BudgetExceededError as e:
            raise LLMQuotaExceededError(str(e)) from e
        except litellm.Timeout as e:
            raise LLMTimeoutError(str(e)) from e
        except litellm.AuthenticationError as e:
            raise LLMAuthError(str(e)) from e
        except litellm.RateLimitError as e:
            raise LLMRateLimitError(str(e)) from e
        except Exception as e:
            # Remaining provider errors (APIError, InternalServerError, ...) only differ by status
            if getattr(e, "status_code", None) == QUOTA_EXHAUSTED_STATUS:
                raise LLMQuotaExceededError(str(e)) from e
            raise LLMError(str(e)) from e

        content = ""
        if response.choices and len(response.choices) > 0:
            message = response.choices[0].message
            if message and message.content:
                content = message.content

        if not content or not content.strip():
            logger.error("No content in LLM response", extra={
                "model": model,
                "response_id": getattr(response, "id", None),
            })
            raise RuntimeError("No content returned from LLM")

        usage = response.usage
        prompt_tokens = usage.prompt_tokens if usage else 0
        completion_tokens = usage.completion_tokens if usage else 0
        total_tokens = usage.total_tokens if usage else 0

        try:
            estimated_cost = completion_cost(completion_response=response)
        except Exception as e:
            logger.debug("Could not calculate cost with LiteLLM", extra={
                "model": model, "error": str(e),
            })
            estimated_cost = 0.0

        stats = LLMCallResult(
            model=model,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=total_tokens,
            estimated_cost=estimated_cost,
            provider=_extract_provider_from_model(model),
        )

        logger.debug("LLM API call completed", extra={
            "model": model, "provider": stats.provider,
            "total_tokens": total_tokens,
            "estimated_cost": estimated_cost,
        })

        return content, stats
