"""Tests for LiteLLMAdapter: single call, provider error mapping."""

import unittest
import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock, patch

import litellm

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from adapter.external.litellm import LiteLLMAdapter
from port.llm import (
    LLMAuthError,
    LLMError,
    LLMQuotaExceededError,
    LLMRateLimitError,
    LLMTimeoutError,
)

MESSAGES = [{"role": "user", "content": "Translate"}]


def _response(content: str | None) -> Mock:
    mock_message = Mock()
    mock_message.content = content

    mock_choice = Mock()
    mock_choice.message = mock_message

    mock_usage = Mock()
    mock_usage.prompt_tokens = 10
    mock_usage.completion_tokens = 20
    mock_usage.total_tokens = 30

    mock_response = Mock()
    mock_response.choices = [mock_choice]
    mock_response.usage = mock_usage
    mock_response.id = "chatcmpl-123"
    return mock_response


class TestCall(unittest.IsolatedAsyncioTestCase):

    async def test_returns_content_and_stats(self):
        with patch("adapter.external.litellm.acompletion", new_callable=AsyncMock) as mock_acompletion:
            with patch("adapter.external.litellm.completion_cost", return_value=0.0001):
                mock_acompletion.return_value = _response('  {"wordTranslation": "x"}  ')

                content, stats = await LiteLLMAdapter().call(
                    MESSAGES, model="gemini/gemini-1.5-flash", temperature=0.3, max_tokens=1024,
                )

        self.assertEqual(content, '  {"wordTranslation": "x"}  ')
        self.assertEqual(stats.total_tokens, 30)
        self.assertEqual(stats.provider, "gemini")
        kwargs = mock_acompletion.call_args.kwargs
        self.assertEqual(kwargs["num_retries"], 0)
        self.assertEqual(kwargs["temperature"], 0.3)
        self.assertEqual(kwargs["max_tokens"], 1024)

    async def test_empty_messages_raise(self):
        with self.assertRaises(ValueError):
            await LiteLLMAdapter().call([])

    async def test_empty_content_raises(self):
        with patch("adapter.external.litellm.acompletion", new_callable=AsyncMock) as mock_acompletion:
            mock_acompletion.return_value = _response(None)

            with self.assertRaises(RuntimeError):
                await LiteLLMAdapter().call(MESSAGES)

    async def test_whitespace_only_content_raises(self):
        with patch("adapter.external.litellm.acompletion", new_callable=AsyncMock) as mock_acompletion:
            mock_acompletion.return_value = _response("  \n ")

            with self.assertRaises(RuntimeError):
                await LiteLLMAdapter().call(MESSAGES)

    async def test_cost_failure_is_not_fatal(self):
        with patch("adapter.external.litellm.acompletion", new_callable=AsyncMock) as mock_acompletion:
            with patch("adapter.external.litellm.completion_cost", side_effect=Exception("Unknown model")):
                mock_acompletion.return_value = _response("ok")

                _, stats = await LiteLLMAdapter().call(MESSAGES)

        self.assertEqual(stats.estimated_cost, 0.0)


class TestErrorMapping(unittest.IsolatedAsyncioTestCase):

    async def _assert_maps(self, error: Exception, expected: type):
        with patch("adapter.external.litellm.acompletion", new_callable=AsyncMock) as mock_acompletion:
            mock_acompletion.side_effect = error

            with self.assertRaises(expected) as cm:
                await LiteLLMAdapter().call(MESSAGES)

        self.assertEqual(mock_acompletion.await_count, 1)
        return cm.exception

    async def test_rate_limit(self):
        await self._assert_maps(
            litellm.RateLimitError("Rate limit exceeded", llm_provider="gemini", model="gemini/gemini-1.5-flash"),
            LLMRateLimitError,
        )

    async def test_budget_exceeded_is_quota(self):
        await self._assert_maps(litellm.BudgetExceededError(current_cost=5.0, max_budget=5.0), LLMQuotaExceededError)

    async def test_payment_required_is_quota(self):
        await self._assert_maps(
            litellm.APIError(status_code=402, message="Insufficient credits", llm_provider="openrouter", model="x"),
            LLMQuotaExceededError,
        )

    async def test_timeout(self):
        await self._assert_maps(
            litellm.Timeout("Request timed out", llm_provider="gemini", model="gemini/gemini-1.5-flash"),
            LLMTimeoutError,
        )

    async def test_authentication(self):
        await self._assert_maps(
            litellm.AuthenticationError("Invalid API key", llm_provider="gemini", model="gemini/gemini-1.5-flash"),
            LLMAuthError,
        )

    async def test_other_provider_errors_are_generic(self):
        for error in (
            litellm.APIError(status_code=500, message="Internal server error", llm_provider="gemini", model="x"),
            litellm.ServiceUnavailableError("Service unavailable", llm_provider="gemini", model="x"),
        ):
            mapped = await self._assert_maps(error, LLMError)
            self.assertNotIsInstance(mapped, (LLMRateLimitError, LLMQuotaExceededError))


if __name__ == '__main__':
    unittest.main()
