"""In-memory implementation of LLMPort for testing."""

from domain.model.token_usage import LLMCallResult


class FakeLLMAdapter:
    """Fake LLM adapter that returns a preconfigured response or raises."""

    def __init__(
        self,
        response: str = "{}",
        error: Exception | None = None,
    ):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def call(
        self,
        messages: list[dict[str, str]],
        model: str = "gemini/gemini-1.5-flash",
        timeout: float = 30.0,
        **kwargs,
    ) -> tuple[str, LLMCallResult]:
        self.calls.append({
            "messages": messages,
            "model": model,
            "timeout": timeout,
            **kwargs,
        })
        if self.error is not None:
            raise self.error
        stats = LLMCallResult(
            model=model,
            prompt_tokens=10,
            completion_tokens=5,
            total_tokens=15,
            estimated_cost=0.0001,
        )
        return self.response, stats
