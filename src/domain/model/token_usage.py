"""Token usage of a single LLM call."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LLMCallResult:
    """Usage stats returned next to the completion text.

    Translations are not metered per user; the stats only feed logs.
    """
    model: str
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    estimated_cost: float
    provider: str | None = None
