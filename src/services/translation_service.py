"""Translation service: one LLM call per word, best-effort structured output.

Pipeline: build prompt -> single LLM call -> strict JSON parse -> fallback record.
Malformed model output never raises past this module; provider failures
(rate limit, quota, other) propagate as LLMError subclasses for the route
to map.
"""

import logging
import os
from dataclasses import dataclass

from domain.model.errors import ValidationError
from domain.model.translation import TranslationResult
from port.llm import LLMPort

logger = logging.getLogger(__name__)

DEFAULT_MODEL = os.getenv("TRANSLATION_MODEL", "gemini/gemini-1.5-flash")
SOURCE_LANGUAGE = os.getenv("TRANSLATION_SOURCE_LANGUAGE", "English")
TARGET_LANGUAGE = os.getenv("TRANSLATION_TARGET_LANGUAGE", "Persian (Farsi)")

TEMPERATURE = 0.3
MAX_OUTPUT_TOKENS = 1024
MAX_WORD_LENGTH = 100
MAX_CONTEXT_LENGTH = 2000


@dataclass(frozen=True)
class TranslationRequest:
    word: str
    context_sentence: str | None = None


def build_translation_prompt(
    word: str,
    context_sentence: str | None = None,
    source_language: str = SOURCE_LANGUAGE,
    target_language: str = TARGET_LANGUAGE,
) -> str:
    """Instruction asking for a strict JSON translation record."""
    context_line = f'Context sentence: "{context_sentence}"' if context_sentence else ""
    return f"""You are a language learning assistant. Translate the following word from {source_language} to {target_language}.

Word: "{word}"
{context_line}

Provide the response in the following JSON format:
{{
  "wordTranslation": "{target_language} translation of the word",
  "sentenceTranslation": "{target_language} translation of the full sentence (if context provided)",
  "pronunciation": "Transliteration/pronunciation guide in Latin script",
  "partOfSpeech": "noun/verb/adjective/etc",
  "notes": "Any relevant usage notes or context"
}}

Important: Return ONLY valid JSON, no additional text or markdown."""


class TranslationService:
    """Translates a word (and its sentence) through a single LLM call."""

    def __init__(
        self,
        llm: LLMPort,
        model: str = DEFAULT_MODEL,
        source_language: str = SOURCE_LANGUAGE,
        target_language: str = TARGET_LANGUAGE,
    ):
        self.llm = llm
        self.model = model
        self.source_language = source_language
        self.target_language = target_language

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """Translate one word.

        Raises:
            ValidationError: empty word, overlong word or overlong context.
            LLMError (and subclasses): provider failure. Not retried.
        """
        word = request.word.strip() if request.word else ""
        if not word:
            raise ValidationError("No word provided")
        if len(word) > MAX_WORD_LENGTH:
            raise ValidationError(f"Word must be at most {MAX_WORD_LENGTH} characters")
        context_sentence = request.context_sentence or None
        if context_sentence and len(context_sentence) > MAX_CONTEXT_LENGTH:
            raise ValidationError(f"Context sentence must be at most {MAX_CONTEXT_LENGTH} characters")

        logger.info("Translating word", extra={
            "word": word, "has_context": context_sentence is not None,
        })

        prompt = build_translation_prompt(
            word, context_sentence, self.source_language, self.target_language,
        )
        content, stats = await self.llm.call(
            messages=[{"role": "user", "content": prompt}],
            model=self.model,
            temperature=TEMPERATURE,
            max_tokens=MAX_OUTPUT_TOKENS,
        )

        result = TranslationResult.from_text(content)
        if result.word_translation == content:
            logger.warning("Model output was not a translation object, using raw text", extra={
                "word": word, "content_preview": content[:200],
            })

        logger.info("Word translated", extra={
            "word": word,
            "model": stats.model,
            "total_tokens": stats.total_tokens,
        })
        return result
