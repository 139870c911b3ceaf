"""Translation domain models."""

from dataclasses import dataclass
from typing import Any

from utils.json_parsing import parse_json_content

# Wire (camelCase) name -> attribute name
_WIRE_FIELDS = {
    "wordTranslation": "word_translation",
    "sentenceTranslation": "sentence_translation",
    "pronunciation": "pronunciation",
    "partOfSpeech": "part_of_speech",
    "notes": "notes",
}


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    return str(value)


@dataclass(frozen=True)
class TranslationResult:
    """A best-effort structured translation of one word (Value Object).

    Only ``word_translation`` is guaranteed. Produced once per request and
    never cached.
    """
    word_translation: str
    sentence_translation: str | None = None
    pronunciation: str | None = None
    part_of_speech: str | None = None
    notes: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "TranslationResult | None":
        """Build from a camelCase JSON object.

        Returns None if the object has no string ``wordTranslation``.
        """
        word_translation = payload.get("wordTranslation")
        if not isinstance(word_translation, str) or not word_translation:
            return None
        return cls(
            word_translation=word_translation,
            sentence_translation=_optional_text(payload.get("sentenceTranslation")),
            pronunciation=_optional_text(payload.get("pronunciation")),
            part_of_speech=_optional_text(payload.get("partOfSpeech")),
            notes=_optional_text(payload.get("notes")),
        )

    @classmethod
    def from_text(cls, text: str) -> "TranslationResult":
        """Two-stage parse of free model output: strict JSON, then raw-text fallback.

        Never raises. When the text is not a JSON object carrying a
        ``wordTranslation``, the whole text becomes ``word_translation``.
        """
        parsed = parse_json_content(text)
        if isinstance(parsed, dict):
            result = cls.from_payload(parsed)
            if result is not None:
                return result
        return cls(word_translation=text)

    def to_payload(self) -> dict[str, str | None]:
        """Serialize with wire field names."""
        return {wire: getattr(self, attr) for wire, attr in _WIRE_FIELDS.items()}
