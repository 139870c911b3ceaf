"""In-memory implementations of the reader-side ports for testing."""

import asyncio

from domain.model.translation import TranslationResult
from domain.model.vocabulary import Word
from port.vocabulary_store import VocabularyStoreError


class FakeTranslator:
    """Returns queued results (or raises queued errors) in call order.

    With ``gated`` set, each call waits on its own event so tests can
    resolve overlapping requests in any order.
    """

    def __init__(self, *outcomes: TranslationResult | Exception, gated: bool = False):
        self.outcomes = list(outcomes)
        self.calls: list[tuple[str, str | None]] = []
        self.gated = gated
        self.gates: list[asyncio.Event] = []

    async def request(
        self, word: str, context_sentence: str | None = None,
    ) -> TranslationResult:
        self.calls.append((word, context_sentence))
        outcome = self.outcomes.pop(0)
        if self.gated:
            gate = asyncio.Event()
            self.gates.append(gate)
            await gate.wait()
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeVocabularyStore:
    def __init__(self, fail_times: int = 0):
        self.saved: list[Word] = []
        self.fail_times = fail_times

    async def add_word(
        self,
        word: str,
        translation: str | None,
        context_sentence: str | None,
        sentence_translation: str | None,
        source_file_id: str | None = None,
        source_file_name: str | None = None,
    ) -> Word:
        if self.fail_times > 0:
            self.fail_times -= 1
            raise VocabularyStoreError("Failed to save word")
        entry = Word.create(
            user_id="reader-1",
            word=word,
            translation=translation,
            context_sentence=context_sentence,
            sentence_translation=sentence_translation,
            source_file_id=source_file_id,
            source_file_name=source_file_name,
        )
        self.saved.append(entry)
        return entry


class FakeSession:
    def __init__(self, access_token: str | None = "api-token"):
        self.access_token = access_token

    def get_access_token(self) -> str | None:
        return self.access_token
