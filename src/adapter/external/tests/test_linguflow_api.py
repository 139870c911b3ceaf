"""Tests for the reader's LinguFlow API client (httpx.MockTransport)."""

import json
import unittest
import sys
from pathlib import Path

import httpx

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from adapter.external.linguflow_api import LinguFlowApiClient, word_from_payload
from adapter.fake.translator import FakeSession
from domain.model.errors import MissingCredentialError
from port.translator import TranslationError, TranslationQuotaError, TranslationRateLimitError
from port.vocabulary_store import VocabularyStoreError

WORD_PAYLOAD = {
    "id": "word-1",
    "user_id": "user-1",
    "word": "fox",
    "translation": "روباه",
    "context_sentence": "The fox runs",
    "sentence_translation": None,
    "source_file_id": "file-1",
    "source_file_name": "story.pdf",
    "created_at": "2026-03-01T10:00:00Z",
    "updated_at": "2026-03-01T10:00:00Z",
    "tags": [{"id": "t1", "user_id": "user-1", "name": "animals", "color": "#10B981",
              "created_at": "2026-02-01T10:00:00Z"}],
}


class ApiClientTestCase(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.requests: list[httpx.Request] = []
        self.reply = httpx.Response(200, json={"wordTranslation": "x"})

    def _handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.reply

    def _client(self, session: FakeSession | None = None) -> LinguFlowApiClient:
        return LinguFlowApiClient(
            session or FakeSession(),
            base_url="http://api.test",
            transport=httpx.MockTransport(self._handler),
        )


class TestRequest(ApiClientTestCase):

    async def test_sends_word_and_context_with_bearer(self):
        result = await self._client().request("fox", "The fox runs")

        self.assertEqual(result.word_translation, "x")
        request = self.requests[0]
        self.assertEqual(request.url.path, "/translate")
        self.assertEqual(request.headers["Authorization"], "Bearer api-token")
        self.assertEqual(json.loads(request.content), {"word": "fox", "contextSentence": "The fox runs"})

    async def test_context_omitted_when_absent(self):
        await self._client().request("fox")

        self.assertEqual(json.loads(self.requests[0].content), {"word": "fox"})

    async def test_missing_session_never_sends(self):
        with self.assertRaises(MissingCredentialError):
            await self._client(FakeSession(access_token=None)).request("fox")
        self.assertEqual(self.requests, [])

    async def test_429_is_rate_limit(self):
        self.reply = httpx.Response(429, json={"error": "Rate limit exceeded"})

        with self.assertRaises(TranslationRateLimitError):
            await self._client().request("fox")

    async def test_402_is_quota(self):
        self.reply = httpx.Response(402, json={"error": "credits"})

        with self.assertRaises(TranslationQuotaError):
            await self._client().request("fox")

    async def test_401_is_missing_credential(self):
        self.reply = httpx.Response(401, json={"detail": "Could not validate credentials"})

        with self.assertRaises(MissingCredentialError):
            await self._client().request("fox")

    async def test_500_is_generic_failure(self):
        self.reply = httpx.Response(500, json={"error": "Translation failed"})

        with self.assertRaises(TranslationError) as cm:
            await self._client().request("fox")
        self.assertNotIsInstance(cm.exception, (TranslationRateLimitError, TranslationQuotaError))
        self.assertEqual(len(self.requests), 1)

    async def test_transport_failure_is_generic_failure(self):
        def broken(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = LinguFlowApiClient(FakeSession(), base_url="http://api.test",
                                    transport=httpx.MockTransport(broken))

        with self.assertRaises(TranslationError):
            await client.request("fox")

    async def test_full_object_body(self):
        self.reply = httpx.Response(200, json={
            "wordTranslation": "روباه", "sentenceTranslation": "s", "pronunciation": "rubāh",
            "partOfSpeech": "noun", "notes": None,
        })

        result = await self._client().request("fox")

        self.assertEqual(result.pronunciation, "rubāh")
        self.assertEqual(result.part_of_speech, "noun")
        self.assertIsNone(result.notes)

    async def test_fenced_raw_text_body_is_parsed(self):
        self.reply = httpx.Response(200, text='```json\n{"wordTranslation":"x","notes":"n"}\n```')

        result = await self._client().request("fox")

        self.assertEqual(result.word_translation, "x")
        self.assertEqual(result.notes, "n")

    async def test_plain_text_body_becomes_word_translation(self):
        self.reply = httpx.Response(200, text="hello")

        result = await self._client().request("fox")

        self.assertEqual(result.word_translation, "hello")
        self.assertIsNone(result.sentence_translation)


class TestAddWord(ApiClientTestCase):

    async def test_add_word_posts_and_reads_entry(self):
        self.reply = httpx.Response(201, json=WORD_PAYLOAD)

        entry = await self._client().add_word(
            word="fox", translation="روباه", context_sentence="The fox runs",
            sentence_translation=None, source_file_id="file-1", source_file_name="story.pdf",
        )

        self.assertEqual(entry.id, "word-1")
        self.assertEqual(entry.tags[0].name, "animals")
        request = self.requests[0]
        self.assertEqual(request.url.path, "/words")
        self.assertEqual(json.loads(request.content)["source_file_name"], "story.pdf")

    async def test_rejected_save(self):
        self.reply = httpx.Response(500, json={"detail": "Failed to save word"})

        with self.assertRaises(VocabularyStoreError):
            await self._client().add_word("fox", "x", "The fox runs", None)

    async def test_401_save_is_missing_credential(self):
        self.reply = httpx.Response(401, json={"detail": "Could not validate credentials"})

        with self.assertRaises(MissingCredentialError):
            await self._client().add_word("fox", "x", "The fox runs", None)

    async def test_success_with_unreadable_entry_is_store_error(self):
        self.reply = httpx.Response(201, json={"id": "word-1"})

        with self.assertRaises(VocabularyStoreError):
            await self._client().add_word("fox", "x", "The fox runs", None)

    async def test_success_with_non_json_body_is_store_error(self):
        self.reply = httpx.Response(200, text="ok")

        with self.assertRaises(VocabularyStoreError):
            await self._client().add_word("fox", "x", "The fox runs", None)


class TestWordFromPayload(unittest.TestCase):

    def test_parses_timestamps(self):
        word = word_from_payload(WORD_PAYLOAD)

        self.assertEqual(word.created_at.year, 2026)
        self.assertIsNotNone(word.created_at.tzinfo)


if __name__ == '__main__':
    unittest.main()
