"""Tests for vocabulary_service (words and tags) against in-memory fakes."""

import unittest
import sys
from datetime import timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from adapter.fake.tag_repository import FakeTagRepository
from adapter.fake.word_repository import FakeWordRepository
from domain.model.errors import NotFoundError, PermissionDeniedError, ValidationError
from domain.model.vocabulary import DEFAULT_TAG_COLOR
from services import vocabulary_service


class VocabularyServiceTestCase(unittest.TestCase):

    def setUp(self):
        self.tags = FakeTagRepository()
        self.words = FakeWordRepository(self.tags)

    def _add(self, word: str, user_id: str = "user-1", **kwargs):
        return vocabulary_service.add_word(self.words, user_id, word, **kwargs)


class TestWords(VocabularyServiceTestCase):

    def test_add_word_persists_fields(self):
        word = self._add(
            "fox", translation="روباه", context_sentence="The fox runs",
            sentence_translation="روباه می‌دود", source_file_id="f1", source_file_name="a.pdf",
        )

        stored = self.words.get_by_id(word.id)
        self.assertEqual(stored.word, "fox")
        self.assertEqual(stored.translation, "روباه")
        self.assertEqual(stored.source_file_name, "a.pdf")
        self.assertEqual(stored.tags, [])

    def test_add_word_does_not_deduplicate(self):
        self._add("fox")
        self._add("fox")

        self.assertEqual(len(vocabulary_service.list_words(self.words, "user-1")), 2)

    def test_add_empty_word_rejected(self):
        with self.assertRaises(ValidationError):
            self._add("   ")

    def test_list_is_scoped_and_newest_first(self):
        older = self._add("old")
        self.words.store[older.id].created_at -= timedelta(minutes=5)
        newer = self._add("new")
        self._add("other", user_id="user-2")

        words = vocabulary_service.list_words(self.words, "user-1")

        self.assertEqual([w.id for w in words], [newer.id, older.id])

    def test_list_filters_by_search_on_word_and_translation(self):
        self._add("House", translation="خانه")
        self._add("tree", translation="درخت")

        self.assertEqual([w.word for w in vocabulary_service.list_words(self.words, "user-1", search="hou")], ["House"])
        self.assertEqual([w.word for w in vocabulary_service.list_words(self.words, "user-1", search="درخت")], ["tree"])

    def test_list_filters_by_tag(self):
        tagged = self._add("fox")
        self._add("cat")
        tag = vocabulary_service.create_tag(self.tags, "user-1", "animals")
        vocabulary_service.tag_word(self.words, self.tags, "user-1", tagged.id, tag.id)

        words = vocabulary_service.list_words(self.words, "user-1", tag_id=tag.id)

        self.assertEqual([w.id for w in words], [tagged.id])

    def test_update_word_ignores_non_editable_fields(self):
        word = self._add("fox", translation="old")

        updated = vocabulary_service.update_word(
            self.words, "user-1", word.id, {"translation": "new", "user_id": "intruder"},
        )

        self.assertEqual(updated.translation, "new")
        self.assertEqual(updated.user_id, "user-1")

    def test_update_foreign_word_denied(self):
        word = self._add("fox", user_id="user-2")

        with self.assertRaises(PermissionDeniedError):
            vocabulary_service.update_word(self.words, "user-1", word.id, {"translation": "x"})

    def test_delete_missing_word(self):
        with self.assertRaises(NotFoundError):
            vocabulary_service.delete_word(self.words, "user-1", "missing")

    def test_delete_word_removes_associations(self):
        word = self._add("fox")
        tag = vocabulary_service.create_tag(self.tags, "user-1", "animals")
        vocabulary_service.tag_word(self.words, self.tags, "user-1", word.id, tag.id)

        vocabulary_service.delete_word(self.words, "user-1", word.id)

        self.assertIsNone(self.words.get_by_id(word.id))
        self.assertEqual(self.tags.links, set())


class TestTags(VocabularyServiceTestCase):

    def test_create_tag_default_color(self):
        tag = vocabulary_service.create_tag(self.tags, "user-1", " verbs ")

        self.assertEqual(tag.name, "verbs")
        self.assertEqual(tag.color, DEFAULT_TAG_COLOR)

    def test_create_tag_rejects_bad_color(self):
        with self.assertRaises(ValidationError):
            vocabulary_service.create_tag(self.tags, "user-1", "verbs", color="red")

    def test_create_tag_rejects_long_name(self):
        with self.assertRaises(ValidationError):
            vocabulary_service.create_tag(self.tags, "user-1", "x" * 51)

    def test_delete_tag_removes_associations(self):
        word = self._add("fox")
        tag = vocabulary_service.create_tag(self.tags, "user-1", "animals")
        vocabulary_service.tag_word(self.words, self.tags, "user-1", word.id, tag.id)

        vocabulary_service.delete_tag(self.tags, "user-1", tag.id)

        self.assertEqual(self.words.get_by_id(word.id).tags, [])
        self.assertIsNone(self.tags.get_by_id(tag.id))

    def test_tag_word_requires_owned_tag(self):
        word = self._add("fox")
        foreign = vocabulary_service.create_tag(self.tags, "user-2", "theirs")

        with self.assertRaises(PermissionDeniedError):
            vocabulary_service.tag_word(self.words, self.tags, "user-1", word.id, foreign.id)

    def test_untag_word(self):
        word = self._add("fox")
        tag = vocabulary_service.create_tag(self.tags, "user-1", "animals")
        vocabulary_service.tag_word(self.words, self.tags, "user-1", word.id, tag.id)

        result = vocabulary_service.untag_word(self.words, self.tags, "user-1", word.id, tag.id)

        self.assertEqual(result.tags, [])


if __name__ == '__main__':
    unittest.main()
