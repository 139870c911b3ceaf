"""Tests for CSV and Anki vocabulary export."""

import unittest
import sys
from datetime import date, datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from domain.model.vocabulary import Tag, Word
from services import export_service


def _word(word: str, **kwargs) -> Word:
    now = datetime(2026, 3, 1, tzinfo=timezone.utc)
    return Word(id=f"id-{word}", user_id="user-1", word=word, created_at=now, updated_at=now, **kwargs)


def _tag(name: str) -> Tag:
    return Tag(id=f"tag-{name}", user_id="user-1", name=name, color="#3B82F6",
               created_at=datetime(2026, 3, 1, tzinfo=timezone.utc))


class TestToCsv(unittest.TestCase):

    def test_header_and_quoted_row(self):
        words = [_word(
            "say", translation='gofte "ast"', context_sentence="He said, hi.",
            sentence_translation="u goft", tags=[_tag("verbs"), _tag("common")],
        )]

        lines = export_service.to_csv(words).split("\n")

        self.assertEqual(lines[0], "Word,Translation,Context,Sentence Translation,Tags")
        self.assertEqual(lines[1], '"say","gofte ""ast""","He said, hi.","u goft","verbs, common"')

    def test_without_context_blanks_context_cells(self):
        words = [_word("say", translation="goftan", context_sentence="He said.", sentence_translation="u goft")]

        line = export_service.to_csv(words, include_context=False).split("\n")[1]

        self.assertEqual(line, '"say","goftan","","",""')

    def test_missing_values_are_empty_cells(self):
        line = export_service.to_csv([_word("bare")]).split("\n")[1]

        self.assertEqual(line, '"bare","","","",""')


class TestToAnki(unittest.TestCase):

    def test_context_rendered_with_br(self):
        words = [_word("fox", translation="روباه", context_sentence="The fox runs", sentence_translation="روباه می‌دود")]

        self.assertEqual(
            export_service.to_anki(words),
            "fox\tروباه<br><br>Context: The fox runs<br>روباه می‌دود",
        )

    def test_without_context(self):
        words = [_word("fox", translation="روباه", context_sentence="The fox runs")]

        self.assertEqual(export_service.to_anki(words, include_context=False), "fox\tروباه")

    def test_multiline_translation_becomes_br(self):
        words = [_word("run", translation="line one\nline two")]

        self.assertEqual(export_service.to_anki(words), "run\tline one<br>line two")

    def test_one_line_per_word(self):
        words = [_word("a", translation="1"), _word("b", translation="2")]

        self.assertEqual(export_service.to_anki(words), "a\t1\nb\t2")


class TestFilenames(unittest.TestCase):

    def test_filenames_carry_date(self):
        today = date(2026, 10, 18)

        self.assertEqual(export_service.csv_filename(today), "linguflow-vocabulary-2026-10-18.csv")
        self.assertEqual(export_service.anki_filename(today), "linguflow-anki-2026-10-18.txt")


if __name__ == '__main__':
    unittest.main()
