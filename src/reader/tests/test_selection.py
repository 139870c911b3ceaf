"""Tests for selection extraction and popup placement."""

import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from domain.model.selection import MAX_SELECTION_LENGTH, PopupPosition
from reader.selection import extract_selection, find_enclosing_sentence, place_popup


class TestExtractSelection(unittest.TestCase):
    """Test extract_selection()."""

    def test_derived_word_is_first_token(self):
        selection = extract_selection("quick brown", "The quick brown fox jumps. It was fast.")

        self.assertEqual(selection.raw_text, "quick brown")
        self.assertEqual(selection.derived_word, "quick")
        self.assertEqual(selection.enclosing_sentence, "The quick brown fox jumps")

    def test_selection_is_trimmed(self):
        selection = extract_selection("  fox \n", "The fox ran.")

        self.assertEqual(selection.raw_text, "fox")
        self.assertEqual(selection.derived_word, "fox")

    def test_empty_selection_yields_nothing(self):
        self.assertIsNone(extract_selection("", "Some text."))
        self.assertIsNone(extract_selection("   \t", "Some text."))
        self.assertIsNone(extract_selection(None, "Some text."))

    def test_selection_of_max_length_yields_nothing(self):
        self.assertIsNone(extract_selection("a" * MAX_SELECTION_LENGTH, None))

    def test_selection_just_under_max_length_is_accepted(self):
        selection = extract_selection("a" * (MAX_SELECTION_LENGTH - 1), None)

        self.assertIsNotNone(selection)
        self.assertEqual(len(selection.derived_word), MAX_SELECTION_LENGTH - 1)

    def test_multiword_selection_splits_on_any_whitespace(self):
        selection = extract_selection("run\tfast", "They run\tfast!")

        self.assertEqual(selection.derived_word, "run")

    def test_no_block_text_falls_back_to_selection(self):
        selection = extract_selection("fox", None)

        self.assertEqual(selection.enclosing_sentence, "fox")


class TestFindEnclosingSentence(unittest.TestCase):
    """Test find_enclosing_sentence()."""

    def test_picks_sentence_containing_selection(self):
        block = "First sentence here. The fox sleeps! Does it dream?"

        self.assertEqual(find_enclosing_sentence("fox", block), "The fox sleeps")
        self.assertEqual(find_enclosing_sentence("dream", block), "Does it dream")

    def test_first_matching_sentence_wins(self):
        block = "A cat sat. Another cat ran."

        self.assertEqual(find_enclosing_sentence("cat", block), "A cat sat")

    def test_match_ignores_case(self):
        self.assertEqual(
            find_enclosing_sentence("the quick fox", "The quick fox jumps. Then rests."),
            "The quick fox jumps",
        )

    def test_block_without_terminator_returns_selection(self):
        self.assertEqual(
            find_enclosing_sentence("  fox ", "the fox with no ending"),
            "fox",
        )

    def test_selection_spanning_sentences_returns_selection(self):
        self.assertEqual(
            find_enclosing_sentence("ends. Next", "It ends. Next one begins."),
            "ends. Next",
        )

    def test_runs_of_terminators_split_once(self):
        self.assertEqual(
            find_enclosing_sentence("really", "Wait... Is that really true?!"),
            "Is that really true",
        )


class TestPlacePopup(unittest.TestCase):
    """Test place_popup() clamping."""

    def test_inside_viewport_offsets_top_by_ten(self):
        self.assertEqual(place_popup(100, 200, 1280, 800), PopupPosition(left=100, top=210))

    def test_clamps_to_right_edge(self):
        self.assertEqual(place_popup(1200, 100, 1280, 800).left, 1280 - 350)

    def test_clamps_to_bottom_edge(self):
        self.assertEqual(place_popup(100, 790, 1280, 800).top, 800 - 300)

    def test_never_negative_in_tiny_viewport(self):
        self.assertEqual(place_popup(50, 50, 200, 200), PopupPosition(left=0, top=0))

    def test_popup_stays_on_screen(self):
        for x, y in [(0, 0), (640, 400), (1279, 799), (5000, 5000)]:
            position = place_popup(x, y, 1280, 800)
            self.assertGreaterEqual(position.left, 0)
            self.assertGreaterEqual(position.top, 0)
            self.assertLessEqual(position.left + 350, 1280)
            self.assertLessEqual(position.top + 300, 800)


if __name__ == '__main__':
    unittest.main()
