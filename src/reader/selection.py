"""Selection extraction and popup placement for the document reader."""

import re

from domain.model.selection import (
    MAX_SELECTION_LENGTH,
    POPUP_HEIGHT,
    POPUP_POINTER_OFFSET,
    POPUP_WIDTH,
    PopupPosition,
    Selection,
)

_SENTENCE_TERMINATORS_RE = re.compile(r"[.!?]+")
_WHITESPACE_RE = re.compile(r"\s+")


def find_enclosing_sentence(selected_text: str, block_text: str | None) -> str:
    """First sentence of ``block_text`` containing the selection.

    Matching ignores case. Without any terminator in the block, or when no
    sentence contains the selection (e.g. it spans two sentences), the
    trimmed selection itself is returned.
    """
    selected = selected_text.strip()
    if not block_text or not _SENTENCE_TERMINATORS_RE.search(block_text):
        return selected

    needle = selected.lower()
    for segment in _SENTENCE_TERMINATORS_RE.split(block_text):
        if needle in segment.lower():
            return segment.strip()
    return selected


def extract_selection(selected_text: str | None, block_text: str | None) -> Selection | None:
    """Derive the looked-up word and its sentence from a text highlight.

    Returns None for empty selections and for selections of
    MAX_SELECTION_LENGTH characters or more; no popup opens for those.
    """
    raw_text = (selected_text or "").strip()
    if not raw_text or len(raw_text) >= MAX_SELECTION_LENGTH:
        return None

    return Selection(
        raw_text=raw_text,
        derived_word=_WHITESPACE_RE.split(raw_text, maxsplit=1)[0],
        enclosing_sentence=find_enclosing_sentence(raw_text, block_text),
    )


def place_popup(x: int, y: int, viewport_width: int, viewport_height: int) -> PopupPosition:
    """Popup corner just below the pointer, clamped to stay inside the viewport."""
    left = min(x, viewport_width - POPUP_WIDTH)
    top = min(y + POPUP_POINTER_OFFSET, viewport_height - POPUP_HEIGHT)
    return PopupPosition(left=max(0, left), top=max(0, top))
