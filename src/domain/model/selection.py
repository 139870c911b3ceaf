"""Reader selection value objects."""

from dataclasses import dataclass

# Selections at or above this length never open a popup
MAX_SELECTION_LENGTH = 100

# Popup box size in CSS pixels
POPUP_WIDTH = 350
POPUP_HEIGHT = 300
POPUP_POINTER_OFFSET = 10


@dataclass(frozen=True)
class Selection:
    """A text highlight plus the word and sentence derived from it."""
    raw_text: str
    derived_word: str
    enclosing_sentence: str


@dataclass(frozen=True)
class PopupPosition:
    """Top-left corner of the translation popup, in viewport coordinates."""
    left: int
    top: int
