"""Reader session: one open document, its selection handling and popup."""

import logging
from dataclasses import dataclass

from domain.model.selection import Selection
from port.translator import TranslatorPort
from port.vocabulary_store import VocabularyStorePort
from reader.popup import TranslationPopup
from reader.selection import extract_selection, place_popup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    width: int = 1280
    height: int = 800


class ReaderSession:
    """Wires selection extraction, popup placement and the translation popup."""

    def __init__(
        self,
        translator: TranslatorPort,
        store: VocabularyStorePort,
        file_id: str,
        file_name: str,
        viewport: Viewport | None = None,
    ):
        self.viewport = viewport or Viewport()
        self.popup = TranslationPopup(translator, store, file_id=file_id, file_name=file_name)

    async def select(self, selected_text: str | None, block_text: str | None, x: int, y: int) -> Selection | None:
        """Handle a mouse-up selection. Returns None when nothing opens."""
        selection = extract_selection(selected_text, block_text)
        if selection is None:
            return None

        logger.debug("Text selected", extra={
            "word": selection.derived_word, "x": x, "y": y,
        })
        self.popup.open(selection, place_popup(x, y, self.viewport.width, self.viewport.height))
        await self.popup.load()
        return selection

    async def save(self):
        return await self.popup.save()

    def close(self) -> None:
        self.popup.close()
