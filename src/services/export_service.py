"""Vocabulary export: CSV and Anki import formats."""

from datetime import date

from domain.model.vocabulary import Word

CSV_HEADERS = ["Word", "Translation", "Context", "Sentence Translation", "Tags"]


def _quote(cell: str) -> str:
    return '"' + cell.replace('"', '""') + '"'


def to_csv(words: list[Word], include_context: bool = True) -> str:
    """Header line is bare; every data cell is quoted with quotes doubled."""
    lines = [",".join(CSV_HEADERS)]
    for w in words:
        row = [
            w.word,
            w.translation or "",
            (w.context_sentence or "") if include_context else "",
            (w.sentence_translation or "") if include_context else "",
            ", ".join(t.name for t in w.tags),
        ]
        lines.append(",".join(_quote(cell) for cell in row))
    return "\n".join(lines)


def to_anki(words: list[Word], include_context: bool = True) -> str:
    """One ``front<TAB>back`` line per word, Anki's plain-text import format.

    Newlines inside the back of the card become ``<br>``.
    """
    lines = []
    for w in words:
        back = w.translation or ""
        if include_context and w.context_sentence:
            back += f"\n\nContext: {w.context_sentence}"
            if w.sentence_translation:
                back += f"\n{w.sentence_translation}"
        back = back.replace("\n", "<br>")
        lines.append(f"{w.word}\t{back}")
    return "\n".join(lines)


def csv_filename(today: date | None = None) -> str:
    return f"linguflow-vocabulary-{(today or date.today()).isoformat()}.csv"


def anki_filename(today: date | None = None) -> str:
    return f"linguflow-anki-{(today or date.today()).isoformat()}.txt"
