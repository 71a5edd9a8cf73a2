"""In-memory source document."""

from pathlib import Path

from .extraction import get_mode_for_file
from .source_document import SourceDocument


class TextSource(SourceDocument):
    """Source document held as a plain string.

    Used when no editor is running, e.g. for dumping an outline to stdout.
    """

    def __init__(self, text: str = "", mode: str | None = None, name: str = "untitled"):
        self._text = text
        self._mode = mode
        self._name = name
        self._cursor = 0
        self._alive = True
        self.focused = False
        self.revealed_offset: int | None = None

    @classmethod
    def from_file(cls, file_path: str | Path) -> "TextSource":
        """Load a file, taking the mode from its extension.

        Raises:
            OSError, UnicodeDecodeError: If the file can't be read
        """
        path = Path(file_path)
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        return cls(text, mode=get_mode_for_file(path), name=path.name)

    @property
    def name(self) -> str:
        return self._name

    def get_text(self) -> str:
        return self._text

    def set_text(self, text: str):
        """Replace the text, keeping the cursor within bounds."""
        self._text = text
        self._cursor = min(self._cursor, len(text))

    def insert(self, offset: int, text: str):
        """Insert text at offset."""
        offset = max(0, min(offset, len(self._text)))
        self._text = self._text[:offset] + text + self._text[offset:]

    def get_mode(self) -> str | None:
        return self._mode

    def set_mode(self, mode: str | None):
        self._mode = mode

    def is_alive(self) -> bool:
        return self._alive

    def destroy(self):
        """Close the document."""
        self._alive = False

    def get_cursor(self) -> int:
        return self._cursor

    def place_cursor(self, offset: int) -> None:
        self._cursor = max(0, min(offset, len(self._text)))

    def focus(self) -> None:
        self.focused = True

    def reveal(self, offset: int) -> None:
        self.revealed_offset = offset
