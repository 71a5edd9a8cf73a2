"""Base interface for source documents an outline can be built from."""

from abc import ABC, abstractmethod


class SourceDocument(ABC):
    """Base interface for a live source document.

    Each implementation wraps one editable document in a host (a GtkSource
    buffer, an in-memory string, ...). Offsets are 0-based character offsets.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a display name for the document (usually the file name)."""
        pass

    @abstractmethod
    def get_text(self) -> str:
        """Return the document's current full text."""
        pass

    @abstractmethod
    def get_mode(self) -> str | None:
        """Return the current editing mode (language id), or None."""
        pass

    @abstractmethod
    def is_alive(self) -> bool:
        """Check whether the document is still open."""
        pass

    @abstractmethod
    def get_cursor(self) -> int:
        """Return the cursor offset."""
        pass

    @abstractmethod
    def place_cursor(self, offset: int) -> None:
        """Move the cursor to offset, clamped to the document bounds."""
        pass

    @abstractmethod
    def focus(self) -> None:
        """Give the document's view input focus."""
        pass

    @abstractmethod
    def reveal(self, offset: int) -> None:
        """Make the text around offset visible."""
        pass
