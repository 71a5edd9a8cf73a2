"""Marked span model: one emphasized run of text found in a source document."""

from dataclasses import dataclass
from enum import Enum


class Style(Enum):
    """Kind of emphasis wrapped around a span."""
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"  # Org verbatim spans are reported as code too


class Dialect(Enum):
    """Markup dialect of a source document."""
    ORG = "org"  # structured, parsed into a tree
    MARKDOWN = "markdown"  # lightweight, scanned with patterns
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class MarkedSpan:
    """A marked span with its position in the source text."""
    style: Style
    raw_text: str  # as found in the source, delimiters included
    clean_text: str
    source_offset: int  # 0-based character offset of the opening delimiter

    @property
    def display_text(self) -> str:
        """Clean text folded onto a single line."""
        return " ".join(self.clean_text.splitlines())
