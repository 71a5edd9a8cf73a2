"""Dispatch marked span extraction to the extractor for a document's dialect."""

from pathlib import Path
from typing import Callable

from ..models import Dialect, MarkedSpan
from .markdown_extractor import extract_markdown_spans
from .org_extractor import extract_org_spans


class UnsupportedDocumentKind(Exception):
    """Raised when a document's mode has no marked span extractor."""

    def __init__(self, mode: str | None = None):
        self.mode = mode
        if mode:
            message = f"Marked text overview does not support {mode} documents"
        else:
            message = "Marked text overview supports Org and Markdown documents only"
        super().__init__(message)


# Extractor per dialect
EXTRACTORS: dict[Dialect, Callable[[str], list[MarkedSpan]]] = {
    Dialect.ORG: extract_org_spans,
    Dialect.MARKDOWN: extract_markdown_spans,
}

# Editing mode (GtkSourceView language id) to dialect
MODE_DIALECTS = {
    "org": Dialect.ORG,
    "markdown": Dialect.MARKDOWN,
}

# File extension to editing mode, for files GtkSourceView has no language for
EXTENSION_MODES = {
    ".org": "org",
    ".md": "markdown",
    ".markdown": "markdown",
    ".mkd": "markdown",
}


def get_mode_for_file(file_path: str | Path) -> str | None:
    """Get the editing mode for a file from its extension."""
    return EXTENSION_MODES.get(Path(file_path).suffix.lower())


def resolve_dialect(mode: str | None) -> Dialect:
    """Get the dialect for an editing mode.

    Unknown or missing modes resolve to Dialect.UNSUPPORTED.
    """
    if mode is None:
        return Dialect.UNSUPPORTED
    return MODE_DIALECTS.get(mode.lower(), Dialect.UNSUPPORTED)


def extract(source: str, dialect: Dialect) -> list[MarkedSpan]:
    """Extract marked spans from source text in the given dialect.

    Raises:
        UnsupportedDocumentKind: If the dialect has no extractor
    """
    extractor = EXTRACTORS.get(dialect)
    if extractor is None:
        raise UnsupportedDocumentKind()
    return extractor(source)
