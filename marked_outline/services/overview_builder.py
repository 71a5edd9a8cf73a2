"""Build the marked text overview of a source document."""

from ..models import Dialect, OutlineDocument
from .extraction import UnsupportedDocumentKind, extract, resolve_dialect
from .outline_registry import OUTLINE_NAME, OutlineRegistry
from .source_document import SourceDocument

DEFAULT_TITLE = "Marked Text Overview"
DEFAULT_BULLET = "-"

# Title line prefix per dialect, so the outline reads as the source's markup
HEADING_PREFIXES = {
    Dialect.ORG: "* ",
    Dialect.MARKDOWN: "# ",
}


def build_overview(
    source: SourceDocument,
    title: str = DEFAULT_TITLE,
    bullet: str = DEFAULT_BULLET,
    registry: OutlineRegistry | None = None,
) -> OutlineDocument:
    """Regenerate the overview outline for a source document.

    Spans are extracted before the outline is touched, so an unsupported
    document leaves any existing outline as it was. Otherwise the outline's
    previous content is replaced entirely.

    Args:
        source: Document to extract marked spans from
        title: Text of the header line
        bullet: Marker written before each entry
        registry: Registry holding the outline (defaults to the singleton)

    Returns:
        The rebuilt outline, sealed read-only

    Raises:
        UnsupportedDocumentKind: If the source's mode has no extractor
    """
    mode = source.get_mode()
    dialect = resolve_dialect(mode)
    if dialect == Dialect.UNSUPPORTED:
        raise UnsupportedDocumentKind(mode)
    spans = extract(source.get_text(), dialect)

    registry = registry or OutlineRegistry.get_instance()
    outline = registry.get_or_create(OUTLINE_NAME)

    outline.read_only = False
    outline.clear()
    outline.mode = mode

    outline.append_line(f"{HEADING_PREFIXES[dialect]}{title}")
    for span in spans:
        outline.append_line(f"{bullet} {span.display_text}", span.source_offset)

    outline.cursor_line = 0
    outline.set_source(source)
    outline.read_only = True
    return outline
