"""Marked span extraction for Org documents using the structural parser."""

from ..models import Dialect, MarkedSpan, Style
from .org_parser import iter_nodes, parse_org
from .text_cleaner import clean, strip_delimiter

# Parsed object kind to span style
ORG_NODE_STYLES = {
    "bold": Style.BOLD,
    "italic": Style.ITALIC,
    "underline": Style.UNDERLINE,
    "strikethrough": Style.STRIKETHROUGH,
    "code": Style.CODE,
    "verbatim": Style.CODE,
}

VERBATIM_DELIMITER = "="


def extract_org_spans(source: str) -> list[MarkedSpan]:
    """Extract marked spans from Org source.

    Spans are returned in document order, headline titles before the
    contents of their sections.
    """
    spans = []
    for node in iter_nodes(parse_org(source)):
        style = ORG_NODE_STYLES.get(node.kind)
        if style is None:
            continue

        raw_text = source[node.begin:node.end]
        if node.kind == "verbatim":
            clean_text = strip_delimiter(raw_text, VERBATIM_DELIMITER)
        else:
            clean_text = clean(raw_text, style, Dialect.ORG)

        spans.append(MarkedSpan(
            style=style,
            raw_text=raw_text,
            clean_text=clean_text,
            source_offset=node.begin,
        ))

    return spans
