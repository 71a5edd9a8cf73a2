"""Marked span extraction for Markdown documents using regex rules."""

import re

from ..models import MarkedSpan, Style

# One rule per style, applied in this order. Each pattern captures the span
# body without its delimiters.
MARKDOWN_RULES: list[tuple[re.Pattern, Style]] = [
    (re.compile(r"\*\*(.+?)\*\*"), Style.BOLD),
    (re.compile(r"__(.+?)__"), Style.UNDERLINE),
    (re.compile(r"`([^`\n]+?)`"), Style.CODE),
    (re.compile(r"~~(.+?)~~"), Style.STRIKETHROUGH),
    # Single asterisks only; a blank after the opener or before the closer
    # means multiplication, not emphasis
    (re.compile(r"(?<!\*)\*(?![\s*])(.+?)(?<![\s*])\*(?!\*)"), Style.ITALIC),
]


def extract_markdown_spans(source: str) -> list[MarkedSpan]:
    """Extract marked spans from Markdown source.

    The whole document is scanned once per rule, so the result is grouped
    by style in rule order and sorted by position only within a group.
    """
    spans = []
    for pattern, style in MARKDOWN_RULES:
        for match in pattern.finditer(source):
            spans.append(MarkedSpan(
                style=style,
                raw_text=match.group(0),
                clean_text=match.group(1),
                source_offset=match.start(),
            ))
    return spans
