"""Delimiter removal for marked spans."""

from ..models import Dialect, Style

# Delimiter wrapped around each style, per dialect
DELIMITERS: dict[Dialect, dict[Style, str]] = {
    Dialect.ORG: {
        Style.BOLD: "*",
        Style.UNDERLINE: "_",
        Style.CODE: "~",
        Style.STRIKETHROUGH: "+",
        Style.ITALIC: "/",
    },
    Dialect.MARKDOWN: {
        Style.BOLD: "**",
        Style.UNDERLINE: "__",
        Style.CODE: "`",
        Style.STRIKETHROUGH: "~~",
        Style.ITALIC: "*",
    },
}


def strip_delimiter(text: str, delimiter: str) -> str:
    """Remove one literal delimiter from each end of text.

    A side without the delimiter is left alone. The delimiter is compared as
    plain text, so characters such as * ~ + need no escaping.
    """
    if not delimiter:
        return text
    if text.startswith(delimiter):
        text = text[len(delimiter):]
    if text.endswith(delimiter):
        text = text[:-len(delimiter)]
    return text


def get_delimiter(style, dialect: Dialect = Dialect.ORG) -> str | None:
    """Get the delimiter for a style in a dialect, or None if unmapped."""
    return DELIMITERS.get(dialect, {}).get(style)


def clean(raw_text: str, style, dialect: Dialect = Dialect.ORG) -> str:
    """Strip the style's delimiters from a raw span.

    Unknown styles pass the text through unchanged.
    """
    delimiter = get_delimiter(style, dialect)
    if delimiter is None:
        return raw_text
    return strip_delimiter(raw_text, delimiter)
