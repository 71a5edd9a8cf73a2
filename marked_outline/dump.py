"""Render the marked text overview of a file as plain text."""

from pathlib import Path

from .services import OutlineRegistry, TextSource, build_overview


def dump_outline(file_path: str | Path, title: str | None = None, bullet: str | None = None) -> str:
    """Build the overview of a file and render it with source offsets.

    Entry lines end with "  @offset", the 0-based source offset the entry
    jumps to.

    Raises:
        OSError, UnicodeDecodeError: If the file can't be read
        UnsupportedDocumentKind: If the file is neither Org nor Markdown
    """
    source = TextSource.from_file(file_path)
    options = {}
    if title is not None:
        options["title"] = title
    if bullet is not None:
        options["bullet"] = bullet

    # Private registry: a dump never replaces the window's overview
    outline = build_overview(source, registry=OutlineRegistry(), **options)

    lines = []
    for index, line in enumerate(outline.lines):
        offset = outline.position_at_line(index)
        lines.append(line if offset is None else f"{line}  @{offset}")
    return "\n".join(lines)
