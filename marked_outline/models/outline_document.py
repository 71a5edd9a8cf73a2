"""Outline document model: the generated, read-only overview of marked spans."""

import weakref
from dataclasses import dataclass, field


class OutlineReadOnlyError(Exception):
    """Raised when writing to an outline that has been sealed read-only."""


@dataclass
class OutlineEntry:
    """A rendered outline line linked to a source offset."""
    line: int  # 0-based line in the outline
    text: str
    source_offset: int


@dataclass
class OutlineDocument:
    """Named outline document.

    Position tags live in a side table keyed by outline line rather than in
    the rendered text, so any view can map an activated line back to the
    source offset it was generated from.

    The source binding is a weak reference: the outline never keeps its source
    document alive, and a closed source is only noticed when navigating.
    """

    name: str
    mode: str | None = None
    lines: list[str] = field(default_factory=list)
    cursor_line: int = 0
    read_only: bool = False
    killed: bool = False
    _tags: dict[int, int] = field(default_factory=dict, repr=False)
    _source_ref: "weakref.ref | None" = field(default=None, repr=False)

    @property
    def text(self) -> str:
        """Full outline text, one line per entry."""
        return "\n".join(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def entries(self) -> list[OutlineEntry]:
        """Tagged lines in outline order."""
        return [
            OutlineEntry(line=line, text=self.lines[line], source_offset=offset)
            for line, offset in sorted(self._tags.items())
        ]

    def _check_writable(self):
        if self.read_only:
            raise OutlineReadOnlyError(f"Outline {self.name} is read-only")

    def clear(self):
        """Remove all lines, tags and the source binding."""
        self._check_writable()
        self.lines.clear()
        self._tags.clear()
        self._source_ref = None
        self.cursor_line = 0

    def append_line(self, text: str, source_offset: int | None = None) -> int:
        """Append a line, optionally tagged with a source offset.

        Returns the 0-based index of the new line.
        """
        self._check_writable()
        line = len(self.lines)
        self.lines.append(text)
        if source_offset is not None:
            self._tags[line] = source_offset
        return line

    def position_at_line(self, line: int) -> int | None:
        """Get the source offset tagged on a line, or None."""
        return self._tags.get(line)

    def line_for_offset(self, offset: int) -> int | None:
        """Find the last tagged line whose source offset is <= offset."""
        best_line = None
        best_offset = -1
        for line, tag_offset in self._tags.items():
            if best_offset < tag_offset <= offset:
                best_line = line
                best_offset = tag_offset
        return best_line

    def set_source(self, source) -> None:
        """Record the source document this outline was generated from."""
        self._check_writable()
        self._source_ref = weakref.ref(source) if source is not None else None

    @property
    def has_source(self) -> bool:
        return self._source_ref is not None

    def get_source(self):
        """Get the bound source document, or None if it was collected."""
        if self._source_ref is None:
            return None
        return self._source_ref()
