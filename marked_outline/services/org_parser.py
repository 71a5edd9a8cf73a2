"""Org document parser producing a tree of elements and emphasis objects.

Only the structure needed to find emphasis is recognized: headlines,
paragraphs, list items, tables, and the elements whose contents are never
markup (source/example blocks, drawers, comments, keywords, fixed-width).
"""

import re
from dataclasses import dataclass, field


@dataclass
class OrgNode:
    """A node in the parsed Org tree with its span in the source."""

    kind: str
    begin: int
    end: int  # exclusive
    children: list["OrgNode"] = field(default_factory=list)


# Emphasis marker to object kind
EMPHASIS_KINDS = {
    "*": "bold",
    "/": "italic",
    "_": "underline",
    "=": "verbatim",
    "~": "code",
    "+": "strikethrough",
}

# Emphasis object: marker after line start or a pre char, a body with
# non-blank borders spanning at most one newline, and the same marker before
# a post char or line end.
EMPHASIS_PATTERN = re.compile(
    r"(?:^|(?<=[\s\-({'\"]))"
    r"(?P<marker>[*/_=~+])"
    r"(?P<body>\S(?:[^\n]*?(?:\n[^\n]*?)?\S)??)"
    r"(?P=marker)"
    r"(?=[\s\-.,:!?;'\")}\[]|$)",
    re.MULTILINE,
)

HEADLINE_PATTERN = re.compile(r"^(\*+)[ \t]+")
BLOCK_BEGIN_PATTERN = re.compile(r"^\s*#\+begin_(\S+)", re.IGNORECASE)
BLOCK_END_PATTERN = re.compile(r"^\s*#\+end_(\S+)", re.IGNORECASE)
DRAWER_BEGIN_PATTERN = re.compile(r"^\s*:([\w-]+):\s*$")
DRAWER_END_PATTERN = re.compile(r"^\s*:end:\s*$", re.IGNORECASE)
KEYWORD_PATTERN = re.compile(r"^\s*#\+\S*:")
COMMENT_PATTERN = re.compile(r"^\s*#(\s|$)")
FIXED_WIDTH_PATTERN = re.compile(r"^\s*:(\s|$)")
ITEM_PATTERN = re.compile(r"^(?:\s*[-+]|\s+\*|\s*\d+[.)])(?:\s+|$)")
TABLE_PATTERN = re.compile(r"^\s*\|")

# Blocks whose contents are taken literally
OPAQUE_BLOCKS = {
    "src": "src-block",
    "example": "example-block",
    "export": "export-block",
    "comment": "comment-block",
}


def parse_objects(source: str, begin: int, end: int) -> list[OrgNode]:
    """Parse emphasis objects in source[begin:end]."""
    objects = []
    for match in EMPHASIS_PATTERN.finditer(source, begin, end):
        kind = EMPHASIS_KINDS[match.group("marker")]
        objects.append(OrgNode(kind=kind, begin=match.start(), end=match.end()))
    return objects


def _split_lines(source: str) -> list[tuple[int, str]]:
    """Split source into (offset, line) pairs without line terminators."""
    lines = []
    offset = 0
    for line in source.split("\n"):
        lines.append((offset, line))
        offset += len(line) + 1
    return lines


def _find_line(lines: list[tuple[int, str]], start: int, pattern: re.Pattern, name: str | None = None) -> int:
    """Find the index of the first line at or after start matching pattern.

    When name is given, the first group must equal it (case-insensitive).
    Returns -1 if there is none.
    """
    for index in range(start, len(lines)):
        match = pattern.match(lines[index][1])
        if match and (name is None or match.group(1).lower() == name):
            return index
    return -1


class _TreeBuilder:
    """Accumulates elements under the current headline."""

    def __init__(self, source: str):
        self.source = source
        self.document = OrgNode(kind="document", begin=0, end=len(source))
        self._stack: list[tuple[int, OrgNode]] = [(0, self.document)]
        self._paragraph: tuple[int, int] | None = None
        self._table: tuple[int, int] | None = None

    @property
    def container(self) -> OrgNode:
        return self._stack[-1][1]

    def add(self, node: OrgNode):
        self.flush()
        self.container.children.append(node)

    def add_paragraph_line(self, begin: int, end: int):
        self._flush_table()
        if self._paragraph is None:
            self._paragraph = (begin, end)
        else:
            self._paragraph = (self._paragraph[0], end)

    def add_table_line(self, begin: int, end: int):
        self._flush_paragraph()
        if self._table is None:
            self._table = (begin, end)
        else:
            self._table = (self._table[0], end)

    def open_headline(self, level: int, begin: int, title_begin: int, line_end: int):
        self.flush()
        while self._stack[-1][0] >= level:
            _, node = self._stack.pop()
            node.end = begin
        headline = OrgNode(kind="headline", begin=begin, end=line_end)
        headline.children.extend(parse_objects(self.source, title_begin, line_end))
        self.container.children.append(headline)
        self._stack.append((level, headline))

    def flush(self):
        self._flush_paragraph()
        self._flush_table()

    def _flush_paragraph(self):
        if self._paragraph is not None:
            begin, end = self._paragraph
            node = OrgNode(kind="paragraph", begin=begin, end=end)
            node.children.extend(parse_objects(self.source, begin, end))
            self.container.children.append(node)
            self._paragraph = None

    def _flush_table(self):
        if self._table is not None:
            begin, end = self._table
            node = OrgNode(kind="table", begin=begin, end=end)
            node.children.extend(parse_objects(self.source, begin, end))
            self.container.children.append(node)
            self._table = None

    def finish(self) -> OrgNode:
        self.flush()
        while len(self._stack) > 1:
            _, node = self._stack.pop()
            node.end = len(self.source)
        return self.document


def parse_org(source: str) -> OrgNode:
    """Parse Org source into a document tree.

    Headlines nest by level. Elements keep document order, and each node
    records begin/end character offsets into source.
    """
    builder = _TreeBuilder(source)
    lines = _split_lines(source)
    index = 0

    while index < len(lines):
        offset, line = lines[index]
        line_end = offset + len(line)

        if not line.strip():
            builder.flush()
            index += 1
            continue

        headline = HEADLINE_PATTERN.match(line)
        if headline:
            builder.open_headline(len(headline.group(1)), offset, offset + headline.end(), line_end)
            index += 1
            continue

        block = BLOCK_BEGIN_PATTERN.match(line)
        if block:
            name = block.group(1).lower()
            end_index = _find_line(lines, index + 1, BLOCK_END_PATTERN, name)
            if end_index >= 0:
                if name in OPAQUE_BLOCKS:
                    end_offset, end_line = lines[end_index]
                    builder.add(OrgNode(kind=OPAQUE_BLOCKS[name], begin=offset, end=end_offset + len(end_line)))
                    index = end_index + 1
                else:
                    # Quote, center, verse: only the delimiter lines are skipped
                    builder.flush()
                    index += 1
                continue

        if BLOCK_END_PATTERN.match(line):
            builder.flush()
            index += 1
            continue

        drawer = DRAWER_BEGIN_PATTERN.match(line)
        if drawer and not DRAWER_END_PATTERN.match(line):
            end_index = _find_line(lines, index + 1, DRAWER_END_PATTERN)
            if end_index >= 0:
                end_offset, end_line = lines[end_index]
                builder.add(OrgNode(kind="drawer", begin=offset, end=end_offset + len(end_line)))
                index = end_index + 1
                continue

        if KEYWORD_PATTERN.match(line):
            builder.add(OrgNode(kind="keyword", begin=offset, end=line_end))
        elif COMMENT_PATTERN.match(line):
            builder.add(OrgNode(kind="comment", begin=offset, end=line_end))
        elif FIXED_WIDTH_PATTERN.match(line):
            builder.add(OrgNode(kind="fixed-width", begin=offset, end=line_end))
        elif TABLE_PATTERN.match(line):
            builder.add_table_line(offset, line_end)
        else:
            item = ITEM_PATTERN.match(line)
            if item:
                node = OrgNode(kind="item", begin=offset, end=line_end)
                node.children.extend(parse_objects(source, offset + item.end(), line_end))
                builder.add(node)
            else:
                builder.add_paragraph_line(offset, line_end)
        index += 1

    return builder.finish()


def iter_nodes(node: OrgNode):
    """Yield node and all its descendants in pre-order."""
    yield node
    for child in node.children:
        yield from iter_nodes(child)
