"""Navigation from outline entries back to their source location."""

from ..models import OutlineDocument


class NavigationError(Exception):
    """Base class for failed jumps. None of them end the overview mode."""

    message = "Cannot jump to the marked text"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class NoPositionFound(NavigationError):
    message = "No marked text position on this line"


class SourceBufferNotSet(NavigationError):
    message = "Overview has no source document"


class SourceBufferGone(NavigationError):
    message = "Source document of the overview has been closed"


def jump_to_original(outline: OutlineDocument, line: int) -> int:
    """Move the source document's cursor to the span tagged on a line.

    Args:
        outline: Outline holding the position tags
        line: 0-based outline line that was activated

    Returns:
        The source offset jumped to

    Raises:
        NoPositionFound: If the line carries no position tag
        SourceBufferNotSet: If the outline was never bound to a source
        SourceBufferGone: If the bound source has been closed
    """
    offset = outline.position_at_line(line)
    if offset is None:
        raise NoPositionFound()

    if not outline.has_source:
        raise SourceBufferNotSet()

    source = outline.get_source()
    if source is None or not source.is_alive():
        raise SourceBufferGone()

    source.focus()
    source.place_cursor(offset)
    source.reveal(offset)
    return offset
