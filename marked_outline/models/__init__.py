from .marked_span import MarkedSpan, Style, Dialect
from .outline_document import OutlineDocument, OutlineEntry, OutlineReadOnlyError

__all__ = [
    "MarkedSpan",
    "Style",
    "Dialect",
    "OutlineDocument",
    "OutlineEntry",
    "OutlineReadOnlyError",
]
