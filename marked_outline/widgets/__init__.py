from .source_editor import SourceEditor, BufferSource
from .outline_view import OutlineView

__all__ = [
    "SourceEditor",
    "BufferSource",
    "OutlineView",
]
