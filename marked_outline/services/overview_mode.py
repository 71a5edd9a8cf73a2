"""Overview mode: the enable/disable/refresh/jump commands."""

import sys
from typing import Callable

from ..models import OutlineDocument
from .extraction import UnsupportedDocumentKind
from .navigator import NavigationError, SourceBufferGone, jump_to_original
from .outline_registry import OUTLINE_NAME, OutlineRegistry
from .overview_builder import DEFAULT_BULLET, DEFAULT_TITLE, build_overview
from .source_document import SourceDocument


def _print_error(message: str):
    print(message, file=sys.stderr)


class OverviewMode:
    """Commands of the marked text overview.

    Failures never raise out of a command: they are passed to notify_error
    and leave the mode's state as it was.

    Usage:
        mode = OverviewMode(present=window.show_outline, notify_error=ToastService.show_error)
        mode.enable(source)
        mode.jump(outline_line)
        mode.disable()
    """

    def __init__(
        self,
        registry: OutlineRegistry | None = None,
        present: Callable[[SourceDocument, OutlineDocument], None] | None = None,
        notify_error: Callable[[str], None] | None = None,
        title: str = DEFAULT_TITLE,
        bullet: str = DEFAULT_BULLET,
    ):
        self.registry = registry or OutlineRegistry.get_instance()
        self._present = present
        self._notify_error = notify_error or _print_error
        self.title = title
        self.bullet = bullet

    @property
    def outline(self) -> OutlineDocument | None:
        """The current outline, or None when the mode is off."""
        return self.registry.get(OUTLINE_NAME)

    @property
    def active(self) -> bool:
        return OUTLINE_NAME in self.registry

    def _build(self, source: SourceDocument) -> OutlineDocument | None:
        try:
            outline = build_overview(source, title=self.title, bullet=self.bullet, registry=self.registry)
        except UnsupportedDocumentKind as e:
            self._notify_error(str(e))
            return None

        if self._present:
            self._present(source, outline)
        return outline

    def enable(self, source: SourceDocument) -> OutlineDocument | None:
        """Build and present the overview of source."""
        return self._build(source)

    def disable(self):
        """Destroy the overview."""
        self.registry.destroy(OUTLINE_NAME)

    def toggle(self, source: SourceDocument) -> OutlineDocument | None:
        """Enable the mode when off, disable it when on."""
        if self.active:
            self.disable()
            return None
        return self.enable(source)

    def refresh(self, source: SourceDocument | None = None) -> OutlineDocument | None:
        """Rebuild the overview from source, or from the bound source."""
        if source is None and self.outline is not None:
            source = self.outline.get_source()
        if source is None or not source.is_alive():
            self._notify_error(SourceBufferGone.message)
            return None
        return self._build(source)

    def jump(self, line: int) -> int | None:
        """Jump to the source of an outline line.

        Returns the source offset, or None if the jump failed.
        """
        outline = self.outline
        if outline is None:
            self._notify_error("Marked text overview is not active")
            return None
        try:
            return jump_to_original(outline, line)
        except NavigationError as e:
            self._notify_error(str(e))
            return None
