"""Tests for marked_outline.models.outline_document and the outline registry."""

import pytest

from marked_outline.models import OutlineDocument, OutlineReadOnlyError
from marked_outline.services import OUTLINE_NAME, OutlineRegistry, TextSource


class TestOutlineDocument:
    def _outline(self) -> OutlineDocument:
        outline = OutlineDocument(name="test")
        outline.append_line("* Title")
        outline.append_line("- a", 10)
        outline.append_line("- b", 30)
        outline.append_line("- c", 20)
        return outline

    def test_text_and_entries(self):
        outline = self._outline()
        assert outline.text == "* Title\n- a\n- b\n- c"
        assert [(entry.line, entry.source_offset) for entry in outline.entries] == [(1, 10), (2, 30), (3, 20)]

    def test_line_for_offset(self):
        outline = self._outline()
        assert outline.line_for_offset(5) is None
        assert outline.line_for_offset(10) == 1
        assert outline.line_for_offset(25) == 3
        assert outline.line_for_offset(100) == 2

    def test_clear_drops_tags_and_binding(self):
        outline = self._outline()
        source = TextSource("x")
        outline.set_source(source)
        outline.clear()
        assert outline.lines == []
        assert outline.entries == []
        assert not outline.has_source

    def test_read_only_blocks_writes(self):
        outline = self._outline()
        outline.read_only = True
        with pytest.raises(OutlineReadOnlyError):
            outline.clear()
        with pytest.raises(OutlineReadOnlyError):
            outline.set_source(None)


class TestOutlineRegistry:
    def test_get_or_create_returns_same_outline(self):
        registry = OutlineRegistry()
        assert registry.get() is None
        outline = registry.get_or_create()
        assert outline.name == OUTLINE_NAME
        assert registry.get_or_create() is outline

    def test_destroy(self):
        registry = OutlineRegistry()
        outline = registry.get_or_create()
        assert registry.destroy()
        assert outline.killed
        assert not registry.destroy()
        assert registry.get_or_create() is not outline

    def test_singleton(self):
        assert OutlineRegistry.get_instance() is OutlineRegistry.get_instance()
