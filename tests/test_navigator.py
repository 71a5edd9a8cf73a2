"""Tests for marked_outline.services.navigator."""

import gc

import pytest

from marked_outline.models import OutlineDocument
from marked_outline.services import (
    NoPositionFound,
    SourceBufferGone,
    SourceBufferNotSet,
    TextSource,
    build_overview,
    jump_to_original,
)


class TestJumpToOriginal:
    def test_moves_cursor_to_span(self, org_source, registry):
        outline = build_overview(org_source, registry=registry)
        assert jump_to_original(outline, 2) == 16
        assert org_source.get_cursor() == 16
        assert org_source.focused
        assert org_source.revealed_offset == 16

    def test_line_without_tag(self, org_source, registry):
        outline = build_overview(org_source, registry=registry)
        with pytest.raises(NoPositionFound):
            jump_to_original(outline, 0)
        with pytest.raises(NoPositionFound):
            jump_to_original(outline, 99)
        assert org_source.get_cursor() == 0

    def test_outline_without_source(self):
        outline = OutlineDocument(name="manual")
        outline.append_line("- a", 3)
        with pytest.raises(SourceBufferNotSet):
            jump_to_original(outline, 0)

    def test_closed_source(self, org_source, registry):
        outline = build_overview(org_source, registry=registry)
        org_source.destroy()
        with pytest.raises(SourceBufferGone):
            jump_to_original(outline, 1)

    def test_collected_source(self, registry):
        source = TextSource("*x*", mode="org")
        outline = build_overview(source, registry=registry)
        del source
        gc.collect()
        with pytest.raises(SourceBufferGone):
            jump_to_original(outline, 1)

    def test_stale_offset_is_clamped(self, org_source, registry):
        outline = build_overview(org_source, registry=registry)
        org_source.set_text("ab")
        assert jump_to_original(outline, 2) == 16
        assert org_source.get_cursor() == 2

    def test_messages(self):
        assert str(NoPositionFound()) == "No marked text position on this line"
        assert str(SourceBufferNotSet()) == "Overview has no source document"
        assert str(SourceBufferGone()) == "Source document of the overview has been closed"
