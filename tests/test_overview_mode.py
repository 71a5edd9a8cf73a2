"""Tests for marked_outline.services.overview_mode."""

import pytest

from marked_outline.services import (
    NoPositionFound,
    OverviewMode,
    SourceBufferGone,
    TextSource,
)


@pytest.fixture
def errors():
    return []


@pytest.fixture
def presented():
    return []


@pytest.fixture
def mode(registry, errors, presented):
    return OverviewMode(
        registry=registry,
        present=lambda source, outline: presented.append((source, outline)),
        notify_error=errors.append,
    )


class TestEnableDisable:
    def test_enable_builds_and_presents(self, mode, org_source, presented, errors):
        outline = mode.enable(org_source)
        assert mode.active
        assert mode.outline is outline
        assert presented == [(org_source, outline)]
        assert errors == []

    def test_enable_unsupported_reports_and_changes_nothing(self, mode, presented, errors):
        assert mode.enable(TextSource("*x*", mode="python3")) is None
        assert not mode.active
        assert presented == []
        assert errors == ["Marked text overview does not support python3 documents"]

    def test_unsupported_keeps_existing_outline(self, mode, org_source, errors):
        outline = mode.enable(org_source)
        mode.enable(TextSource("*x*"))
        assert mode.outline is outline
        assert outline.get_source() is org_source
        assert len(errors) == 1

    def test_disable_destroys_outline(self, mode, org_source):
        outline = mode.enable(org_source)
        mode.disable()
        assert not mode.active
        assert mode.outline is None
        assert outline.killed

    def test_toggle(self, mode, org_source):
        assert mode.toggle(org_source) is not None
        assert mode.active
        assert mode.toggle(org_source) is None
        assert not mode.active


class TestRefresh:
    def test_refresh_uses_bound_source(self, mode, org_source):
        mode.enable(org_source)
        org_source.set_text("only _this_")
        outline = mode.refresh()
        assert outline.lines[1:] == ["- this"]

    def test_refresh_is_idempotent(self, mode, org_source):
        mode.enable(org_source)
        first = list(mode.refresh().lines)
        assert mode.refresh().lines == first

    def test_refresh_with_closed_source(self, mode, org_source, errors):
        mode.enable(org_source)
        org_source.destroy()
        assert mode.refresh() is None
        assert errors == [SourceBufferGone.message]
        assert mode.active


class TestJump:
    def test_jump(self, mode, org_source):
        mode.enable(org_source)
        assert mode.jump(1) == 5
        assert org_source.get_cursor() == 5

    def test_jump_error_keeps_mode_active(self, mode, org_source, errors):
        mode.enable(org_source)
        assert mode.jump(0) is None
        assert errors == [NoPositionFound.message]
        assert mode.active
        assert mode.jump(2) == 16

    def test_jump_when_inactive(self, mode, errors):
        assert mode.jump(1) is None
        assert errors == ["Marked text overview is not active"]
