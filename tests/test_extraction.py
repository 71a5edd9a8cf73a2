"""Tests for marked_outline.services.extraction."""

import pytest

from marked_outline.models import Dialect, Style
from marked_outline.services.extraction import (
    UnsupportedDocumentKind,
    extract,
    get_mode_for_file,
    resolve_dialect,
)


class TestResolveDialect:
    def test_known_modes(self):
        assert resolve_dialect("org") == Dialect.ORG
        assert resolve_dialect("markdown") == Dialect.MARKDOWN
        assert resolve_dialect("Markdown") == Dialect.MARKDOWN

    def test_unknown_modes(self):
        assert resolve_dialect("python3") == Dialect.UNSUPPORTED
        assert resolve_dialect(None) == Dialect.UNSUPPORTED


class TestGetModeForFile:
    def test_extensions(self):
        assert get_mode_for_file("notes.ORG") == "org"
        assert get_mode_for_file("README.md") == "markdown"
        assert get_mode_for_file("doc.markdown") == "markdown"
        assert get_mode_for_file("script.py") is None


class TestExtract:
    def test_same_text_differs_by_dialect(self):
        assert [span.style for span in extract("*x*", Dialect.ORG)] == [Style.BOLD]
        assert [span.style for span in extract("*x*", Dialect.MARKDOWN)] == [Style.ITALIC]

    def test_unsupported_dialect_raises(self):
        with pytest.raises(UnsupportedDocumentKind):
            extract("*x*", Dialect.UNSUPPORTED)

    def test_error_message_names_mode(self):
        assert "python3" in str(UnsupportedDocumentKind("python3"))
        assert "Org and Markdown" in str(UnsupportedDocumentKind())
