"""Tests for marked_outline.services.text_cleaner."""

import pytest

from marked_outline.models import Dialect, Style
from marked_outline.services.text_cleaner import DELIMITERS, clean, get_delimiter, strip_delimiter


class TestOrgClean:
    @pytest.mark.parametrize("raw, style, expected", [
        ("*bold*", Style.BOLD, "bold"),
        ("/italic/", Style.ITALIC, "italic"),
        ("_under_", Style.UNDERLINE, "under"),
        ("+gone+", Style.STRIKETHROUGH, "gone"),
        ("~code~", Style.CODE, "code"),
    ])
    def test_strips_style_delimiter(self, raw, style, expected):
        assert clean(raw, style) == expected

    def test_removes_exactly_one_delimiter_per_side(self):
        assert clean("**x**", Style.BOLD) == "*x*"

    def test_missing_side_is_left_alone(self):
        assert clean("*abc", Style.BOLD) == "abc"
        assert clean("abc*", Style.BOLD) == "abc"
        assert clean("abc", Style.BOLD) == "abc"

    def test_delimiter_only_text_cleans_to_empty(self):
        assert clean("**", Style.BOLD) == ""
        assert clean("*", Style.BOLD) == ""


class TestMarkdownClean:
    @pytest.mark.parametrize("raw, style, expected", [
        ("**bold**", Style.BOLD, "bold"),
        ("*italic*", Style.ITALIC, "italic"),
        ("__under__", Style.UNDERLINE, "under"),
        ("~~gone~~", Style.STRIKETHROUGH, "gone"),
        ("`code`", Style.CODE, "code"),
    ])
    def test_strips_style_delimiter(self, raw, style, expected):
        assert clean(raw, style, Dialect.MARKDOWN) == expected


class TestUnknownStyle:
    def test_unknown_style_is_identity(self):
        assert clean("*x*", "sparkle") == "*x*"
        assert clean("*x*", None) == "*x*"

    def test_unsupported_dialect_is_identity(self):
        assert clean("*x*", Style.BOLD, Dialect.UNSUPPORTED) == "*x*"
        assert get_delimiter(Style.BOLD, Dialect.UNSUPPORTED) is None


class TestRoundTrip:
    @pytest.mark.parametrize("dialect", [Dialect.ORG, Dialect.MARKDOWN])
    def test_wrapped_text_cleans_back(self, dialect):
        for style, delimiter in DELIMITERS[dialect].items():
            assert clean(f"{delimiter}text{delimiter}", style, dialect) == "text"

    def test_second_clean_is_noop_without_delimiters(self):
        once = clean("*text*", Style.BOLD)
        assert clean(once, Style.BOLD) == once


class TestStripDelimiter:
    def test_pattern_characters_are_literal(self):
        assert strip_delimiter("+.+", "+") == "."
        assert strip_delimiter("a.b", ".") == "a.b"
        assert strip_delimiter("~~x~~", "~~") == "x"

    def test_empty_delimiter_is_identity(self):
        assert strip_delimiter("x", "") == "x"
