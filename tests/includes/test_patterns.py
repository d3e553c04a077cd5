"""
Tests for includes.patterns

Test Coverage:
- INCLUDE_PATTERN: Directive matching and path capture
- unwrap_placeholders(): Tag removal, attributes, case-insensitivity
- strip_comments(): Multi-line and non-greedy deletion
- flatten_whitespace(): Whitespace collapsing and newline removal
- wrap_placeholders_in_cdata(): CDATA wrapping of placeholder blocks
"""

import pytest

from xml_compiler.includes.patterns import (
    INCLUDE_PATTERN,
    clean_nested,
    flatten_whitespace,
    strip_comments,
    unwrap_placeholders,
    wrap_placeholders_in_cdata,
)


class TestIncludePattern:
    """Tests for include directive matching."""

    @pytest.mark.parametrize("directive, expected", [
        ('<!-- #include file="part.xml" -->', "part.xml"),
        ('<!--#include file="part.xml"-->', "part.xml"),
        ('<!--   #include file="dir/part.xml"   -->', "dir/part.xml"),
        ('<!-- #include file=" spaced.xml " -->', " spaced.xml "),
        ('<!-- #include file="a\\b.xml" -->', "a\\b.xml"),
    ])
    def test_include_pattern_captures_path(self, directive, expected):
        """Captures the quoted file attribute."""
        match = INCLUDE_PATTERN.search(directive)
        assert match is not None
        assert match.group(1) == expected

    def test_include_pattern_finds_every_directive_in_order(self):
        """Finds sibling directives left to right."""
        text = '<a><!-- #include file="one.xml" --><!-- #include file="two.xml" --></a>'
        assert [m.group(1) for m in INCLUDE_PATTERN.finditer(text)] == ["one.xml", "two.xml"]

    def test_include_pattern_ignores_plain_comments(self):
        """Ordinary comments are not directives."""
        assert INCLUDE_PATTERN.search("<!-- include file='x.xml' -->") is None
        assert INCLUDE_PATTERN.search("<!-- just a note -->") is None


class TestUnwrapPlaceholders:
    """Tests for placeholder unwrapping."""

    def test_unwrap_keeps_inner_content(self):
        assert unwrap_placeholders("<placeholder><b>hi</b></placeholder>") == "<b>hi</b>"

    def test_unwrap_when_opening_tag_has_attributes(self):
        text = '<x><placeholder name="body" lang="en">text</placeholder></x>'
        assert unwrap_placeholders(text) == "<x>text</x>"

    def test_unwrap_is_case_insensitive(self):
        assert unwrap_placeholders("<PlaceHolder>a</PLACEHOLDER>") == "a"

    def test_unwrap_spans_lines_and_multiple_blocks(self):
        text = "<placeholder>\none\n</placeholder> and <placeholder>two</placeholder>"
        assert unwrap_placeholders(text) == "\none\n and two"

    def test_unwrap_does_not_touch_similar_tags(self):
        text = "<placeholders>x</placeholders>"
        assert unwrap_placeholders(text) == text


class TestStripComments:
    """Tests for comment removal."""

    def test_strip_removes_multiline_comment(self):
        assert strip_comments("a<!-- one\ntwo\n-->b") == "ab"

    def test_strip_is_non_greedy(self):
        """Text between two comments survives."""
        assert strip_comments("<!-- x -->keep<!-- y -->") == "keep"

    def test_strip_leaves_text_without_comments(self):
        assert strip_comments("<a>plain</a>") == "<a>plain</a>"


class TestFlattenWhitespace:
    """Tests for whitespace flattening."""

    def test_flatten_collapses_runs_to_single_space(self):
        assert flatten_whitespace("a    b\t\tc") == "a b c"

    def test_flatten_removes_single_newlines(self):
        assert flatten_whitespace("x\ny\rz") == "xyz"

    def test_flatten_indented_markup(self):
        text = "<p>\n  one\n\n  two\n</p>\n"
        assert flatten_whitespace(text) == "<p> one two</p>"

    def test_flatten_crlf_pair_becomes_space(self):
        """A CRLF is a two-character whitespace run."""
        assert flatten_whitespace("a\r\nb") == "a b"

    def test_flatten_output_is_single_line(self):
        result = flatten_whitespace("one\n\ntwo\r\n\r\nthree\n")
        assert "\n" not in result
        assert "\r" not in result


def test_clean_nested_unwraps_then_strips():
    """Comments inside placeholder blocks are removed too."""
    text = "<placeholder><!-- note --><b>hi</b></placeholder><!-- tail -->"
    assert clean_nested(text) == "<b>hi</b>"


class TestWrapPlaceholdersInCdata:
    """Tests for CDATA wrapping."""

    def test_wrap_trims_and_wraps_content(self):
        text = "<x><placeholder>  a < b  </placeholder></x>"
        assert wrap_placeholders_in_cdata(text) == "<x>\n<![CDATA[\na < b\n]]></x>"

    def test_wrap_unwraps_nested_cdata(self):
        text = "<placeholder><![CDATA[<raw>]]></placeholder>"
        assert wrap_placeholders_in_cdata(text) == "\n<![CDATA[\n<raw>\n]]>"

    def test_wrap_without_placeholders_is_noop(self):
        assert wrap_placeholders_in_cdata("<a/>") == "<a/>"
