#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the inline formatters."""

import pytest
from utils import DEFAULT_OPTIONS, EMPTY_SOURCE, dummy_node, parent_node, rendered

from norgfmt.cst import SourceText, SyntaxNode
from norgfmt.exceptions import MalformedSpanError, MissingRequiredChildError
from norgfmt.formatters import inline
from norgfmt.options import NorgFormatterOptions


def _leaf(formatter, kind, text, options=DEFAULT_OPTIONS):
    source = SourceText(text)
    return formatter(SyntaxNode(kind, 0, len(source)), [], source, options)


def _composite(formatter, kind, *pairs, options=DEFAULT_OPTIONS):
    children = rendered(*pairs)
    return formatter(parent_node(kind, children), children, EMPTY_SOURCE, options)


@pytest.mark.unit
class TestMarkup:
    """Test the compact/free-form decision for attached modifiers."""

    def _markup(self, *pairs):
        children = rendered(*pairs)
        return inline.markup(dummy_node("bold"), children, EMPTY_SOURCE, DEFAULT_OPTIONS)

    def test_compact_form_passes_through(self):
        assert self._markup(("bold_open", "*"), ("word", "bold"), ("bold_close", "*")) == "*bold*"

    def test_needless_free_form_collapses(self):
        result = self._markup(
            ("bold_open", "*"),
            ("free_form_open", "|"),
            ("word", "test"),
            ("free_form_close", "|"),
            ("bold_close", "*"),
        )
        assert result == "*test*"

    def test_escaped_punctuation_forces_free_form(self):
        result = self._markup(
            ("bold_open", "*"),
            ("word", "hello"),
            ("escape_sequence", "\\*"),
            ("space", " "),
            ("word", "world"),
            ("bold_close", "*"),
        )
        assert result == "*|hello* world|*"

    def test_free_form_with_escape_is_unchanged(self):
        result = self._markup(
            ("italic_open", "/"),
            ("free_form_open", "|"),
            ("word", "a"),
            ("escape_sequence", "\\/"),
            ("free_form_close", "|"),
            ("italic_close", "/"),
        )
        assert result == "/|a\\/|/"

    def test_non_punctuation_escape_keeps_compact_form(self):
        # The escape formatter has already reduced "\t" to "t"
        result = self._markup(("bold_open", "*"), ("escape_sequence", "t"), ("word", "est"), ("bold_close", "*"))
        assert result == "*test*"

    @pytest.mark.parametrize("body", ["a*b", " a", "a ", ""])
    def test_free_form_kept_when_compact_cannot_express_body(self, body):
        pairs = [("bold_open", "*"), ("free_form_open", "|")]
        if body:
            pairs.append(("word", body))
        pairs += [("free_form_close", "|"), ("bold_close", "*")]
        assert self._markup(*pairs) == f"*|{body}|*"

    def test_too_few_children_raises(self):
        with pytest.raises(MissingRequiredChildError, match="attached modifier"):
            self._markup(("bold_open", "*"))


@pytest.mark.unit
class TestEscapeSequence:
    """Test escape normalization."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("\\t", "t"),
            ("\\ ", " "),
            ("\\\\", "\\\\"),
            ("\\*", "\\*"),
            ("\\/", "\\/"),
            ("\\\n", "\n"),
        ],
    )
    def test_escapes(self, source, expected):
        assert _leaf(inline.escape_sequence, "escape_sequence", source) == expected

    def test_empty_escape_raises(self):
        with pytest.raises(MalformedSpanError):
            _leaf(inline.escape_sequence, "escape_sequence", "")


@pytest.mark.unit
class TestLinks:
    """Test link parts."""

    def test_link_target_collapses_title(self):
        result = _composite(
            inline.link_target,
            "link_target_heading1",
            ("link_target_heading1_prefix", "*"),
            ("space", "    "),
            ("word", "long"),
            ("space", " \t "),
            ("word", "link"),
            ("space", " "),
        )
        assert result == "* long link"

    def test_leaf_link_target(self):
        assert _leaf(inline.link_target, "link_target_generic", "#  x   y ") == "# x y"

    def test_link_location_joins_targets(self):
        result = _composite(
            inline.link_location,
            "link_location",
            ("link_target_heading1", "* Intro"),
            (":", " : "),
            ("link_target_generic", "# b"),
        )
        assert result == "* Intro : # b"

    def test_link_location_file_prefix(self):
        result = _composite(
            inline.link_location,
            "link_location",
            ("link_file_location", " :notes: "),
            ("link_target_heading1", "* Intro"),
        )
        assert result == ":notes:* Intro"

    def test_link_location_with_uri(self):
        result = _composite(inline.link_location, "link_location", ("uri", "https://example.com"))
        assert result == "https://example.com"

    def test_link_location_without_targets_passes_through(self):
        assert _composite(inline.link_location, "link_location", ("word", "abc")) == "abc"

    def test_link_location_keeps_delimiters(self):
        result = _composite(
            inline.link_location,
            "link_location",
            ("_begin", "{"),
            ("link_target_heading1", "* long link"),
            ("_end", "}"),
        )
        assert result == "{* long link}"

    def test_link_location_keeps_unknown_children(self):
        result = _composite(
            inline.link_location,
            "link_location",
            ("link_target_heading1", "* a"),
            ("link_modifier", ":"),
            ("word", "extra"),
        )
        assert result == "* a:extra"

    def test_link_location_separator_runs(self):
        result = _composite(
            inline.link_location,
            "link_location",
            ("_begin", "{"),
            ("link_file_location", ":notes: "),
            ("link_target_heading1", "* a"),
            ("space", "  "),
            (":", ":"),
            ("space", " "),
            ("link_target_generic", "# b"),
            ("_end", "}"),
        )
        assert result == "{:notes:* a : # b}"

    def test_link_location_trailing_space_kept(self):
        result = _composite(
            inline.link_location,
            "link_location",
            ("link_target_generic", "# b"),
            ("space", " "),
            ("_end", "}"),
        )
        assert result == "# b }"

    def test_uri_whitespace_removed(self):
        text = "https://there should be no space here.com"
        assert _leaf(inline.uri, "uri", text) == "https://thereshouldbenospacehere.com"

    def test_description_collapsed(self):
        result = _composite(
            inline.description,
            "description",
            ("space", " "),
            ("word", "and"),
            ("space", "  "),
            ("word", "x"),
            ("space", " "),
        )
        assert result == "and x"

    def test_empty_description(self):
        assert _leaf(inline.description, "description", "") == ""

    def test_inline_link_target_leaf(self):
        assert _leaf(inline.inline_link_target, "inline_link_target", "<  some   target >") == "<some target>"

    def test_inline_link_target_children(self):
        result = _composite(inline.inline_link_target, "inline_link_target", ("word", "a"), ("space", "  "), ("word", "b"))
        assert result == "<a b>"


@pytest.mark.unit
class TestParagraph:
    """Test paragraph reflow through the formatter."""

    def test_whitespace_collapsed(self):
        assert _composite(inline.paragraph, "paragraph", ("word", "a"), ("space", "   "), ("word", "b")) == "a b"

    def test_uses_configured_line_length(self):
        options = NorgFormatterOptions(line_length=10)
        result = _composite(
            inline.paragraph,
            "paragraph",
            ("word", "aaaa"),
            ("space", " "),
            ("word", "bbbbb"),
            options=options,
        )
        assert result == "aaaa\nbbbbb"
