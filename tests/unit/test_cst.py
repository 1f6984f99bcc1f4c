#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the syntax tree model and the tree builder."""

import dataclasses

import pytest

from norgfmt.cst import NodeKind, SourceText, SyntaxNode, TreeBuilder, classify
from norgfmt.exceptions import MalformedSpanError


@pytest.mark.unit
class TestSyntaxNode:
    """Test the immutable node model."""

    def test_leaf_and_children(self):
        leaf = SyntaxNode("word", 0, 3)
        parent = SyntaxNode("paragraph", 0, 3, (leaf,))
        assert leaf.is_leaf
        assert not parent.is_leaf

    def test_frozen(self):
        node = SyntaxNode("word", 0, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.kind = "other"


@pytest.mark.unit
class TestClassify:
    """Test mapping of raw kind tags to recognized kinds."""

    def test_exact_kinds(self):
        assert classify("heading") is NodeKind.HEADING
        assert classify("bold") is NodeKind.BOLD
        assert classify("multi_table_cell_suffix") is NodeKind.MULTI_TABLE_CELL_SUFFIX

    @pytest.mark.parametrize("kind", ["link_target_heading3", "link_target_url", "link_scope_footnote"])
    def test_link_target_prefixes(self, kind):
        assert classify(kind) is NodeKind.LINK_TARGET

    @pytest.mark.parametrize("kind", ["document", "word", "heading1", ""])
    def test_unrecognized(self, kind):
        assert classify(kind) is None

    def test_kinds_compare_equal_to_strings(self):
        assert NodeKind.PARAGRAPH == "paragraph"


@pytest.mark.unit
class TestSourceText:
    """Test span decoding."""

    def test_str_and_bytes(self):
        assert SourceText("héllo").slice(0, 3) == "hé"
        assert SourceText("héllo".encode("utf-8")).decode() == "héllo"
        assert len(SourceText("é")) == 2

    def test_text_of(self):
        source = SourceText("* Heading")
        assert source.text_of(SyntaxNode("title", 2, 9)) == "Heading"

    @pytest.mark.parametrize("start,end", [(-1, 2), (3, 2), (0, 100)])
    def test_out_of_bounds(self, start, end):
        with pytest.raises(MalformedSpanError, match="lies outside"):
            SourceText("abc").slice(start, end)

    def test_invalid_utf8(self):
        with pytest.raises(MalformedSpanError) as exc_info:
            SourceText("é").slice(1, 2)
        assert isinstance(exc_info.value.original_error, UnicodeDecodeError)


@pytest.mark.unit
class TestTreeBuilder:
    """Test hand-built trees."""

    def test_offsets_follow_source(self):
        b = TreeBuilder()
        stars = b.leaf("heading_stars", "* ")
        word = b.leaf("word", "Hi")
        title = b.node("title", word)
        heading = b.node("heading", stars, title)

        assert b.source == "* Hi"
        assert (heading.start_byte, heading.end_byte) == (0, 4)
        assert (title.start_byte, title.end_byte) == (2, 4)
        assert heading.children == (stars, title)

    def test_gap_advances_offset(self):
        b = TreeBuilder()
        b.gap("   ")
        node = b.leaf("word", "x")
        assert b.offset == 4
        assert (node.start_byte, node.end_byte) == (3, 4)

    def test_offsets_are_utf8_bytes(self):
        b = TreeBuilder()
        b.leaf("word", "ü")
        node = b.leaf("word", "x")
        assert node.start_byte == 2
        assert SourceText(b.source).text_of(node) == "x"

    def test_empty_node_sits_at_offset(self):
        b = TreeBuilder()
        b.leaf("word", "ab")
        empty = b.node("description")
        assert (empty.start_byte, empty.end_byte) == (2, 2)
        assert empty.is_leaf

    def test_out_of_order_children_rejected(self):
        b = TreeBuilder()
        first = b.leaf("word", "a")
        second = b.leaf("word", "b")
        with pytest.raises(ValueError, match="starts before"):
            b.node("paragraph", second, first)
