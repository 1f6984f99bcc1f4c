#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/cst/nodes.py
"""Concrete syntax tree model consumed by the formatter.

The parser is an external collaborator. Whatever produced the tree, the
formatter only needs three things from it: a kind tag per node, ordered
children, and a byte span into the UTF-8 source. ``SyntaxNode`` captures
exactly that. ``RenderedNode`` is what a node becomes once its whole
subtree has been reduced to canonical text.

Node Kinds
----------
``NodeKind`` enumerates the grammar productions the formatter understands.
Any other kind falls through to the default policy of the walker: a leaf
is emitted as its verbatim source text, a composite node as the
concatenation of its rendered children.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from norgfmt.exceptions import MalformedSpanError


@dataclass(frozen=True)
class SyntaxNode:
    """A node of the concrete syntax tree.

    Parameters
    ----------
    kind : str
        Grammar production name, e.g. ``"heading"`` or ``"bold"``
    start_byte : int
        Offset of the first byte of the node in the source
    end_byte : int
        Offset one past the last byte of the node
    children : tuple of SyntaxNode, default ()
        Ordered child nodes

    """

    kind: str
    start_byte: int
    end_byte: int
    children: tuple[SyntaxNode, ...] = field(default_factory=tuple)

    @property
    def is_leaf(self) -> bool:
        """Whether the node has no children."""
        return not self.children


@dataclass(frozen=True)
class RenderedNode:
    """A node reduced to its canonical text.

    Parameters
    ----------
    kind : str
        Kind tag copied from the source node
    content : str
        Fully rendered text of the node's subtree

    """

    kind: str
    content: str


class SourceText:
    """UTF-8 source document that node spans index into.

    Parameters
    ----------
    source : str or bytes
        The document. Text is encoded to UTF-8 once up front.

    """

    def __init__(self, source: str | bytes):
        """Store the document as UTF-8 bytes."""
        self.data = source.encode("utf-8") if isinstance(source, str) else bytes(source)

    def __len__(self) -> int:
        return len(self.data)

    def slice(self, start_byte: int, end_byte: int) -> str:
        """Decode the bytes in ``[start_byte, end_byte)``.

        Raises
        ------
        MalformedSpanError
            If the span is reversed, falls outside the buffer, or does not
            decode as UTF-8 (for example because it cuts a multi-byte
            character in half).

        """
        if start_byte < 0 or end_byte < start_byte or end_byte > len(self.data):
            raise MalformedSpanError(
                start_byte,
                end_byte,
                message=f"Span [{start_byte}, {end_byte}) lies outside the {len(self.data)}-byte source",
            )
        try:
            return self.data[start_byte:end_byte].decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedSpanError(start_byte, end_byte, original_error=e) from e

    def text_of(self, node: SyntaxNode) -> str:
        """Return the verbatim source text covered by ``node``."""
        return self.slice(node.start_byte, node.end_byte)

    def decode(self) -> str:
        """Return the whole document as text."""
        return self.slice(0, len(self.data))


class NodeKind(str, Enum):
    """Grammar productions with a dedicated formatter."""

    # Headings
    HEADING = "heading"
    HEADING_STARS = "heading_stars"
    TITLE = "title"

    # Nestable detached modifiers
    UNORDERED_LIST_ITEM = "unordered_list_item"
    ORDERED_LIST_ITEM = "ordered_list_item"
    QUOTE_LIST_ITEM = "quote_list_item"

    # Rangeable detached modifiers and their closers
    SINGLE_DEFINITION = "single_definition"
    MULTI_DEFINITION = "multi_definition"
    SINGLE_FOOTNOTE = "single_footnote"
    MULTI_FOOTNOTE = "multi_footnote"
    SINGLE_TABLE_CELL = "single_table_cell"
    MULTI_TABLE_CELL = "multi_table_cell"
    MULTI_DEFINITION_SUFFIX = "multi_definition_suffix"
    MULTI_FOOTNOTE_SUFFIX = "multi_footnote_suffix"
    MULTI_TABLE_CELL_SUFFIX = "multi_table_cell_suffix"

    # Tags
    RANGED_TAG = "ranged_tag"
    RANGED_VERBATIM_TAG = "ranged_verbatim_tag"
    STRONG_CARRYOVER = "strong_carryover"
    WEAK_CARRYOVER = "weak_carryover"
    INFIRM_TAG = "infirm_tag"
    TAG_PARAM = "tag_param"

    # Attached modifiers
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    SPOILER = "spoiler"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    VERBATIM = "verbatim"
    INLINE_COMMENT = "inline_comment"
    MATH = "math"
    INLINE_MACRO = "inline_macro"
    FREE_FORM_OPEN = "free_form_open"
    FREE_FORM_CLOSE = "free_form_close"

    # Inline leaves and links
    ESCAPE_SEQUENCE = "escape_sequence"
    URI = "uri"
    DESCRIPTION = "description"
    LINK_LOCATION = "link_location"
    LINK_FILE_LOCATION = "link_file_location"
    LINK_TARGET = "link_target"
    INLINE_LINK_TARGET = "inline_link_target"

    # Flowed text
    PARAGRAPH = "paragraph"


LINK_TARGET_PREFIXES: tuple[str, ...] = ("link_target_", "link_scope_")


NESTABLE_KINDS = frozenset(
    {NodeKind.UNORDERED_LIST_ITEM, NodeKind.ORDERED_LIST_ITEM, NodeKind.QUOTE_LIST_ITEM}
)


RANGEABLE_KINDS = frozenset(
    {
        NodeKind.SINGLE_DEFINITION,
        NodeKind.MULTI_DEFINITION,
        NodeKind.SINGLE_FOOTNOTE,
        NodeKind.MULTI_FOOTNOTE,
        NodeKind.SINGLE_TABLE_CELL,
        NodeKind.MULTI_TABLE_CELL,
    }
)


RANGEABLE_CLOSER_KINDS = frozenset(
    {
        NodeKind.MULTI_DEFINITION_SUFFIX,
        NodeKind.MULTI_FOOTNOTE_SUFFIX,
        NodeKind.MULTI_TABLE_CELL_SUFFIX,
    }
)


ATTACHED_MODIFIER_KINDS = frozenset(
    {
        NodeKind.BOLD,
        NodeKind.ITALIC,
        NodeKind.UNDERLINE,
        NodeKind.STRIKETHROUGH,
        NodeKind.SPOILER,
        NodeKind.SUPERSCRIPT,
        NodeKind.SUBSCRIPT,
        NodeKind.VERBATIM,
        NodeKind.INLINE_COMMENT,
        NodeKind.MATH,
        NodeKind.INLINE_MACRO,
    }
)


CARRYOVER_KINDS = frozenset({NodeKind.STRONG_CARRYOVER, NodeKind.WEAK_CARRYOVER, NodeKind.INFIRM_TAG})


_KINDS_BY_VALUE = {member.value: member for member in NodeKind}


def classify(kind: str) -> Optional[NodeKind]:
    """Map a raw kind tag onto the closed set of recognized kinds.

    Every ``link_target_*`` and ``link_scope_*`` production classifies as
    ``NodeKind.LINK_TARGET``.

    Parameters
    ----------
    kind : str
        Raw kind tag from the syntax tree

    Returns
    -------
    NodeKind or None
        The recognized kind, or None when the walker should apply its
        default policy

    """
    member = _KINDS_BY_VALUE.get(kind)
    if member is not None:
        return member
    if kind.startswith(LINK_TARGET_PREFIXES):
        return NodeKind.LINK_TARGET
    return None
