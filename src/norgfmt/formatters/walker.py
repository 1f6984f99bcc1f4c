#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/formatters/walker.py
"""Post-order fold of a syntax tree into canonical Norg text.

The walker knows nothing about individual node kinds. For every node it
first renders all children, then picks one of three policies:

1. The kind is recognized and has a formatter: call it, even for leaves.
2. The node is a leaf: emit its verbatim source text.
3. Otherwise: concatenate the children's rendered content.

Source text covered by no node (whitespace between children, typically)
is never emitted; formatters decide what whitespace to produce.

The traversal uses an explicit work stack instead of recursion, so very
deeply nested documents are bounded by memory rather than by the
interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from typing import Mapping

from norgfmt.cst.nodes import (
    ATTACHED_MODIFIER_KINDS,
    CARRYOVER_KINDS,
    NESTABLE_KINDS,
    RANGEABLE_KINDS,
    NodeKind,
    RenderedNode,
    SourceText,
    SyntaxNode,
    classify,
)
from norgfmt.formatters import block, inline
from norgfmt.formatters.base import Formatter, content_from
from norgfmt.options.norg import NorgFormatterOptions

logger = logging.getLogger(__name__)


def _build_dispatch_table() -> dict[NodeKind, Formatter]:
    table: dict[NodeKind, Formatter] = {
        NodeKind.HEADING: block.heading,
        NodeKind.HEADING_STARS: block.heading_stars,
        NodeKind.TITLE: block.title,
        NodeKind.RANGED_TAG: block.ranged_tag,
        NodeKind.RANGED_VERBATIM_TAG: block.ranged_tag,
        NodeKind.ESCAPE_SEQUENCE: inline.escape_sequence,
        NodeKind.URI: inline.uri,
        NodeKind.DESCRIPTION: inline.description,
        NodeKind.LINK_TARGET: inline.link_target,
        NodeKind.LINK_LOCATION: inline.link_location,
        NodeKind.INLINE_LINK_TARGET: inline.inline_link_target,
        NodeKind.PARAGRAPH: inline.paragraph,
    }
    table.update({kind: block.nestable_modifier for kind in NESTABLE_KINDS})
    table.update({kind: block.rangeable_modifier for kind in RANGEABLE_KINDS})
    table.update({kind: block.carryover_tag for kind in CARRYOVER_KINDS})
    table.update({kind: inline.markup for kind in ATTACHED_MODIFIER_KINDS})
    return table


FORMATTERS: Mapping[NodeKind, Formatter] = _build_dispatch_table()


class TreeWalker:
    """Render syntax trees with a fixed set of options.

    Parameters
    ----------
    options : NorgFormatterOptions, optional
        Formatting options, defaults when omitted
    formatters : Mapping[NodeKind, Formatter], optional
        Dispatch table; the built-in table when omitted

    """

    def __init__(
        self,
        options: NorgFormatterOptions | None = None,
        formatters: Mapping[NodeKind, Formatter] | None = None,
    ):
        self.options = options or NorgFormatterOptions()
        self.formatters = FORMATTERS if formatters is None else formatters
        self._reported_kinds: set[str] = set()

    def _render_node(self, node: SyntaxNode, children: list[RenderedNode], source: SourceText) -> str:
        kind = classify(node.kind)
        formatter = self.formatters.get(kind) if kind is not None else None
        if formatter is not None:
            return formatter(node, children, source, self.options)

        if node.is_leaf:
            return source.text_of(node)

        if kind is None and node.kind not in self._reported_kinds:
            self._reported_kinds.add(node.kind)
            logger.debug("No formatter for node kind '%s', concatenating its children", node.kind)
        return content_from(children)

    def render(self, root: SyntaxNode, source: SourceText | str | bytes) -> str:
        """Render ``root`` and its whole subtree.

        Parameters
        ----------
        root : SyntaxNode
            Node to render
        source : SourceText, str or bytes
            Document the node spans index into

        Returns
        -------
        str
            Canonical text of the subtree, untrimmed

        Raises
        ------
        MissingRequiredChildError
            If a formatter's structural precondition does not hold
        MalformedSpanError
            If a span cannot be decoded from the source

        """
        if not isinstance(source, SourceText):
            source = SourceText(source)

        rendered: list[RenderedNode] = []
        stack: list[tuple[SyntaxNode, bool]] = [(root, False)]

        while stack:
            node, expanded = stack.pop()
            if not expanded and node.children:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(node.children))
                continue

            count = len(node.children)
            children = rendered[len(rendered) - count :] if count else []
            if count:
                del rendered[len(rendered) - count :]
            rendered.append(RenderedNode(node.kind, self._render_node(node, children, source)))

        return rendered[0].content


def render(
    node: SyntaxNode,
    source: SourceText | str | bytes,
    options: NorgFormatterOptions | None = None,
) -> str:
    """Render a subtree without trimming the result."""
    return TreeWalker(options).render(node, source)


def format_tree(
    root: SyntaxNode,
    source: SourceText | str | bytes,
    options: NorgFormatterOptions | None = None,
) -> str:
    """Format a whole document tree.

    The rendered root is stripped of surrounding whitespace, which removes
    the trailing line break every block leaves behind.

    Parameters
    ----------
    root : SyntaxNode
        Root of the document tree
    source : SourceText, str or bytes
        Document text
    options : NorgFormatterOptions, optional
        Formatting options, defaults when omitted

    Returns
    -------
    str
        Canonical document text

    Examples
    --------
        >>> from norgfmt.cst import TreeBuilder
        >>> b = TreeBuilder()
        >>> root = b.node("document", b.node("paragraph", b.leaf("word", "hello"), b.leaf("space", "   "), b.leaf("word", "world")))
        >>> format_tree(root, b.source)
        'hello world'

    """
    return render(root, source, options).strip()
