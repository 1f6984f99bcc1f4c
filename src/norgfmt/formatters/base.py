#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/formatters/base.py
"""Shared signature and helpers for node-kind formatters.

Every formatter is a pure function of the node being formatted, its
already-rendered children, the source text and the active options. It
returns the canonical text for the whole subtree.
"""

from __future__ import annotations

from typing import Callable, Sequence

from norgfmt.cst.nodes import RenderedNode, SourceText, SyntaxNode
from norgfmt.exceptions import MissingRequiredChildError
from norgfmt.options.norg import NorgFormatterOptions

Formatter = Callable[[SyntaxNode, Sequence[RenderedNode], SourceText, NorgFormatterOptions], str]


def content_from(children: Sequence[RenderedNode], start: int | None = None, end: int | None = None) -> str:
    """Concatenate the rendered content of ``children[start:end]``."""
    return "".join(child.content for child in children[start:end])


def required_child(node: SyntaxNode, children: Sequence[RenderedNode], index: int, context: str) -> RenderedNode:
    """Return ``children[index]`` or fail with ``MissingRequiredChildError``.

    Parameters
    ----------
    node : SyntaxNode
        Node being formatted, named in the error message
    children : sequence of RenderedNode
        Rendered children of ``node``
    index : int
        Position of the required child
    context : str
        Description of the violated precondition, e.g. "heading has no stars"

    """
    if index >= len(children):
        raise MissingRequiredChildError(context, node_kind=node.kind)
    return children[index]


def own_text(node: SyntaxNode, children: Sequence[RenderedNode], source: SourceText) -> str:
    """Rendered children for a composite node, verbatim source text for a leaf."""
    if node.is_leaf:
        return source.text_of(node)
    return content_from(children)
