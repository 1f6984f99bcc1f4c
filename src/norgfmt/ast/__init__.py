#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/ast/__init__.py
"""Flat semantic AST for Norg documents.

A second input form for the formatter: blocks that have already been
classified by a semantic parser, rendered by ``norgfmt.renderers.norg``.

- nodes: block, segment and link target classes
- visitors: ``NodeVisitor`` base class

Examples
--------
    >>> from norgfmt.ast import Heading, Paragraph, Token
    >>> from norgfmt.renderers import NorgRenderer
    >>> blocks = [Heading(level=1, title=[Token("Title")]), Paragraph([Token("Hello world")])]
    >>> NorgRenderer().render_to_string(blocks)
    '* Title\\nHello world'

"""

from __future__ import annotations

from norgfmt.ast.nodes import (
    Anchor,
    AnchorDefinition,
    AttachedModifier,
    Block,
    CarryoverTag,
    Heading,
    InfirmTag,
    InlineLinkTarget,
    Link,
    LinkTarget,
    NestableDetachedModifier,
    Node,
    Paragraph,
    RangeableDetachedModifier,
    RangedTag,
    Segment,
    Token,
    VerbatimRangedTag,
)
from norgfmt.ast.visitors import NodeVisitor

__all__ = [
    "Anchor",
    "AnchorDefinition",
    "AttachedModifier",
    "Block",
    "CarryoverTag",
    "Heading",
    "InfirmTag",
    "InlineLinkTarget",
    "Link",
    "LinkTarget",
    "NestableDetachedModifier",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "RangeableDetachedModifier",
    "RangedTag",
    "Segment",
    "Token",
    "VerbatimRangedTag",
]
