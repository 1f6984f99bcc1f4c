#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/ast/visitors.py
"""Visitor base class for the flat Norg AST.

Each node's ``accept`` dispatches to the matching ``visit_*`` method, so
renderers and other processors stay separate from the node classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from norgfmt.ast.nodes import (
    Anchor,
    AnchorDefinition,
    AttachedModifier,
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
    Token,
    VerbatimRangedTag,
)


class NodeVisitor(ABC):
    """Abstract base class for flat AST visitors.

    Examples
    --------
    Count the words in all plain tokens:

        >>> class WordCounter(NodeVisitor):
        ...     def visit_token(self, node):
        ...         return len(node.text.split())
        ...     # remaining visit_* methods omitted

    """

    # Blocks

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_nestable_detached_modifier(self, node: NestableDetachedModifier) -> Any:
        """Visit a list item, ordered item or quote."""
        pass

    @abstractmethod
    def visit_rangeable_detached_modifier(self, node: RangeableDetachedModifier) -> Any:
        """Visit a definition, footnote or table cell."""
        pass

    @abstractmethod
    def visit_carryover_tag(self, node: CarryoverTag) -> Any:
        """Visit a CarryoverTag node."""
        pass

    @abstractmethod
    def visit_infirm_tag(self, node: InfirmTag) -> Any:
        """Visit an InfirmTag node."""
        pass

    @abstractmethod
    def visit_verbatim_ranged_tag(self, node: VerbatimRangedTag) -> Any:
        """Visit a VerbatimRangedTag node."""
        pass

    @abstractmethod
    def visit_ranged_tag(self, node: RangedTag) -> Any:
        """Visit a RangedTag node."""
        pass

    # Segments

    @abstractmethod
    def visit_token(self, node: Token) -> Any:
        """Visit a Token node."""
        pass

    @abstractmethod
    def visit_attached_modifier(self, node: AttachedModifier) -> Any:
        """Visit an AttachedModifier node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_link_target(self, node: LinkTarget) -> Any:
        """Visit a LinkTarget node."""
        pass

    @abstractmethod
    def visit_anchor_definition(self, node: AnchorDefinition) -> Any:
        """Visit an AnchorDefinition node."""
        pass

    @abstractmethod
    def visit_anchor(self, node: Anchor) -> Any:
        """Visit an Anchor node."""
        pass

    @abstractmethod
    def visit_inline_link_target(self, node: InlineLinkTarget) -> Any:
        """Visit an InlineLinkTarget node."""
        pass

    def generic_visit(self, node: Node) -> Any:
        """Fallback for node types without a dedicated method.

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
