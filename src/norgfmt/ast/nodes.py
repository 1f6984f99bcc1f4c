#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/ast/nodes.py
"""Flat semantic AST for Norg documents.

Unlike the concrete syntax tree, this representation is already
classified: a document is a flat list of blocks, and inline text is a list
of segments. Nested list items and headings appear as consecutive blocks
with increasing ``level`` rather than as children.

Node Hierarchy
--------------
Blocks:
    - Heading, NestableDetachedModifier, RangeableDetachedModifier
    - CarryoverTag, InfirmTag, VerbatimRangedTag, RangedTag, Paragraph

Segments:
    - Token, AttachedModifier, Link, AnchorDefinition, Anchor, InlineLinkTarget

Link targets:
    - LinkTarget (kind plus title or value)

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from norgfmt.constants import CarryoverTagType, LinkTargetKind


class Node(ABC):
    """Base class for all flat AST nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Inline segments
# ============================================================================


@dataclass
class Token(Node):
    """Plain text, including the whitespace between words."""

    text: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_token(self)


@dataclass
class AttachedModifier(Node):
    """Inline markup such as ``*bold*`` or ``/italic/``.

    Parameters
    ----------
    modifier_type : str
        The delimiter character, e.g. ``"*"``
    content : list of Segment
        Enclosed segments

    """

    modifier_type: str
    content: list[Segment] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_attached_modifier(self)


@dataclass
class LinkTarget(Node):
    """One target of a link.

    Parameters
    ----------
    kind : LinkTargetKind
        heading, footnote, definition, generic, wiki, extendable, path,
        url or timestamp
    title : list of Segment, default empty
        Title segments, used by the kinds that carry a title
    value : str, default ""
        Raw value for path, url and timestamp targets
    level : int, default 1
        Heading level, used only by heading targets

    """

    kind: LinkTargetKind
    title: list[Segment] = field(default_factory=list)
    value: str = ""
    level: int = 1

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError(f"Link target level must be >= 1, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link_target(self)


@dataclass
class Link(Node):
    """A link ``{:file:target : target}[description]``.

    Parameters
    ----------
    filepath : str or None
        File location written before the targets, e.g. ``":notes:"``
    targets : list of LinkTarget
        Targets joined with ``" : "``
    description : list of Segment or None
        Description segments; None renders no ``[...]`` part at all

    """

    filepath: Optional[str] = None
    targets: list[LinkTarget] = field(default_factory=list)
    description: Optional[list[Segment]] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link(self)


@dataclass
class AnchorDefinition(Node):
    """An anchor bound to a link: ``[content]{target}``."""

    content: list[Segment]
    target: Link

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_anchor_definition(self)


@dataclass
class Anchor(Node):
    """An anchor reference ``[content]`` with an optional ``[description]``."""

    content: list[Segment]
    description: Optional[list[Segment]] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_anchor(self)


@dataclass
class InlineLinkTarget(Node):
    """An inline link target ``<content>``."""

    content: list[Segment]

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_inline_link_target(self)


Segment = Union[Token, AttachedModifier, Link, AnchorDefinition, Anchor, InlineLinkTarget]


# ============================================================================
# Blocks
# ============================================================================


@dataclass
class Heading(Node):
    """A heading of the given level (number of stars)."""

    level: int
    title: list[Segment] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError(f"Heading level must be >= 1, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """A run of inline segments, reflowed on output."""

    content: list[Segment] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_paragraph(self)


@dataclass
class NestableDetachedModifier(Node):
    """A list item (``-``), ordered item (``~``) or quote (``>``).

    Parameters
    ----------
    modifier_type : str
        The modifier character
    level : int
        Nesting depth; the character is repeated this many times
    content : Block
        The item's content, usually a paragraph

    """

    modifier_type: str
    level: int
    content: Block

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError(f"Nesting level must be >= 1, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_nestable_detached_modifier(self)


@dataclass
class RangeableDetachedModifier(Node):
    """A definition (``$``), footnote (``^``) or table cell (``:``)."""

    modifier_type: str
    title: list[Segment] = field(default_factory=list)
    content: list[Block] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_rangeable_detached_modifier(self)


@dataclass
class CarryoverTag(Node):
    """An attribute (``+``) or macro (``#``) tag applied to the next block.

    Parameters
    ----------
    tag_type : {"attribute", "macro"}
        Which prefix character to use
    name : list of str
        Dotted name parts
    parameters : list of str
        Tag parameters
    next_object : Block
        The block the tag applies to

    """

    tag_type: CarryoverTagType
    name: list[str]
    parameters: list[str]
    next_object: Block

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_carryover_tag(self)


@dataclass
class InfirmTag(Node):
    """A standalone ``.name params`` tag."""

    name: list[str]
    parameters: list[str] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_infirm_tag(self)


@dataclass
class VerbatimRangedTag(Node):
    """An ``@name`` ... ``@end`` block whose content is kept byte for byte."""

    name: list[str]
    parameters: list[str] = field(default_factory=list)
    content: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_verbatim_ranged_tag(self)


@dataclass
class RangedTag(Node):
    """A ``|name`` ... ``|end`` block with formatted content."""

    name: list[str]
    parameters: list[str] = field(default_factory=list)
    content: list[Block] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_ranged_tag(self)


Block = Union[
    Heading,
    Paragraph,
    NestableDetachedModifier,
    RangeableDetachedModifier,
    CarryoverTag,
    InfirmTag,
    VerbatimRangedTag,
    RangedTag,
]
