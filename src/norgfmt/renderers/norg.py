#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/renderers/norg.py
"""Canonical Norg rendering of the flat semantic AST.

This renderer produces the same canonical forms as the syntax tree
formatter, starting from already-classified blocks:

- Headings: ``*`` repeated per level, then the title
- List items: the modifier repeated per level; continuation lines are
  indented by ``level + 1`` spaces
- Definitions, footnotes, table cells: single form for one paragraph,
  doubled ranged form (``$$ title`` ... ``$$``) otherwise
- Tags: ``+name``/``#name`` carryover, ``.name`` infirm,
  ``@name`` ... ``@end`` verbatim and ``|name`` ... ``|end`` ranged
- Paragraphs: reflowed; ``{``, ``[`` and ``<`` constructs are never split

"""

from __future__ import annotations

from typing import Sequence

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
    Paragraph,
    RangeableDetachedModifier,
    RangedTag,
    Segment,
    Token,
    VerbatimRangedTag,
)
from norgfmt.ast.visitors import NodeVisitor
from norgfmt.constants import CARRYOVER_TAG_PREFIXES, FLAT_STICKY_OPENERS, LINK_TARGET_MARKERS, LINK_TARGET_SEPARATOR
from norgfmt.exceptions import RenderingError
from norgfmt.formatters.reflow import reflow
from norgfmt.options.norg import NorgFormatterOptions
from norgfmt.renderers.base import BaseRenderer
from norgfmt.utils.text import collapse_whitespace, is_blank, split_lines_inclusive


def _tag_header(prefix: str, name: Sequence[str], parameters: Sequence[str]) -> str:
    return f"{prefix}{'.'.join(name)} {' '.join(parameters)}".rstrip() + "\n"


class NorgRenderer(NodeVisitor, BaseRenderer):
    """Render flat AST blocks to canonical Norg text.

    Parameters
    ----------
    options : NorgFormatterOptions or None, default = None
        Formatting options; only ``line_length`` applies to flat input

    Examples
    --------
        >>> from norgfmt.ast import NestableDetachedModifier, Paragraph, Token
        >>> item = NestableDetachedModifier("-", 1, Paragraph([Token("An item")]))
        >>> NorgRenderer().render_to_string([item])
        '- An item'

    """

    def __init__(self, options: NorgFormatterOptions | None = None):
        """Initialize the Norg renderer with options."""
        BaseRenderer._validate_options_type(options, NorgFormatterOptions, "norg")
        options = options or NorgFormatterOptions()
        BaseRenderer.__init__(self, options)
        self.options: NorgFormatterOptions = options

    def render_to_string(self, blocks: Sequence[Block]) -> str:
        """Render the blocks, trimming surrounding whitespace from the result."""
        return self._render_blocks(blocks).strip()

    def _render_blocks(self, blocks: Sequence[Block]) -> str:
        return "".join(block.accept(self) for block in blocks)

    def _render_inline(self, segments: Sequence[Segment]) -> str:
        return "".join(segment.accept(self) for segment in segments)

    def _format_paragraph(self, segments: Sequence[Segment]) -> str:
        return reflow(self._render_inline(segments), self.options.line_length, FLAT_STICKY_OPENERS)

    # Blocks

    def visit_heading(self, node: Heading) -> str:
        return f"{'*' * node.level} {collapse_whitespace(self._render_inline(node.title))}\n"

    def visit_paragraph(self, node: Paragraph) -> str:
        return self._format_paragraph(node.content) + "\n"

    def visit_nestable_detached_modifier(self, node: NestableDetachedModifier) -> str:
        """Render a list item, indenting every non-blank continuation line."""
        lines = split_lines_inclusive(node.content.accept(self))
        first, rest = (lines[0], lines[1:]) if lines else ("", [])
        indent = " " * (node.level + 1)
        continuation = "".join(line if is_blank(line) else indent + line for line in rest)
        return f"{node.modifier_type * node.level} {first}{continuation}"

    def visit_rangeable_detached_modifier(self, node: RangeableDetachedModifier) -> str:
        """Render the single form for one paragraph, the ranged form otherwise."""
        title = collapse_whitespace(self._render_inline(node.title))
        content = self._render_blocks(node.content)

        if len(node.content) == 1 and isinstance(node.content[0], Paragraph):
            return f"{node.modifier_type} {title}\n{content}"

        marker = node.modifier_type * 2
        return f"{marker} {title}\n{content}\n{marker}\n"

    def visit_carryover_tag(self, node: CarryoverTag) -> str:
        try:
            prefix = CARRYOVER_TAG_PREFIXES[node.tag_type]
        except KeyError:
            raise RenderingError(f"Unknown carryover tag type: {node.tag_type!r}", rendering_stage="norg") from None
        return _tag_header(prefix, node.name, node.parameters) + node.next_object.accept(self)

    def visit_infirm_tag(self, node: InfirmTag) -> str:
        return _tag_header(".", node.name, node.parameters)

    def visit_verbatim_ranged_tag(self, node: VerbatimRangedTag) -> str:
        # Verbatim content is emitted untouched, indentation included
        content = node.content
        if content and not content.endswith("\n"):
            content += "\n"
        return _tag_header("@", node.name, node.parameters) + content + "@end\n"

    def visit_ranged_tag(self, node: RangedTag) -> str:
        return _tag_header("|", node.name, node.parameters) + self._render_blocks(node.content) + "|end\n"

    # Segments

    def visit_token(self, node: Token) -> str:
        return node.text

    def visit_attached_modifier(self, node: AttachedModifier) -> str:
        return f"{node.modifier_type}{self._format_paragraph(node.content)}{node.modifier_type}"

    def visit_link_target(self, node: LinkTarget) -> str:
        """Render a target as ``<marker> <title>``, or the bare URL."""
        if node.kind == "url":
            return node.value
        if node.kind in ("path", "timestamp"):
            return f"{LINK_TARGET_MARKERS[node.kind]} {node.value}"
        if node.kind == "heading":
            return f"{'*' * node.level} {self._format_paragraph(node.title)}"
        if node.kind in LINK_TARGET_MARKERS:
            return f"{LINK_TARGET_MARKERS[node.kind]} {self._format_paragraph(node.title)}"
        raise RenderingError(f"Unknown link target kind: {node.kind!r}", rendering_stage="norg")

    def visit_link(self, node: Link) -> str:
        targets = LINK_TARGET_SEPARATOR.join(target.accept(self) for target in node.targets)
        link = f"{{{node.filepath or ''}{targets}}}"
        if node.description is not None:
            link += f"[{self._format_paragraph(node.description)}]"
        return link

    def visit_anchor_definition(self, node: AnchorDefinition) -> str:
        return f"[{self._format_paragraph(node.content)}]{node.target.accept(self)}"

    def visit_anchor(self, node: Anchor) -> str:
        anchor = f"[{self._format_paragraph(node.content)}]"
        if node.description is not None:
            anchor += f"[{self._format_paragraph(node.description)}]"
        return anchor

    def visit_inline_link_target(self, node: InlineLinkTarget) -> str:
        return f"<{self._format_paragraph(node.content)}>"
