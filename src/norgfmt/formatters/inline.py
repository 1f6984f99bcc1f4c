#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/formatters/inline.py
"""Formatters for inline Norg constructs.

Attached modifiers (``*bold*``, ``/italic/`` and friends) choose between
their compact and free-form (``*|...|*``) spelling, escape sequences drop
redundant backslashes, link parts get their whitespace normalized, and
paragraphs are reflowed to the configured width.
"""

from __future__ import annotations

from typing import Sequence

from norgfmt.constants import FREE_FORM_MARKER, LINK_TARGET_SEPARATOR, TREE_STICKY_OPENERS
from norgfmt.cst.nodes import NodeKind, RenderedNode, SourceText, SyntaxNode, classify
from norgfmt.exceptions import MalformedSpanError, MissingRequiredChildError
from norgfmt.formatters.base import content_from, own_text
from norgfmt.formatters.reflow import reflow
from norgfmt.options.norg import NorgFormatterOptions
from norgfmt.utils.text import collapse_whitespace, is_ascii_punctuation, remove_whitespace, strip_punct_escapes


def _has_escaped_punctuation(children: Sequence[RenderedNode]) -> bool:
    return any(
        child.kind == NodeKind.ESCAPE_SEQUENCE.value and child.content and is_ascii_punctuation(child.content[-1])
        for child in children
    )


def _free_form_body_needs_pipes(body: str, delimiter: str) -> bool:
    return not body or delimiter in body or body != body.strip()


def markup(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    """Pick the compact or free-form spelling of an attached modifier.

    ===================  ============  ==========================================
    needs free form      is free form  result
    ===================  ============  ==========================================
    yes                  no            ``C|body|C`` with ``\\<punct>`` unescaped
    no                   yes           ``C body C`` without the pipes
    otherwise                          unchanged
    ===================  ============  ==========================================

    A span needs the free form when it holds an escaped punctuation
    character. A span already written in free form also keeps it when the
    body is empty, contains the delimiter, or starts or ends with
    whitespace, since the compact spelling cannot express any of these.
    """
    if len(children) < 2:
        raise MissingRequiredChildError("attached modifier has no content", node_kind=node.kind)

    delimiter = children[0].content
    is_free_form = children[1].kind == NodeKind.FREE_FORM_OPEN.value
    must_be_free_form = _has_escaped_punctuation(children)
    if is_free_form and not must_be_free_form:
        must_be_free_form = _free_form_body_needs_pipes(content_from(children, 2, -2), delimiter)

    if must_be_free_form and not is_free_form:
        body = strip_punct_escapes(content_from(children, 1, -1))
        return f"{delimiter}{FREE_FORM_MARKER}{body}{FREE_FORM_MARKER}{delimiter}"
    if is_free_form and not must_be_free_form:
        return delimiter + content_from(children, 2, -2) + delimiter
    return delimiter + content_from(children, 1)


def escape_sequence(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    """Keep ``\\<punct>`` verbatim, reduce any other escape to the escaped character."""
    text = own_text(node, children, source)
    if not text:
        raise MalformedSpanError(node.start_byte, node.end_byte, message="Empty escape sequence")
    if is_ascii_punctuation(text[-1]):
        return text
    return text[-1]


def link_target(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    """Render ``<marker> <title>`` for a link target or scope."""
    if len(children) < 2:
        return collapse_whitespace(own_text(node, children, source))
    marker = children[0].content.strip()
    return f"{marker} {collapse_whitespace(content_from(children, 1))}".strip()


def _is_target_separator(text: str) -> bool:
    return text.strip() in ("", ":")


def link_location(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    """Render a link location, joining each run of targets with ``" : "``.

    The file location is trimmed. Whitespace or ``:`` tokens between two
    targets are replaced by the canonical separator. Every other child,
    including the braces when the parser places them here, is kept as
    rendered.
    """
    if node.is_leaf:
        return own_text(node, children, source)

    parts: list[str] = []
    pending: list[str] = []
    in_targets = False
    for child in children:
        kind = classify(child.kind)
        if kind in (NodeKind.LINK_TARGET, NodeKind.URI):
            if in_targets:
                parts.append(LINK_TARGET_SEPARATOR)
            pending = []
            parts.append(child.content)
            in_targets = True
        elif in_targets and _is_target_separator(child.content):
            pending.append(child.content)
        else:
            parts.extend(pending)
            pending = []
            in_targets = False
            parts.append(child.content.strip() if kind is NodeKind.LINK_FILE_LOCATION else child.content)
    parts.extend(pending)
    return "".join(parts)


def uri(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    """URLs cannot contain whitespace, so all of it is removed."""
    return remove_whitespace(source.text_of(node))


def description(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    return collapse_whitespace(own_text(node, children, source))


def inline_link_target(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    text = own_text(node, children, source).strip()
    if text.startswith("<") and text.endswith(">"):
        text = text[1:-1]
    return f"<{collapse_whitespace(text)}>"


def paragraph(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    """Reflow the paragraph to ``options.line_length``; links are never split."""
    return reflow(own_text(node, children, source), options.line_length, TREE_STICKY_OPENERS)
