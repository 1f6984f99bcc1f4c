#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/formatters/block.py
"""Formatters for block-level Norg constructs.

Headings, detached modifiers (list items, definitions, footnotes, table
cells) and tags. All functions share the ``Formatter`` signature from
``norgfmt.formatters.base``.

Notes
-----
Heading depth is carried by the number of stars, so nested headings are
kept flush left unless ``indent_headings`` is set. Everything else under a
heading is indented by the width of its star prefix plus one.

Hard line breaks (a backslash before a newline) are re-indented like any
other line break.
"""

from __future__ import annotations

from typing import Sequence

from norgfmt.cst.nodes import RANGEABLE_CLOSER_KINDS, NodeKind, RenderedNode, SourceText, SyntaxNode, classify
from norgfmt.exceptions import MissingRequiredChildError
from norgfmt.formatters.base import content_from, own_text, required_child
from norgfmt.options.norg import NorgFormatterOptions
from norgfmt.utils.text import (
    LINE_BREAK_CHARS,
    is_blank,
    normalize_title_whitespace,
    split_line_break_runs,
    split_lines_inclusive,
)


def _drop_first_line_break(text: str) -> str:
    if text.startswith("\r\n"):
        return text[2:]
    if text[:1] in LINE_BREAK_CHARS:
        return text[1:]
    return text


def _ends_with_line_break(text: str) -> bool:
    return text[-1:] in LINE_BREAK_CHARS


def indent_heading_child(content: str, indent: str) -> str:
    """Indent every non-empty line of a heading child.

    Each line keeps the run of line breaks that followed it, so blank lines
    survive; the last line gets a newline when it had none. A break run at
    the very start loses one break, since the line before it already ended
    with one.
    """
    leading_run, pieces = split_line_break_runs(content)
    parts = [_drop_first_line_break(leading_run)]
    for line, run in pieces:
        parts.append(indent + line + (run or "\n"))
    return "".join(parts)


def heading(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    """Render a heading and re-indent the content nested under it."""
    stars = required_child(node, children, 0, "heading has no stars").content
    title = required_child(node, children, 1, "heading has no title").content

    header = f"{stars} {title}"
    if len(children) > 2 and not _ends_with_line_break(header):
        header += "\n"
    if options.newline_after_headings:
        header += "\n"

    indent = " " * (len(stars) + 1)
    body: list[str] = []
    for child in children[2:]:
        if child.kind == NodeKind.HEADING.value and not options.indent_headings:
            body.append(child.content)
        else:
            body.append(indent_heading_child(child.content, indent))

    return header + "".join(body)


def heading_stars(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    """Star run with surrounding whitespace discarded."""
    return source.text_of(node).strip()


def title(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    """Heading title with horizontal whitespace collapsed and trimmed at line edges."""
    return normalize_title_whitespace(own_text(node, children, source))


def nestable_modifier(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    """Render a list item (unordered, ordered or quote).

    Blank continuation lines pass through unindented, which keeps two
    lists separated by a blank line from merging into one.
    """
    prefix = required_child(node, children, 0, "nestable modifier has no prefix").content.strip()

    lines = split_lines_inclusive(content_from(children, 1))
    if not lines:
        raise MissingRequiredChildError("no content within nestable modifier", node_kind=node.kind)

    indent = " " * (len(prefix) + 1)
    first, rest = lines[0], lines[1:]
    return f"{prefix} {first}" + "".join(line if is_blank(line) else indent + line for line in rest)


def rangeable_modifier(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    """Render a definition, footnote or table cell, single or multi-paragraph."""
    prefix = required_child(node, children, 0, "range-able detached modifier has no opening char").content.strip()
    heading_title = required_child(node, children, 1, "range-able detached modifier has no title").content.strip()

    end = len(children)
    closer = ""
    if end > 2 and classify(children[-1].kind) in RANGEABLE_CLOSER_KINDS:
        closer = children[-1].content.strip()
        end -= 1

    content = content_from(children, 2, end)
    indent = " " * (len(prefix) + 1)
    indented = "".join(line if is_blank(line) else indent + line for line in split_lines_inclusive(content))

    output = f"{prefix} {heading_title}"
    if indented and indented[0] not in LINE_BREAK_CHARS:
        output += "\n"
    output += indented
    if closer:
        if not _ends_with_line_break(output):
            output += "\n"
        output += closer
    return output


def ranged_tag(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    """Render a ranged tag (``|name``/``@name`` ... ``|end``/``@end``).

    Parameters directly after the name are joined with single spaces; the
    body is emitted unchanged between the header line and the terminator.
    """
    if len(children) < 3:
        raise MissingRequiredChildError("ranged tag has no terminator", node_kind=node.kind)

    head = content_from(children, None, 2).rstrip()

    params: list[str] = []
    index = 2
    while index < len(children) - 1 and children[index].kind == NodeKind.TAG_PARAM.value:
        params.append(children[index].content.strip())
        index += 1

    body = _drop_first_line_break(content_from(children, index, len(children) - 1))
    if body and not _ends_with_line_break(body):
        body += "\n"
    terminator = children[-1].content.strip()

    return f"{head} {' '.join(params)}".rstrip() + "\n" + body + terminator


def carryover_tag(
    node: SyntaxNode,
    children: Sequence[RenderedNode],
    source: SourceText,
    options: NorgFormatterOptions,
) -> str:
    """Render a carryover (``+name``/``#name``) or infirm (``.name``) tag line."""
    head = content_from(children, None, 2).rstrip()
    if not head:
        raise MissingRequiredChildError("carryover tag has no name", node_kind=node.kind)

    params = [child.content.strip() for child in children[2:]]
    return f"{head} {' '.join(param for param in params if param)}".rstrip() + "\n"
