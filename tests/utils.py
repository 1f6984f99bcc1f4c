"""Test utilities for the norgfmt test suite.

Trees are built with ``TreeBuilder`` in document order, the way a parser
would emit them. The helpers here cover the common shapes: whitespace-split
inline text, paragraphs, heading titles and list items.
"""

from itertools import groupby
from typing import Callable, Sequence

from norgfmt.cst import RenderedNode, SourceText, SyntaxNode, TreeBuilder
from norgfmt.options import NorgFormatterOptions

DEFAULT_OPTIONS = NorgFormatterOptions()


def words(b: TreeBuilder, text: str) -> list[SyntaxNode]:
    """Split text into ``word``, ``space`` and ``soft_break`` leaves."""
    leaves = []
    for is_space, group in groupby(text, key=str.isspace):
        chunk = "".join(group)
        if not is_space:
            kind = "word"
        elif "\n" in chunk or "\r" in chunk:
            kind = "soft_break"
        else:
            kind = "space"
        leaves.append(b.leaf(kind, chunk))
    return leaves


def paragraph(b: TreeBuilder, text: str) -> SyntaxNode:
    return b.node("paragraph", *words(b, text))


def title(b: TreeBuilder, text: str) -> SyntaxNode:
    return b.node("title", *words(b, text))


def heading(
    b: TreeBuilder,
    stars: str,
    text: str,
    body: Callable[[], Sequence[SyntaxNode]] = lambda: (),
) -> SyntaxNode:
    """Build a heading; ``body`` is called after the title so offsets stay in order."""
    stars_node = b.leaf("heading_stars", stars)
    title_node = title(b, text)
    return b.node("heading", stars_node, title_node, *body())


def list_item(
    b: TreeBuilder,
    prefix: str,
    text: str,
    kind: str = "unordered_list_item",
    trailing: str = "",
) -> SyntaxNode:
    """Build a list item with one paragraph and an optional trailing break leaf."""
    children = [b.leaf(f"{kind}_prefix", prefix), paragraph(b, text)]
    if trailing:
        children.append(b.leaf("line_break", trailing))
    return b.node(kind, *children)


def rendered(*pairs: tuple[str, str]) -> list[RenderedNode]:
    """Shorthand for a list of already-rendered children."""
    return [RenderedNode(kind, content) for kind, content in pairs]


def dummy_node(kind: str) -> SyntaxNode:
    """A childless node used when a formatter only needs the kind for errors."""
    return SyntaxNode(kind, 0, 0)


def parent_node(kind: str, children: Sequence[RenderedNode]) -> SyntaxNode:
    """A composite node with one placeholder child per rendered child."""
    return SyntaxNode(kind, 0, 0, tuple(SyntaxNode(child.kind, 0, 0) for child in children))


EMPTY_SOURCE = SourceText("")
