#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/cst/builder.py
"""Builder helper for constructing syntax trees together with their source.

Trees normally come from an external parser. ``TreeBuilder`` lets tests
and embedding code write a tree by hand: every leaf appends its text to the
source buffer, so byte spans always agree with the text they cover.

Examples
--------
    >>> b = TreeBuilder()
    >>> heading = b.node("heading", b.leaf("heading_stars", "* "), b.node("title", b.leaf("word", "Hi")))
    >>> b.source
    '* Hi'

"""

from __future__ import annotations

from norgfmt.cst.nodes import SyntaxNode


class TreeBuilder:
    """Helper for building a ``SyntaxNode`` tree in document order.

    Leaves and gaps are appended to an internal source buffer at the
    current offset. Composite nodes span from the start of their first child
    to the end of their last child. Byte offsets are counted in UTF-8.

    Parameters
    ----------
    encoding : str, default "utf-8"
        Encoding used to measure byte offsets

    """

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding
        self._parts: list[str] = []
        self._offset = 0

    @property
    def offset(self) -> int:
        """Current byte offset, where the next leaf will start."""
        return self._offset

    @property
    def source(self) -> str:
        """Source text accumulated so far."""
        return "".join(self._parts)

    def _append(self, text: str) -> tuple[int, int]:
        start = self._offset
        self._parts.append(text)
        self._offset += len(text.encode(self._encoding))
        return start, self._offset

    def leaf(self, kind: str, text: str) -> SyntaxNode:
        """Append ``text`` to the source and return a leaf covering it."""
        start, end = self._append(text)
        return SyntaxNode(kind, start, end)

    def gap(self, text: str) -> None:
        """Append source text that no node covers."""
        self._append(text)

    def node(self, kind: str, *children: SyntaxNode) -> SyntaxNode:
        """Create a composite node over already-built children.

        Parameters
        ----------
        kind : str
            Kind tag of the new node
        *children : SyntaxNode
            Children in document order

        Returns
        -------
        SyntaxNode
            Node spanning its children, or an empty span at the current
            offset when there are none

        Raises
        ------
        ValueError
            If a child starts before the previous child ends

        """
        for previous, current in zip(children, children[1:]):
            if current.start_byte < previous.end_byte:
                raise ValueError(
                    f"Child '{current.kind}' at byte {current.start_byte} starts before "
                    f"the preceding child '{previous.kind}' ends at byte {previous.end_byte}"
                )

        if not children:
            return SyntaxNode(kind, self._offset, self._offset)
        return SyntaxNode(kind, children[0].start_byte, children[-1].end_byte, tuple(children))
