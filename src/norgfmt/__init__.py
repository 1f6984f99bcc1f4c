"""norgfmt - a canonicalizing formatter for Norg markup.

norgfmt takes a parsed Norg document and renders it back to one canonical
text form: normalized whitespace, consistent indentation, paragraphs wrapped
to a fixed width, and a single spelling for every inline markup span.

The formatter never parses text itself. It consumes a concrete syntax tree
(from tree-sitter, from JSON written by another tool, or built by hand with
``TreeBuilder``) and folds it bottom-up, one formatter per node kind.

Requirements
------------
- Python 3.10+
- Optional: ``tree-sitter`` and a Norg grammar package to parse raw text,
  ``rich`` for colored terminal errors

Examples
--------
Format raw text (requires the ``treesitter`` extra):

    >>> from norgfmt import format_source
    >>> format_source("-  A    list item")
    '- A list item'

Format a hand-built tree:

    >>> from norgfmt import TreeBuilder, format_tree
    >>> b = TreeBuilder()
    >>> root = b.node("document", b.node("heading", b.leaf("heading_stars", "*  "), b.node("title", b.leaf("word", "Title"))))
    >>> format_tree(root, b.source)
    '* Title'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "norgfmt requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from norgfmt.api import format_document, format_json, format_source, format_tree
from norgfmt.cst import NodeKind, RenderedNode, SourceText, SyntaxNode, TreeBuilder
from norgfmt.exceptions import (
    DependencyError,
    FileError,
    MalformedSpanError,
    MissingRequiredChildError,
    NorgFmtError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from norgfmt.options import NorgFormatterOptions

__all__ = [
    "__version__",
    "format_document",
    "format_json",
    "format_source",
    "format_tree",
    "NodeKind",
    "NorgFormatterOptions",
    "RenderedNode",
    "SourceText",
    "SyntaxNode",
    "TreeBuilder",
    "DependencyError",
    "FileError",
    "MalformedSpanError",
    "MissingRequiredChildError",
    "NorgFmtError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
]
