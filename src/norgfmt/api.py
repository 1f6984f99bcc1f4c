#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/api.py
"""Public entry points for formatting Norg documents.

Three input forms are supported:

- a ``SyntaxNode`` tree plus its source text (``format_tree``)
- raw Norg text, parsed with the optional tree-sitter grammar (``format_source``)
- a syntax tree serialized as JSON by an external parser (``format_json``)

and flat semantic AST blocks (``format_document``).

Options may be passed as a ``NorgFormatterOptions`` instance, as keyword
arguments, or both; keyword arguments override the instance.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from norgfmt.ast.nodes import Block
from norgfmt.constants import DEFAULT_GRAMMAR_MODULE
from norgfmt.cst.nodes import SourceText, SyntaxNode
from norgfmt.cst.serialization import json_to_tree
from norgfmt.cst.tree_sitter import parse_norg
from norgfmt.formatters.walker import format_tree as _format_tree
from norgfmt.options.norg import NorgFormatterOptions
from norgfmt.renderers.norg import NorgRenderer
from norgfmt.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def _resolve_options(options: NorgFormatterOptions | None, kwargs: dict[str, Any]) -> NorgFormatterOptions:
    """Merge keyword overrides into an options instance.

    Raises
    ------
    ValidationError
        If a keyword does not name an option or a value is invalid

    """
    base = options or NorgFormatterOptions()
    if not kwargs:
        return base
    return NorgFormatterOptions.from_dict({**base.to_dict(), **kwargs})


def format_tree(
    root: SyntaxNode,
    source: SourceText | str | bytes,
    options: NorgFormatterOptions | None = None,
    **kwargs: Any,
) -> str:
    """Format a syntax tree produced by any parser.

    Parameters
    ----------
    root : SyntaxNode
        Root of the document tree
    source : SourceText, str or bytes
        Document text the node spans refer to
    options : NorgFormatterOptions, optional
        Formatting options
    **kwargs
        Individual option overrides, e.g. ``line_length=72``

    Returns
    -------
    str
        Canonical document text, trimmed

    Raises
    ------
    MissingRequiredChildError
        If the tree violates a formatter's structural precondition
    MalformedSpanError
        If a span cannot be decoded from the source
    ValidationError
        If an option override is invalid

    """
    resolved = _resolve_options(options, kwargs)
    with debug_timer(logger, "Formatting (syntax tree)"):
        return _format_tree(root, source, resolved)


def format_source(
    text: str | bytes,
    options: NorgFormatterOptions | None = None,
    grammar_module: str = DEFAULT_GRAMMAR_MODULE,
    **kwargs: Any,
) -> str:
    """Parse Norg text with tree-sitter and format it.

    Requires the ``treesitter`` extra and a compiled Norg grammar package.

    Parameters
    ----------
    text : str or bytes
        Norg document
    options : NorgFormatterOptions, optional
        Formatting options
    grammar_module : str, default "tree_sitter_norg"
        Import name of the grammar package
    **kwargs
        Individual option overrides

    Returns
    -------
    str
        Canonical document text

    Raises
    ------
    DependencyError
        If tree-sitter or the grammar package is not installed
    ParsingError
        If the document has syntax errors

    Examples
    --------
        >>> format_source("*     Heading")
        '* Heading'

    """
    resolved = _resolve_options(options, kwargs)
    source = SourceText(text)
    with debug_timer(logger, f"Parsing ({grammar_module})"):
        root = parse_norg(source.data, grammar_module=grammar_module)
    with debug_timer(logger, "Formatting (syntax tree)"):
        return _format_tree(root, source, resolved)


def format_json(json_str: str, options: NorgFormatterOptions | None = None, **kwargs: Any) -> str:
    """Format a syntax tree serialized with ``tree_to_json``.

    Raises
    ------
    ParsingError
        If the JSON is not a valid serialized tree

    """
    resolved = _resolve_options(options, kwargs)
    root, source = json_to_tree(json_str)
    with debug_timer(logger, "Formatting (syntax tree from JSON)"):
        return _format_tree(root, source, resolved)


def format_document(blocks: Sequence[Block], options: NorgFormatterOptions | None = None, **kwargs: Any) -> str:
    """Render flat semantic AST blocks to canonical Norg text."""
    resolved = _resolve_options(options, kwargs)
    with debug_timer(logger, "Rendering (flat AST)"):
        return NorgRenderer(resolved).render_to_string(blocks)


__all__ = ["format_document", "format_json", "format_source", "format_tree"]
