#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/cst/tree_sitter.py
"""Adapter from tree-sitter parse trees to ``SyntaxNode`` trees.

Parsing Norg text is delegated to the tree-sitter bindings and a compiled
Norg grammar package. Both are optional: the formatter itself works on any
``SyntaxNode`` tree, e.g. one loaded from JSON.

Grammar packages follow the usual tree-sitter convention of exposing a
``language()`` function, so any compatible module name can be passed.

"""

from __future__ import annotations

import importlib
import logging
from typing import Any

from norgfmt.constants import DEFAULT_GRAMMAR_MODULE, TREE_SITTER_REQUIREMENT
from norgfmt.cst.nodes import SyntaxNode
from norgfmt.exceptions import DependencyError, ParsingError
from norgfmt.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


def from_tree_sitter(ts_node: Any) -> SyntaxNode:
    """Convert a tree-sitter node and its descendants to a ``SyntaxNode``.

    Any object exposing ``type``, ``start_byte``, ``end_byte`` and
    ``children`` is accepted. The conversion uses an explicit stack.

    Parameters
    ----------
    ts_node : Any
        Root of the tree-sitter (sub)tree

    Returns
    -------
    SyntaxNode
        Equivalent immutable tree

    """
    built: list[SyntaxNode] = []
    stack: list[tuple[Any, bool]] = [(ts_node, False)]

    while stack:
        current, expanded = stack.pop()
        children = list(current.children)
        if not expanded and children:
            stack.append((current, True))
            for child in reversed(children):
                stack.append((child, False))
            continue

        count = len(children)
        converted = tuple(built[len(built) - count :]) if count else ()
        if count:
            del built[len(built) - count :]
        built.append(SyntaxNode(current.type, current.start_byte, current.end_byte, converted))

    return built[0]


def load_language(grammar_module: str = DEFAULT_GRAMMAR_MODULE) -> Any:
    """Import a grammar package and wrap it as a tree-sitter ``Language``.

    Raises
    ------
    DependencyError
        If the grammar package is not installed
    ParsingError
        If the module does not expose a ``language()`` function

    """
    from tree_sitter import Language

    try:
        module = importlib.import_module(grammar_module)
    except ImportError as e:
        raise DependencyError(
            converter_name="Norg parsing",
            missing_packages=[(grammar_module.replace("_", "-"), "")],
            original_import_error=e,
        ) from e

    language_fn = getattr(module, "language", None)
    if not callable(language_fn):
        raise ParsingError(
            f"Grammar module '{grammar_module}' does not provide a language() function",
            parsing_stage="grammar",
        )
    return Language(language_fn())


@requires_dependencies("Norg parsing", [TREE_SITTER_REQUIREMENT])
def parse_norg(source: str | bytes, grammar_module: str = DEFAULT_GRAMMAR_MODULE) -> SyntaxNode:
    """Parse Norg text into a ``SyntaxNode`` tree.

    Parameters
    ----------
    source : str or bytes
        Document text; ``str`` input is encoded as UTF-8
    grammar_module : str, default "tree_sitter_norg"
        Import name of the compiled Norg grammar package

    Returns
    -------
    SyntaxNode
        Root of the syntax tree

    Raises
    ------
    DependencyError
        If tree-sitter or the grammar package is unavailable
    ParsingError
        If the parser reports syntax errors. Malformed trees are never
        formatted, so no partial output is produced.

    """
    from tree_sitter import Parser

    data = source.encode("utf-8") if isinstance(source, str) else source
    parser = Parser(load_language(grammar_module))
    tree = parser.parse(data)
    root = tree.root_node

    if root.has_error:
        raise ParsingError(
            "Document contains syntax errors; refusing to format a malformed tree",
            parsing_stage="tree-sitter",
        )

    logger.debug("Parsed %d bytes with grammar '%s'", len(data), grammar_module)
    return from_tree_sitter(root)


__all__ = ["from_tree_sitter", "load_language", "parse_norg"]
