#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/cst/__init__.py
"""Concrete syntax tree support.

The formatter consumes a tree produced elsewhere. This package holds:

- nodes: the ``SyntaxNode``/``RenderedNode`` model and the recognized kinds
- builder: ``TreeBuilder`` for writing trees by hand
- serialization: JSON interchange for trees produced by external tools
- tree_sitter: adapter for the optional tree-sitter Norg parser

"""

from __future__ import annotations

from norgfmt.cst.builder import TreeBuilder
from norgfmt.cst.nodes import NodeKind, RenderedNode, SourceText, SyntaxNode, classify
from norgfmt.cst.serialization import cst_to_dict, dict_to_cst, json_to_tree, tree_to_json

__all__ = [
    "NodeKind",
    "RenderedNode",
    "SourceText",
    "SyntaxNode",
    "TreeBuilder",
    "classify",
    "cst_to_dict",
    "dict_to_cst",
    "json_to_tree",
    "tree_to_json",
]
