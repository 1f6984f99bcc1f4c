#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/cst/serialization.py
"""JSON interchange for syntax trees.

The parser is external, so a tree can be handed to the formatter as JSON.
A document is serialized together with its source text, since node spans
are byte offsets into that text::

    {
      "schema_version": 1,
      "source": "* Heading",
      "root": {"kind": "document", "start_byte": 0, "end_byte": 9, "children": [...]}
    }

Both directions use an explicit stack, so arbitrarily deep trees do not
hit the interpreter's recursion limit.

Examples
--------
    >>> text = tree_to_json(root, source, indent=2)
    >>> root, source = json_to_tree(text)

"""

from __future__ import annotations

import json
import logging
from typing import Any

from norgfmt.constants import CST_SCHEMA_VERSION
from norgfmt.cst.nodes import SyntaxNode
from norgfmt.exceptions import ParsingError

logger = logging.getLogger(__name__)


def _node_header(node: SyntaxNode) -> dict[str, Any]:
    return {
        "kind": node.kind,
        "start_byte": node.start_byte,
        "end_byte": node.end_byte,
        "children": [],
    }


def cst_to_dict(node: SyntaxNode) -> dict[str, Any]:
    """Convert a syntax tree to nested dictionaries.

    Parameters
    ----------
    node : SyntaxNode
        Root of the tree to serialize

    Returns
    -------
    dict
        Dictionary with ``kind``, ``start_byte``, ``end_byte`` and ``children``

    """
    root = _node_header(node)
    stack: list[tuple[SyntaxNode, dict[str, Any]]] = [(node, root)]
    while stack:
        current, out = stack.pop()
        for child in current.children:
            child_dict = _node_header(child)
            out["children"].append(child_dict)
            stack.append((child, child_dict))
    return root


def _validated_children(data: Any) -> list[Any]:
    """Check one node dictionary and return its child list."""
    if not isinstance(data, dict):
        raise ParsingError(f"Expected a node object, got {type(data).__name__}", parsing_stage="cst")

    kind = data.get("kind")
    if not isinstance(kind, str):
        raise ParsingError("Node is missing a string 'kind'", parsing_stage="cst")

    for key in ("start_byte", "end_byte"):
        value = data.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ParsingError(f"Node '{kind}' is missing an integer '{key}'", parsing_stage="cst")

    children = data.get("children", [])
    if not isinstance(children, list):
        raise ParsingError(f"Node '{kind}' has a non-list 'children' entry", parsing_stage="cst")
    return children


def dict_to_cst(data: dict[str, Any]) -> SyntaxNode:
    """Convert nested dictionaries back to a syntax tree.

    Parameters
    ----------
    data : dict
        Dictionary produced by ``cst_to_dict`` or by an external tool
        following the same layout

    Returns
    -------
    SyntaxNode
        Reconstructed tree

    Raises
    ------
    ParsingError
        If a node lacks a required key or a value has the wrong type

    """
    built: list[SyntaxNode] = []
    stack: list[tuple[Any, bool]] = [(data, False)]

    while stack:
        item, expanded = stack.pop()
        if not expanded:
            children = _validated_children(item)
            stack.append((item, True))
            for child in reversed(children):
                stack.append((child, False))
            continue

        count = len(item.get("children", []))
        children_nodes = tuple(built[len(built) - count :]) if count else ()
        if count:
            del built[len(built) - count :]
        built.append(SyntaxNode(item["kind"], item["start_byte"], item["end_byte"], children_nodes))

    return built[0]


def tree_to_json(root: SyntaxNode, source: str, indent: int | None = None) -> str:
    """Serialize a tree and its source text to a JSON string.

    Parameters
    ----------
    root : SyntaxNode
        Root of the tree
    source : str
        Document text the node spans refer to
    indent : int, optional
        Indentation passed to ``json.dumps``

    Returns
    -------
    str
        JSON document including the schema version

    """
    payload = {"schema_version": CST_SCHEMA_VERSION, "source": source, "root": cst_to_dict(root)}
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def json_to_tree(json_str: str) -> tuple[SyntaxNode, str]:
    """Deserialize a JSON document into a tree and its source text.

    A document without ``schema_version`` is read as version 1.

    Parameters
    ----------
    json_str : str
        JSON produced by ``tree_to_json``

    Returns
    -------
    tuple of (SyntaxNode, str)
        The root node and the source text

    Raises
    ------
    ParsingError
        If the JSON is malformed, uses an unsupported schema version, or
        does not follow the expected layout

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid syntax tree JSON: {e}", parsing_stage="json", original_error=e) from e

    if not isinstance(data, dict):
        raise ParsingError("Syntax tree JSON must be an object", parsing_stage="json")

    schema_version = data.get("schema_version")
    if schema_version is None:
        logger.debug("No schema_version in syntax tree JSON, assuming %d", CST_SCHEMA_VERSION)
        schema_version = CST_SCHEMA_VERSION
    if isinstance(schema_version, bool) or not isinstance(schema_version, int):
        raise ParsingError(
            f"Schema version must be an integer, got {type(schema_version).__name__}", parsing_stage="json"
        )
    if schema_version != CST_SCHEMA_VERSION:
        raise ParsingError(
            f"Unsupported schema version: {schema_version}. "
            f"This version of norgfmt supports schema version {CST_SCHEMA_VERSION} only.",
            parsing_stage="json",
        )

    source = data.get("source")
    if not isinstance(source, str):
        raise ParsingError("Syntax tree JSON is missing the 'source' text", parsing_stage="json")
    if "root" not in data:
        raise ParsingError("Syntax tree JSON is missing the 'root' node", parsing_stage="json")

    return dict_to_cst(data["root"]), source


__all__ = [
    "cst_to_dict",
    "dict_to_cst",
    "tree_to_json",
    "json_to_tree",
]
