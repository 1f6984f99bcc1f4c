#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the norgfmt library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Formatting Defaults - Values used when no option overrides them
3. Reflow and Markup Characters - Character sets used by the inline formatters
4. Interchange and Parser Integration - Serialized tree schema, grammar module
5. Configuration Discovery - Config file names and environment variables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

InputFormat = Literal["auto", "norg", "cst-json"]
CarryoverTagType = Literal["attribute", "macro"]
LinkTargetKind = Literal[
    "heading",
    "footnote",
    "definition",
    "generic",
    "wiki",
    "extendable",
    "path",
    "url",
    "timestamp",
]

# =============================================================================
# Formatting Defaults
# =============================================================================

DEFAULT_LINE_LENGTH = 80
DEFAULT_NEWLINE_AFTER_HEADINGS = False
DEFAULT_INDENT_HEADINGS = False

# =============================================================================
# Reflow and Markup Characters
# =============================================================================

# Openers that must stay on the same line as the tokens up to their closer.
TREE_STICKY_OPENERS: tuple[str, ...] = ("{",)
FLAT_STICKY_OPENERS: tuple[str, ...] = ("{", "[", "<")
BRACKET_PAIRS: dict[str, str] = {"{": "}", "[": "]", "<": ">"}

FREE_FORM_MARKER = "|"
LINK_TARGET_SEPARATOR = " : "

# Markers written before a link target's title, by target kind.
LINK_TARGET_MARKERS: dict[str, str] = {
    "footnote": "^",
    "definition": "$",
    "generic": "#",
    "wiki": "?",
    "extendable": "=",
    "path": "/",
    "timestamp": "@",
}

CARRYOVER_TAG_PREFIXES: dict[str, str] = {"attribute": "+", "macro": "#"}

# =============================================================================
# Interchange and Parser Integration
# =============================================================================

CST_SCHEMA_VERSION = 1
DEFAULT_GRAMMAR_MODULE = "tree_sitter_norg"
TREE_SITTER_REQUIREMENT = ("tree-sitter", "tree_sitter", ">=0.22")

# =============================================================================
# Configuration Discovery
# =============================================================================

CONFIG_ENV_VAR = "NORGFMT_CONFIG"
PYPROJECT_TOOL_SECTION = "norgfmt"
CONFIG_FILENAMES: tuple[str, ...] = (".norgfmt.toml", ".norgfmt.yaml", ".norgfmt.yml", ".norgfmt.json")
