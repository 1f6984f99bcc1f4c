#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/formatters/__init__.py
"""Syntax tree formatters.

- base: formatter signature and shared helpers
- block: headings, detached modifiers and tags
- inline: attached modifiers, escapes, links and paragraphs
- reflow: greedy line wrapping shared with the flat AST renderer
- walker: the post-order fold that dispatches to the formatters
"""

from __future__ import annotations

from norgfmt.formatters.reflow import reflow
from norgfmt.formatters.walker import FORMATTERS, TreeWalker, format_tree, render

__all__ = ["FORMATTERS", "TreeWalker", "format_tree", "reflow", "render"]
