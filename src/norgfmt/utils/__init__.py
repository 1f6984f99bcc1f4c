#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/utils/__init__.py
"""Utility modules for the norgfmt package.

This package contains the whitespace and escape scanners used by the
formatters, and the optional-dependency guard used by the parser adapter.
"""

from norgfmt.utils.decorators import debug_timer, requires_dependencies
from norgfmt.utils.text import (
    collapse_horizontal_whitespace,
    collapse_whitespace,
    remove_whitespace,
    split_lines_inclusive,
    strip_punct_escapes,
)

__all__ = [
    "collapse_horizontal_whitespace",
    "collapse_whitespace",
    "debug_timer",
    "remove_whitespace",
    "requires_dependencies",
    "split_lines_inclusive",
    "strip_punct_escapes",
]
