#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for norgfmt.

Options are frozen dataclasses. Use ``create_updated`` to derive a modified
copy instead of mutating an instance.
"""

from __future__ import annotations

from norgfmt.options.base import BaseFormatterOptions, CloneFrozenMixin
from norgfmt.options.norg import NorgFormatterOptions

__all__ = [
    "BaseFormatterOptions",
    "CloneFrozenMixin",
    "NorgFormatterOptions",
]
