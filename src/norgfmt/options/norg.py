#  Copyright (c) 2025 Tom Villani, Ph.D.

# norgfmt/options/norg.py
"""Configuration options for Norg formatting.

This module defines the single immutable options record shared by the
syntax tree formatter and the flat AST renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from norgfmt.constants import DEFAULT_INDENT_HEADINGS, DEFAULT_LINE_LENGTH, DEFAULT_NEWLINE_AFTER_HEADINGS
from norgfmt.options.base import BaseFormatterOptions


@dataclass(frozen=True)
class NorgFormatterOptions(BaseFormatterOptions):
    """Configuration options for canonical Norg output.

    Parameters
    ----------
    line_length : int, default 80
        Width used when reflowing paragraphs. A word is appended to the
        current line only while the line plus the word stays strictly
        shorter than this value.
    newline_after_headings : bool, default False
        Whether a line break is added after every heading title, which
        leaves a blank line between the title and its content.
    indent_headings : bool, default False
        Whether nested headings are indented under their parent like any
        other content. When False nested headings stay flush left, since
        their depth is already carried by the number of stars.

    Examples
    --------
    Narrow output:
        >>> options = NorgFormatterOptions(line_length=60)

    Derive a variant from existing options:
        >>> spaced = options.create_updated(newline_after_headings=True)

    """

    line_length: int = field(
        default=DEFAULT_LINE_LENGTH,
        metadata={"help": "Maximum width of reflowed paragraph lines", "importance": "core"},
    )
    newline_after_headings: bool = field(
        default=DEFAULT_NEWLINE_AFTER_HEADINGS,
        metadata={"help": "Add a line break after every heading title", "importance": "core"},
    )
    indent_headings: bool = field(
        default=DEFAULT_INDENT_HEADINGS,
        metadata={"help": "Indent nested headings under their parent heading", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If line_length is not a positive integer.

        """
        if isinstance(self.line_length, bool) or not isinstance(self.line_length, int):
            raise ValueError(f"line_length must be an integer, got {self.line_length!r}")
        if self.line_length <= 0:
            raise ValueError(f"line_length must be positive, got {self.line_length}")
