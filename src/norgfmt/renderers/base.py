#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/renderers/base.py
"""Base class for flat AST renderers.

Renderers turn a list of flat AST blocks into text. Subclasses implement
``render_to_string``; writing to files and streams is shared here.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Sequence, Union

from norgfmt.ast.nodes import Block
from norgfmt.exceptions import ValidationError
from norgfmt.options.base import BaseFormatterOptions
from norgfmt.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for flat AST renderers.

    Parameters
    ----------
    options : BaseFormatterOptions or None, default = None
        Rendering options

    """

    def __init__(self, options: BaseFormatterOptions | None = None):
        """Store the rendering options."""
        self.options = options

    @abstractmethod
    def render_to_string(self, blocks: Sequence[Block]) -> str:
        """Render the blocks to a string.

        Parameters
        ----------
        blocks : sequence of Block
            Top-level blocks of the document

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, blocks: Sequence[Block], output: Union[str, Path, IO[str], IO[bytes]]) -> None:
        """Render the blocks and write them to a file path or stream.

        Raises
        ------
        FileError
            If the output file cannot be written

        """
        self.write_text_output(self.render_to_string(blocks), output)

    @staticmethod
    def _validate_options_type(options: BaseFormatterOptions | None, expected_type: type, renderer_name: str) -> None:
        """Reject options of the wrong class.

        Raises
        ------
        ValidationError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise ValidationError(
                f"{renderer_name} renderer expects {expected_type.__name__}, got {type(options).__name__}",
                parameter_name="options",
                parameter_value=options,
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[str], IO[bytes]]) -> None:
        """Write text to a path, a text stream or a binary stream (as UTF-8).

        Raises
        ------
        FileError
            If a file path cannot be written

        """
        write_content(text, output)
