#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/utils/io_utils.py
"""Output helpers shared by the renderers and the command line."""

from __future__ import annotations

from io import TextIOBase
from pathlib import Path
from typing import IO, Union

from norgfmt.exceptions import FileError


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text to a file path or a file-like object.

    Binary streams receive the text encoded as UTF-8.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Destination

    Raises
    ------
    FileError
        If a file path cannot be written

    Examples
    --------
        >>> from io import BytesIO
        >>> buffer = BytesIO()
        >>> write_content("* Heading", buffer)
        >>> buffer.getvalue()
        b'* Heading'

    """
    if isinstance(output, (str, Path)):
        try:
            Path(output).write_text(content, encoding="utf-8")
        except OSError as e:
            raise FileError(f"Could not write output file {output}: {e}", file_path=str(output), original_error=e) from e
        return

    if isinstance(output, TextIOBase):
        output.write(content)
    elif "b" in getattr(output, "mode", "") or _is_binary(output):
        output.write(content.encode("utf-8"))  # type: ignore[arg-type]
    else:
        output.write(content)  # type: ignore[arg-type]


def _is_binary(output: object) -> bool:
    return hasattr(output, "getbuffer") or hasattr(output, "readinto")
