#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/cli/output.py
"""Terminal output helpers for the norgfmt CLI.

Formatted documents always go to stdout (or ``--out``) as plain text.
Only error reports may use Rich styling, and only on an interactive
stderr when ``--rich`` is given.
"""

from __future__ import annotations

import argparse
import sys
from typing import IO

from norgfmt.exceptions import DependencyError


def check_rich_available() -> bool:
    """Check if the Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(
    args: argparse.Namespace, raise_on_missing: bool = False, stream: IO[str] | None = None
) -> bool:
    """Determine if Rich output should be used for error reports.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    raise_on_missing : bool, default False
        Raise DependencyError if rich is not installed
    stream : IO[str], optional
        Stream whose TTY status decides; ``sys.stderr`` by default

    Returns
    -------
    bool
        True when ``--rich`` is set, Rich is importable and the stream is a TTY

    """
    if not getattr(args, "rich", False):
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                converter_name="rich-output",
                missing_packages=[("rich", "")],
                message="Rich output requires the optional 'rich' dependency. Install with: pip install norgfmt[rich]",
            )
        return False

    target = stream or sys.stderr
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def report_error(message: str, use_rich: bool = False, stream: IO[str] | None = None) -> None:
    """Print an error message to stderr, styled with Rich when requested."""
    target = stream or sys.stderr
    if use_rich:
        from rich.console import Console
        from rich.markup import escape

        Console(file=target).print(f"[bold red]Error:[/bold red] {escape(message)}")
        return
    print(f"Error: {message}", file=target)
