#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/cli/builder.py
"""Argument parser construction and exit codes for the norgfmt CLI.

Formatter flags are generated from the fields of ``NorgFormatterOptions``
and their ``help`` metadata, so a new option shows up on the command line
without touching this module.
"""

from __future__ import annotations

import argparse
from dataclasses import MISSING, fields
from typing import Any, get_type_hints

from norgfmt import __version__
from norgfmt.constants import CONFIG_ENV_VAR, DEFAULT_GRAMMAR_MODULE
from norgfmt.exceptions import (
    DependencyError,
    FileError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from norgfmt.options.norg import NorgFormatterOptions

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def option_cli_name(field_name: str) -> str:
    """Command line flag for an option field, e.g. ``line_length`` -> ``--line-length``."""
    return "--" + field_name.replace("_", "-")


def add_formatter_option_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one flag per ``NorgFormatterOptions`` field.

    Every flag defaults to None, meaning "not given", so values from a
    config file are only overridden by flags the user actually passed.
    """
    group = parser.add_argument_group("formatting options")
    type_hints = get_type_hints(NorgFormatterOptions)

    for field in fields(NorgFormatterOptions):
        help_text = field.metadata.get("help", "")
        if field.default is not MISSING:
            help_text = f"{help_text} (default: {field.default})"

        kwargs: dict[str, Any] = {"dest": field.name, "default": None, "help": help_text}
        if type_hints[field.name] is bool:
            kwargs["action"] = argparse.BooleanOptionalAction
        else:
            kwargs["type"] = type_hints[field.name]
            kwargs["metavar"] = field.name.split("_")[-1].upper()

        group.add_argument(option_cli_name(field.name), **kwargs)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="norgfmt",
        description="Format a Norg document into its canonical form.",
        epilog=(
            f"Options are also read from --config, ${CONFIG_ENV_VAR}, .norgfmt.toml/.yaml/.yml/.json "
            "or [tool.norgfmt] in pyproject.toml. Command line flags take precedence."
        ),
    )

    parser.add_argument("input", metavar="FILE", help="Norg file to format, or '-' to read from stdin")

    add_formatter_option_arguments(parser)

    input_group = parser.add_argument_group("input and output")
    input_group.add_argument(
        "--input-format",
        choices=["auto", "norg", "cst-json"],
        default="auto",
        help="How to read FILE: Norg text parsed with tree-sitter, or a syntax tree serialized as JSON. "
        "'auto' picks cst-json for .json files (default: auto)",
    )
    input_group.add_argument(
        "--grammar-module",
        default=DEFAULT_GRAMMAR_MODULE,
        metavar="MODULE",
        help=f"Import name of the tree-sitter Norg grammar package (default: {DEFAULT_GRAMMAR_MODULE})",
    )
    input_group.add_argument("--out", "-o", metavar="PATH", help="Output file path (default: print to stdout)")
    input_group.add_argument(
        "--check",
        action="store_true",
        help="Write nothing; exit with status 1 if the file is not already formatted. "
        "A missing final newline is accepted; line endings other than \\n are reported as changes",
    )
    input_group.add_argument(
        "--verify",
        action="store_true",
        help="Verify that formatting preserved the document structure (not implemented yet)",
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument(
        "--config",
        metavar="PATH",
        help=f"Path to a configuration file (TOML, YAML or JSON). Overrides ${CONFIG_ENV_VAR} and discovery.",
    )
    config_group.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help=f"Ignore --config, ${CONFIG_ENV_VAR} and discovered configuration files",
    )

    log_group = parser.add_argument_group("logging and output")
    log_group.add_argument(
        "--rich",
        action="store_true",
        help="Style error messages with Rich (automatically disabled when stderr is not a terminal)",
    )
    log_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    log_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING). Overrides --verbose if both are specified.",
    )
    log_group.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write log messages to the given file in addition to stderr",
    )
    log_group.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps and per-stage timing information",
    )
    parser.add_argument("--version", "-V", action="version", version=f"norgfmt {__version__}")

    return parser
