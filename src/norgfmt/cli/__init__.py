"""Command-line interface for the norgfmt formatter.

Reads one Norg document, formats it and prints the canonical text.

Examples
--------
Format a file to stdout::

    $ norgfmt notes.norg

Rewrite in place with a narrower width::

    $ norgfmt notes.norg --line-length 72 --out notes.norg

Check formatting in CI (exit status 1 when the file would change)::

    $ norgfmt notes.norg --check

Format a syntax tree exported by another tool::

    $ norgfmt tree.json --input-format cst-json

"""

import argparse
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any

from norgfmt.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from norgfmt.cli.config import load_config_with_priority
from norgfmt.cli.output import report_error, should_use_rich_output
from norgfmt.constants import CONFIG_ENV_VAR
from norgfmt.cst.serialization import json_to_tree
from norgfmt.cst.tree_sitter import parse_norg
from norgfmt.exceptions import FileError, NorgFmtError, ValidationError
from norgfmt.formatters.walker import format_tree
from norgfmt.logging_utils import configure_logging
from norgfmt.options.norg import NorgFormatterOptions
from norgfmt.utils.decorators import debug_timer
from norgfmt.utils.io_utils import write_content

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]

VERIFY_NOT_IMPLEMENTED = "AST verification is not implemented yet!"


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    ``--trace`` takes precedence, then ``--verbose``, then ``--log-level``.
    """
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(parsed_args: argparse.Namespace) -> NorgFormatterOptions:
    """Combine config file values with the flags given on the command line.

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file cannot be loaded
    ValidationError
        If the combined values are not valid options

    """
    config: dict[str, Any] = {}
    if not parsed_args.no_config:
        config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))

    overrides = {
        field.name: getattr(parsed_args, field.name)
        for field in fields(NorgFormatterOptions)
        if getattr(parsed_args, field.name, None) is not None
    }
    return NorgFormatterOptions.from_dict({**config, **overrides})


def read_input(path: str) -> str:
    """Read the document from a path, or from stdin for ``-``.

    Raises
    ------
    FileError
        If the file cannot be read or is not valid UTF-8

    """
    if path == "-":
        return sys.stdin.read()

    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FileError(f"Input file does not exist: {path}", file_path=path, original_error=e) from e
    except UnicodeDecodeError as e:
        raise FileError(f"Input file is not valid UTF-8: {path}", file_path=path, original_error=e) from e
    except OSError as e:
        raise FileError(f"Could not read input file {path}: {e}", file_path=path, original_error=e) from e


def resolve_input_format(parsed_args: argparse.Namespace) -> str:
    """Resolve ``auto`` to ``cst-json`` for ``.json`` files and ``norg`` otherwise."""
    if parsed_args.input_format != "auto":
        return parsed_args.input_format
    if parsed_args.input != "-" and Path(parsed_args.input).suffix.lower() == ".json":
        return "cst-json"
    return "norg"


def format_input(text: str, input_format: str, options: NorgFormatterOptions, grammar_module: str) -> tuple[str, str]:
    """Format the input and return ``(formatted, source)``.

    For ``cst-json`` input the source is the document text embedded in
    the JSON, which is what ``--check`` compares against.
    """
    if input_format == "cst-json":
        root, source = json_to_tree(text)
    else:
        source = text
        with debug_timer(logger, f"Parsing ({grammar_module})"):
            root = parse_norg(source, grammar_module=grammar_module)

    with debug_timer(logger, "Formatting"):
        return format_tree(root, source, options), source


def is_formatted(formatted: str, source: str) -> bool:
    """Whether ``source`` already equals the formatter output.

    The output is written with one final newline, but a source that lacks
    it still counts as formatted. Line endings are compared exactly.
    """
    return source in (formatted + "\n", formatted)


def main(args: list[str] | None = None) -> int:
    """Execute the norgfmt command line."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)
    use_rich = should_use_rich_output(parsed_args)

    try:
        options = build_options(parsed_args)
    except (argparse.ArgumentTypeError, ValidationError) as e:
        report_error(str(e), use_rich)
        return EXIT_VALIDATION_ERROR

    logger.debug("Using options: %s", options)

    try:
        text = read_input(parsed_args.input)
        input_format = resolve_input_format(parsed_args)
        formatted, source = format_input(text, input_format, options, parsed_args.grammar_module)

        if parsed_args.verify:
            logger.warning(VERIFY_NOT_IMPLEMENTED)

        if parsed_args.check:
            if not is_formatted(formatted, source):
                logger.info("%s would be reformatted", parsed_args.input)
                return EXIT_ERROR
            return EXIT_SUCCESS

        if parsed_args.out:
            write_content(formatted + "\n", parsed_args.out)
            logger.info("Wrote formatted document to %s", parsed_args.out)
        else:
            print(formatted)
    except NorgFmtError as e:
        logger.debug("Formatting failed", exc_info=True)
        report_error(str(e), use_rich)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
