#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/utils/decorators.py
"""Decorators shared by the parser adapter and the public API.

The core formatter has no third-party dependencies. Parsing raw Norg text
does, and those checks live here so the adapter functions stay free of
try/except ImportError blocks.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from norgfmt.exceptions import DependencyError
from norgfmt.utils.packages import check_version_requirement


def requires_dependencies(component_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required packages and versions before a function runs.

    Parameters
    ----------
    component_name : str
        Name shown in the error message (e.g. "Norg parsing")
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec)
        tuples, e.g. ``("tree-sitter", "tree_sitter", ">=0.22")``. An empty
        version_spec accepts any installed version.

    Returns
    -------
    Callable
        Decorator that performs the checks on every call

    Raises
    ------
    DependencyError
        If any package is missing or installed at an incompatible version.
        All problems are collected before raising, and the first
        ImportError is chained for debugging.

    Examples
    --------
        >>> @requires_dependencies("Norg parsing", [("tree-sitter", "tree_sitter", ">=0.22")])
        ... def parse(text):
        ...     import tree_sitter
        ...     ...

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing: list[tuple[str, str]] = []
            version_mismatches: list[tuple[str, str, str]] = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e
                    continue

                if version_spec:
                    meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                    if not meets_requirement:
                        version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

            if missing or version_mismatches:
                raise DependencyError(
                    converter_name=component_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return func(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the elapsed time of a block at DEBUG level.

    Nothing is measured when DEBUG logging is disabled for ``logger``.

    Parameters
    ----------
    logger : logging.Logger
        Logger receiving the timing record
    operation : str
        Description of the timed work (e.g. "Formatting")

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start_time = time.perf_counter()
    yield
    elapsed = time.perf_counter() - start_time
    logger.debug("%s completed in %.3fs", operation, elapsed)
