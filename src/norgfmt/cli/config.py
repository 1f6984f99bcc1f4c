#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the norgfmt CLI.

A config file holds formatter options as a flat table, e.g.::

    # .norgfmt.toml
    line-length = 100
    newline-after-headings = true

The same keys are accepted under ``[tool.norgfmt]`` in ``pyproject.toml``,
and in YAML or JSON files. Keys may use dashes or underscores.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Callable, Dict, Optional

import yaml

from norgfmt.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION

logger = logging.getLogger(__name__)


def _require_mapping(config: Any, config_path: Path, what: str) -> Dict[str, Any]:
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"{what} in {config_path} must be a table/mapping, got {type(config).__name__}"
        )
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    """Load a TOML config file."""
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e


def _load_pyproject_section(config_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.norgfmt]`` table of a pyproject.toml, or an empty dict."""
    data = _load_toml_config(config_path)
    tool = data.get("tool")
    section = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    if section is None:
        return {}
    return _require_mapping(section, config_path, f"[tool.{PYPROJECT_TOOL_SECTION}] section")


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load a YAML config file; an empty file is an empty config."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    return {} if config is None else config


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    """Load a JSON config file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e


_LOADERS: Dict[str, Callable[[Path], Dict[str, Any]]] = {
    ".toml": _load_toml_config,
    ".yaml": _load_yaml_config,
    ".yml": _load_yaml_config,
    ".json": _load_json_config,
}


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load formatter options from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Option values keyed as written in the file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file does not exist, has an unsupported extension, cannot
        be parsed, or does not contain a mapping

    Examples
    --------
    >>> load_config_file(".norgfmt.toml")
    {'line-length': 100}

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        loader: Callable[[Path], Dict[str, Any]] = _load_pyproject_section
    else:
        ext = config_path.suffix.lower()
        if ext not in _LOADERS:
            raise argparse.ArgumentTypeError(
                f"Unsupported config file format: {ext or config_path.name}. Use .toml, .yaml, .yml or .json"
            )
        loader = _LOADERS[ext]

    try:
        config = loader(config_path)
    except argparse.ArgumentTypeError:
        raise
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    logger.debug("Loaded configuration from %s", config_path)
    return _require_mapping(config, config_path, "Configuration")


def _config_in_dir(directory: Path, include_pyproject: bool = True) -> Optional[Path]:
    for filename in CONFIG_FILENAMES:
        candidate = directory / filename
        if candidate.is_file():
            return candidate

    if include_pyproject:
        pyproject_path = directory / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)
    return None


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Walk up from ``start_dir`` and return the first config file found.

    In each directory the dedicated ``.norgfmt.*`` files are checked first,
    then ``pyproject.toml`` if it has a ``[tool.norgfmt]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, the current working directory by default

    Returns
    -------
    Path or None
        Path to the first config file found

    """
    current = (start_dir or Path.cwd()).resolve()
    while True:
        found = _config_in_dir(current)
        if found:
            return found
        if current.parent == current:
            return None
        current = current.parent


def discover_config_file() -> Optional[Path]:
    """Find a config file in the working directory's ancestry, then in the home directory."""
    return find_config_in_parents() or _config_in_dir(Path.home(), include_pyproject=False)


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):

    1. Explicit config file path (``--config``)
    2. Environment variable config path (``NORGFMT_CONFIG``)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration, empty when no file is found

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)
    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)
    return {}
