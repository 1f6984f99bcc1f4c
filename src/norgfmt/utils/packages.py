"""Helpers for inspecting installed distributions."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/norgfmt/utils/packages.py
from __future__ import annotations

from importlib import metadata
from typing import Optional, Tuple

from packaging import version
from packaging.specifiers import InvalidSpecifier, SpecifierSet


def get_package_version(package_name: str) -> Optional[str]:
    """Return the installed version of a distribution.

    Parameters
    ----------
    package_name : str
        Distribution name as used by pip (e.g. ``"tree-sitter"``)

    Returns
    -------
    str or None
        Version string if the distribution is installed, None otherwise

    """
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Check whether an installed distribution satisfies a version specifier.

    Parameters
    ----------
    package_name : str
        Distribution name
    version_spec : str
        Version specification (e.g. ``">=0.22"``)

    Returns
    -------
    tuple
        (meets_requirement, installed_version)

    Raises
    ------
    ValueError
        If ``version_spec`` is not a valid specifier

    """
    installed_version = get_package_version(package_name)
    if not installed_version:
        return False, None

    try:
        spec = SpecifierSet(version_spec)
    except InvalidSpecifier as e:
        raise ValueError(f"Invalid version specifier for {package_name}: {version_spec!r}") from e

    try:
        meets = version.parse(installed_version) in spec
    except version.InvalidVersion:
        return False, installed_version
    return meets, installed_version
