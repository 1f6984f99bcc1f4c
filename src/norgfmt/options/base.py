#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Base classes for formatter options.

This module defines the foundation classes for the immutable option records
read by the formatters. Options are supplied once per run and never mutated
during traversal.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from norgfmt.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseFormatterOptions(CloneFrozenMixin):
    """Base class for all formatter options.

    Subclasses define format-specific settings as frozen dataclass fields,
    each carrying ``help`` and ``importance`` entries in its field metadata
    so the command line can describe them.

    """

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> Self:
        """Build options from a configuration mapping.

        Keys may be written in snake_case or kebab-case, so the same
        mapping works for TOML, YAML and JSON config files.

        Parameters
        ----------
        values : Mapping[str, Any]
            Option names mapped to values

        Returns
        -------
        Self
            Options instance with the given values applied over the defaults

        Raises
        ------
        ValidationError
            If a key does not name an option field, or a value is rejected
            by the option's own validation

        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = str(key).replace("-", "_")
            if name not in known:
                raise ValidationError(
                    f"Unknown option '{key}'. Valid options: {', '.join(sorted(known))}",
                    parameter_name=str(key),
                    parameter_value=value,
                )
            kwargs[name] = value

        try:
            return cls(**kwargs)
        except (TypeError, ValueError) as e:
            raise ValidationError(str(e), original_error=e) from e

    def to_dict(self) -> dict[str, Any]:
        """Return the option values keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
