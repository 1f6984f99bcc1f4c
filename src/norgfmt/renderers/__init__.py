#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/renderers/__init__.py
"""Renderers for the flat Norg AST."""

from __future__ import annotations

from norgfmt.renderers.base import BaseRenderer
from norgfmt.renderers.norg import NorgRenderer

__all__ = ["BaseRenderer", "NorgRenderer"]
