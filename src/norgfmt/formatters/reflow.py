#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/formatters/reflow.py
"""Greedy paragraph reflow shared by both formatters.

Text is tokenized on whitespace runs, link-like constructs are glued into
single unbreakable tokens, and tokens are packed onto lines greedily.

The fit test is strict: a token joins the current line only while
``len(line) + len(token) < line_length``. The running line carries a
leading space until it is flushed, so the first line of a paragraph is
measured one character wider than the lines after it.
"""

from __future__ import annotations

from typing import Sequence

from norgfmt.constants import BRACKET_PAIRS, TREE_STICKY_OPENERS

_CLOSERS = {closer: opener for opener, closer in BRACKET_PAIRS.items()}


def _bracket_delta(token: str, tracked: frozenset[str]) -> int:
    depth = 0
    for char in token:
        if char in tracked:
            depth += 1
        elif _CLOSERS.get(char) in tracked:
            depth -= 1
    return depth


def coalesce_sticky_tokens(tokens: Sequence[str], sticky: Sequence[str]) -> list[str]:
    """Glue every sticky token to the tokens that follow it.

    A token starting with one of the ``sticky`` openers absorbs following
    tokens until its brackets are balanced or the tokens run out. Square
    brackets are always tracked, so a link's ``[description]`` stays with it.

    Parameters
    ----------
    tokens : sequence of str
        Whitespace-free tokens
    sticky : sequence of str
        Opening characters that start an unbreakable construct

    Returns
    -------
    list of str
        Tokens with sticky constructs joined by single spaces

    """
    openers = tuple(sticky)
    tracked = frozenset(openers) | {"["}
    result: list[str] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        i += 1
        if openers and token.startswith(openers):
            depth = _bracket_delta(token, tracked)
            while depth > 0 and i < len(tokens):
                token = f"{token} {tokens[i]}"
                depth += _bracket_delta(tokens[i], tracked)
                i += 1
        result.append(token)
    return result


def reflow(text: str, line_length: int, sticky: Sequence[str] = TREE_STICKY_OPENERS) -> str:
    """Re-wrap text into lines shorter than ``line_length``.

    Parameters
    ----------
    text : str
        Already rendered inline content
    line_length : int
        Width limit; see the module docstring for the exact fit test
    sticky : sequence of str, default ("{",)
        Openers whose construct must not be split across lines

    Returns
    -------
    str
        Lines joined with ``\\n``, with surrounding whitespace trimmed

    Examples
    --------
        >>> reflow("a  b\\n c", 80)
        'a b c'

    """
    tokens = coalesce_sticky_tokens(text.split(), sticky)

    lines: list[str] = []
    current = ""
    for token in tokens:
        if len(current) + len(token) < line_length:
            current = f"{current} {token}"
        else:
            lines.append(current.strip())
            current = token
    lines.append(current.strip())

    return "\n".join(line for line in lines if line).strip()
