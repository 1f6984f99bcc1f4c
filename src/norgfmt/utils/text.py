#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/norgfmt/utils/text.py
"""Character-class scanners used by the formatters.

Each helper makes a single pass over its input. None of them need regular
expressions: the classes involved (horizontal whitespace, line breaks,
ASCII punctuation) are fixed.
"""

from __future__ import annotations

import string

HORIZONTAL_WHITESPACE = frozenset(" \t\v")
LINE_BREAK_CHARS = frozenset("\r\n")
ASCII_PUNCTUATION = frozenset(string.punctuation)


def is_ascii_punctuation(char: str) -> bool:
    """Whether ``char`` is a single ASCII punctuation character."""
    return char in ASCII_PUNCTUATION


def collapse_horizontal_whitespace(text: str) -> str:
    """Replace every run of spaces, tabs and vertical tabs with one space.

    Line breaks are left untouched.
    """
    out: list[str] = []
    in_run = False
    for char in text:
        if char in HORIZONTAL_WHITESPACE:
            if not in_run:
                out.append(" ")
            in_run = True
        else:
            out.append(char)
            in_run = False
    return "".join(out)


def normalize_title_whitespace(text: str) -> str:
    """Collapse horizontal whitespace and drop it at line edges.

    Horizontal whitespace at the very start, right before a line break, and
    at the very end is removed. Line breaks themselves are kept.

    Examples
    --------
        >>> normalize_title_whitespace("  Heading \\t with   words  \\n")
        'Heading with words\\n'

    """
    out: list[str] = []
    pending_space = False
    at_line_start = True
    for char in text:
        if char in HORIZONTAL_WHITESPACE:
            pending_space = not at_line_start
            continue
        if char in LINE_BREAK_CHARS:
            pending_space = False
            at_line_start = True
            out.append(char)
            continue
        if pending_space:
            out.append(" ")
            pending_space = False
        at_line_start = False
        out.append(char)
    return "".join(out)


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run, line breaks included, to one space and trim."""
    return " ".join(text.split())


def remove_whitespace(text: str) -> str:
    """Drop every whitespace character."""
    return "".join(char for char in text if not char.isspace())


def strip_punct_escapes(text: str) -> str:
    r"""Remove the backslash from every ``\<punct>`` sequence.

    Examples
    --------
        >>> strip_punct_escapes(r"hello\* world")
        'hello* world'

    """
    out: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char == "\\" and i + 1 < length and text[i + 1] in ASCII_PUNCTUATION:
            out.append(text[i + 1])
            i += 2
            continue
        out.append(char)
        i += 1
    return "".join(out)


def split_lines_inclusive(text: str) -> list[str]:
    r"""Split after every line terminator, keeping it on the preceding line.

    ``\n``, ``\r`` and ``\r\n`` each count as one terminator. A trailing
    fragment without a terminator is returned as the last element.

    Examples
    --------
        >>> split_lines_inclusive("a\nb\r\n\nc")
        ['a\n', 'b\r\n', '\n', 'c']

    """
    lines: list[str] = []
    start = 0
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char == "\r" and i + 1 < length and text[i + 1] == "\n":
            i += 2
            lines.append(text[start:i])
            start = i
            continue
        i += 1
        if char in LINE_BREAK_CHARS:
            lines.append(text[start:i])
            start = i
    if start < length:
        lines.append(text[start:])
    return lines


def split_line_break_runs(text: str) -> tuple[str, list[tuple[str, str]]]:
    r"""Split text into non-empty lines, each paired with the break run after it.

    A run is a maximal sequence of ``\r``/``\n`` characters, so blank lines
    stay inside the run of the line before them.

    Returns
    -------
    tuple
        ``(leading_run, pieces)`` where ``leading_run`` is the break run at
        the very start of ``text`` (possibly empty) and ``pieces`` is a list
        of ``(line, following_run)``. The last line's run is empty when the
        text does not end with a line break.

    Examples
    --------
        >>> split_line_break_runs("\na\n\nb")
        ('\n', [('a', '\n\n'), ('b', '')])

    """
    pieces: list[tuple[str, str]] = []
    i = 0
    length = len(text)

    while i < length and text[i] in LINE_BREAK_CHARS:
        i += 1
    leading_run = text[:i]

    while i < length:
        line_start = i
        while i < length and text[i] not in LINE_BREAK_CHARS:
            i += 1
        line_end = i
        while i < length and text[i] in LINE_BREAK_CHARS:
            i += 1
        pieces.append((text[line_start:line_end], text[line_end:i]))

    return leading_run, pieces


def is_blank(line: str) -> bool:
    """Whether a line holds nothing but whitespace."""
    return not line.strip()
