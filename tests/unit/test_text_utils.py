#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the whitespace and escape scanners."""

from io import BytesIO, StringIO

import pytest

from norgfmt.exceptions import FileError
from norgfmt.utils.io_utils import write_content
from norgfmt.utils.text import (
    collapse_horizontal_whitespace,
    collapse_whitespace,
    is_ascii_punctuation,
    is_blank,
    normalize_title_whitespace,
    remove_whitespace,
    split_line_break_runs,
    split_lines_inclusive,
    strip_punct_escapes,
)


@pytest.mark.unit
class TestWhitespace:
    """Test whitespace helpers."""

    def test_collapse_horizontal_keeps_line_breaks(self):
        assert collapse_horizontal_whitespace("a \t\v b\n\n  c") == "a b\n\n c"

    def test_normalize_title(self):
        assert normalize_title_whitespace("  Heading \t with   words  \n") == "Heading with words\n"
        assert normalize_title_whitespace("a  \n   b ") == "a\nb"

    def test_collapse_and_remove(self):
        assert collapse_whitespace("  a \n b\t") == "a b"
        assert remove_whitespace(" a b\tc\n") == "abc"

    def test_is_blank(self):
        assert is_blank(" \t\n")
        assert is_blank("")
        assert not is_blank(" x ")


@pytest.mark.unit
class TestEscapes:
    """Test punctuation escape handling."""

    @pytest.mark.parametrize("char", ["*", "/", "\\", "|", "{", "~"])
    def test_punctuation(self, char):
        assert is_ascii_punctuation(char)

    @pytest.mark.parametrize("char", ["a", " ", "\n", "é", "«"])
    def test_not_punctuation(self, char):
        assert not is_ascii_punctuation(char)

    def test_strip_punct_escapes(self):
        assert strip_punct_escapes(r"hello\* world") == "hello* world"
        assert strip_punct_escapes(r"a\\b") == "a\\b"
        assert strip_punct_escapes("keep\\t and trailing\\") == "keep\\t and trailing\\"


@pytest.mark.unit
class TestLineSplitting:
    """Test inclusive line splitting."""

    def test_split_lines_inclusive(self):
        assert split_lines_inclusive("a\nb\r\n\nc") == ["a\n", "b\r\n", "\n", "c"]
        assert split_lines_inclusive("a\rb") == ["a\r", "b"]
        assert split_lines_inclusive("") == []

    def test_split_line_break_runs(self):
        assert split_line_break_runs("\na\n\nb") == ("\n", [("a", "\n\n"), ("b", "")])
        assert split_line_break_runs("") == ("", [])
        assert split_line_break_runs("x\r\n") == ("", [("x", "\r\n")])


@pytest.mark.unit
class TestWriteContent:
    """Test the shared output helper."""

    def test_text_stream(self):
        stream = StringIO()
        write_content("* T", stream)
        assert stream.getvalue() == "* T"

    def test_binary_stream(self):
        stream = BytesIO()
        write_content("é", stream)
        assert stream.getvalue() == "é".encode("utf-8")

    def test_binary_file(self, tmp_path):
        target = tmp_path / "out.norg"
        with open(target, "wb") as f:
            write_content("x\n", f)
        assert target.read_bytes() == b"x\n"

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(FileError) as exc_info:
            write_content("x", tmp_path / "missing" / "out.norg")
        assert exc_info.value.file_path.endswith("out.norg")
