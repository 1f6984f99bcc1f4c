#  Copyright (c) 2025 Tom Villani, Ph.D.
"""End-to-end tests for the norgfmt command line.

Syntax trees are fed in as cst-json files, or through a patched parser,
so these tests run without a tree-sitter grammar installed.
"""

import io
import json

import pytest
from utils import heading, paragraph

from norgfmt import __version__
from norgfmt.cli import is_formatted, main
from norgfmt.cli.builder import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from norgfmt.cst import TreeBuilder, tree_to_json


def _messy_tree():
    b = TreeBuilder()
    root = b.node("document", heading(b, "*   ", "Notes\n", lambda: [paragraph(b, "aaaa   bbbb cccc dddd")]))
    return root, b.source


def _canonical_tree():
    b = TreeBuilder()
    root = b.node("document", heading(b, "* ", "Notes\n", lambda: [paragraph(b, "  aaaa\n")]))
    return root, b.source


def _write_tree(path, tree):
    root, source = tree
    path.write_text(tree_to_json(root, source), encoding="utf-8")
    return str(path)


@pytest.mark.unit
@pytest.mark.cli
class TestFormatting:
    """Test formatting to stdout and to files."""

    def test_cst_json_to_stdout(self, isolated_cwd, capsys):
        path = _write_tree(isolated_cwd / "doc.json", _messy_tree())

        assert main([path]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* Notes\n  aaaa bbbb cccc dddd\n"

    def test_line_length_flag(self, isolated_cwd, capsys):
        path = _write_tree(isolated_cwd / "doc.json", _messy_tree())

        assert main([path, "--line-length", "10"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* Notes\n  aaaa bbbb\n  cccc dddd\n"

    def test_boolean_flag(self, isolated_cwd, capsys):
        path = _write_tree(isolated_cwd / "doc.json", _messy_tree())

        assert main([path, "--newline-after-headings"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* Notes\n\n  aaaa bbbb cccc dddd\n"

    def test_explicit_input_format(self, isolated_cwd, capsys):
        path = _write_tree(isolated_cwd / "tree.txt", _messy_tree())

        assert main([path, "--input-format", "cst-json"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.startswith("* Notes\n")

    def test_out_writes_file(self, isolated_cwd, capsys):
        path = _write_tree(isolated_cwd / "doc.json", _messy_tree())
        target = isolated_cwd / "doc.norg"

        assert main([path, "--out", str(target)]) == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8") == "* Notes\n  aaaa bbbb cccc dddd\n"
        assert capsys.readouterr().out == ""

    def test_norg_input_uses_parser(self, isolated_cwd, capsys, monkeypatch):
        root, source = _messy_tree()
        calls = []

        def fake_parse(text, grammar_module):
            calls.append((text, grammar_module))
            return root

        monkeypatch.setattr("norgfmt.cli.parse_norg", fake_parse)
        (isolated_cwd / "doc.norg").write_text(source, encoding="utf-8")

        assert main(["doc.norg", "--grammar-module", "my_grammar"]) == EXIT_SUCCESS
        assert calls == [(source, "my_grammar")]
        assert capsys.readouterr().out == "* Notes\n  aaaa bbbb cccc dddd\n"

    def test_stdin_input(self, isolated_cwd, capsys, monkeypatch):
        root, source = _messy_tree()
        monkeypatch.setattr("norgfmt.cli.parse_norg", lambda text, grammar_module: root)
        monkeypatch.setattr("sys.stdin", io.StringIO(source))

        assert main(["-"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* Notes\n  aaaa bbbb cccc dddd\n"


@pytest.mark.unit
@pytest.mark.cli
class TestCheckMode:
    """Test ``--check``."""

    def test_already_formatted(self, isolated_cwd, capsys):
        path = _write_tree(isolated_cwd / "doc.json", _canonical_tree())

        assert main([path, "--check"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == ""

    def test_would_reformat(self, isolated_cwd, capsys):
        path = _write_tree(isolated_cwd / "doc.json", _messy_tree())

        assert main([path, "--check"]) == EXIT_ERROR
        assert capsys.readouterr().out == ""

    def test_missing_final_newline_accepted(self, isolated_cwd, capsys):
        b = TreeBuilder()
        root = b.node("document", heading(b, "* ", "Notes\n", lambda: [paragraph(b, "  aaaa")]))
        assert b.source == "* Notes\n  aaaa"
        path = _write_tree(isolated_cwd / "doc.json", (root, b.source))

        assert main([path, "--check"]) == EXIT_SUCCESS

    def test_crlf_reported(self, isolated_cwd, capsys):
        b = TreeBuilder()
        root = b.node("document", heading(b, "* ", "Notes\r\n", lambda: [paragraph(b, "  aaaa\r\n")]))
        path = _write_tree(isolated_cwd / "doc.json", (root, b.source))

        assert main([path, "--check"]) == EXIT_ERROR

    @pytest.mark.parametrize(
        "source,expected",
        [("* T\n", True), ("* T", True), ("* T\n\n", False), ("* T\r\n", False)],
    )
    def test_is_formatted(self, source, expected):
        assert is_formatted("* T", source) is expected


@pytest.mark.unit
@pytest.mark.cli
class TestConfiguration:
    """Test config files combined with command line flags."""

    def test_discovered_config(self, isolated_cwd, capsys):
        (isolated_cwd / ".norgfmt.toml").write_text("line-length = 10\n", encoding="utf-8")
        path = _write_tree(isolated_cwd / "doc.json", _messy_tree())

        assert main([path]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* Notes\n  aaaa bbbb\n  cccc dddd\n"

    def test_flag_overrides_config(self, isolated_cwd, capsys):
        (isolated_cwd / ".norgfmt.toml").write_text("line-length = 10\n", encoding="utf-8")
        path = _write_tree(isolated_cwd / "doc.json", _messy_tree())

        assert main([path, "--line-length", "80"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* Notes\n  aaaa bbbb cccc dddd\n"

    def test_no_config(self, isolated_cwd, capsys):
        (isolated_cwd / ".norgfmt.toml").write_text("line-length = 10\n", encoding="utf-8")
        path = _write_tree(isolated_cwd / "doc.json", _messy_tree())

        assert main([path, "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* Notes\n  aaaa bbbb cccc dddd\n"

    def test_environment_variable(self, isolated_cwd, capsys, monkeypatch):
        config = isolated_cwd / "custom.json"
        config.write_text(json.dumps({"newline_after_headings": True}), encoding="utf-8")
        monkeypatch.setenv("NORGFMT_CONFIG", str(config))
        path = _write_tree(isolated_cwd / "doc.json", _messy_tree())

        assert main([path]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* Notes\n\n  aaaa bbbb cccc dddd\n"

    def test_unknown_config_key(self, isolated_cwd, capsys):
        (isolated_cwd / ".norgfmt.toml").write_text("line-width = 10\n", encoding="utf-8")
        path = _write_tree(isolated_cwd / "doc.json", _messy_tree())

        assert main([path]) == EXIT_VALIDATION_ERROR
        assert "Unknown option 'line-width'" in capsys.readouterr().err

    def test_missing_explicit_config(self, isolated_cwd, capsys):
        path = _write_tree(isolated_cwd / "doc.json", _messy_tree())

        assert main([path, "--config", "nope.toml"]) == EXIT_VALIDATION_ERROR
        assert "does not exist" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestErrors:
    """Test exit codes and error reporting."""

    def test_missing_input(self, isolated_cwd, capsys):
        assert main(["missing.json"]) == EXIT_FILE_ERROR
        assert "Error: Input file does not exist: missing.json" in capsys.readouterr().err

    def test_invalid_json(self, isolated_cwd, capsys):
        (isolated_cwd / "bad.json").write_text("{", encoding="utf-8")

        assert main(["bad.json"]) == EXIT_PARSING_ERROR
        assert "Invalid syntax tree JSON" in capsys.readouterr().err

    def test_invalid_line_length(self, isolated_cwd, capsys):
        path = _write_tree(isolated_cwd / "doc.json", _messy_tree())

        assert main([path, "--line-length", "0"]) == EXIT_VALIDATION_ERROR
        assert "line_length" in capsys.readouterr().err

    def test_verify_warns(self, isolated_cwd, capsys):
        path = _write_tree(isolated_cwd / "doc.json", _messy_tree())

        assert main([path, "--verify"]) == EXIT_SUCCESS
        captured = capsys.readouterr()
        assert "AST verification is not implemented yet!" in captured.err
        assert captured.out == "* Notes\n  aaaa bbbb cccc dddd\n"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == f"norgfmt {__version__}"
