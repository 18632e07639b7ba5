from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to runtime options.
2. Defaults when no arguments are given.
3. Informational flags (--version, --help).
"""

import pytest

from dirtree.domain.config import TreeOptions
from dirtree.interface.cli.args import args_to_options, build_parser


def parse_options(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return args_to_options(parser.parse_args(arg_list))


def test_defaults():
    assert parse_options([]) == TreeOptions()


def test_short_flags():
    options = parse_options(["-f", "-a", "some/dir"])

    assert options.show_files is True
    assert options.ascii_only is True
    assert options.path == "some/dir"


def test_long_flags():
    options = parse_options([
        "--files",
        "--ascii",
        "--output", "tree.txt",
        "--debug",
        "--log-file", "dirtree.log",
    ])

    assert options.show_files is True
    assert options.ascii_only is True
    assert options.output_file == "tree.txt"
    assert options.debug is True
    assert options.log_file == "dirtree.log"
    assert options.path is None


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip() == "dirtree 1.0.0"


def test_help_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["--help"])

    assert exc_info.value.code == 0
    out = capsys.readouterr().out
    assert "--files" in out
    assert "--ascii" in out
    assert "unreadable directories" in out


def test_unknown_flag_is_rejected(capsys):
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["--depth", "2"])

    assert exc_info.value.code == 2
