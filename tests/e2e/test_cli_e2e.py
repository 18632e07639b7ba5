from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess: stdout content byte for byte, stderr messages and
exit codes.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "dirtree" / "main.py"


def run_cli(args: List[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH and forces UTF-8 I/O so the
    Unicode connectors survive any platform default encoding.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["PYTHONIOENCODING"] = "utf-8"

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Structure:
    /R
      /a
        /x
          deep.txt
      /z
      b.txt
    """
    root = tmp_path / "R"
    (root / "a" / "x").mkdir(parents=True)
    (root / "a" / "x" / "deep.txt").write_text("", encoding="utf-8")
    (root / "z").mkdir()
    (root / "b.txt").write_text("", encoding="utf-8")
    return root


def test_cli_directories_only(sample_tree: Path) -> None:
    """TC-01: Default invocation lists directories with Unicode connectors."""
    result = run_cli([str(sample_tree)])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert result.stdout == "R\n├───a\n│   └───x\n└───z\n"
    assert result.stderr == ""


def test_cli_with_files_and_ascii(sample_tree: Path) -> None:
    """TC-02: --files and --ascii combine."""
    result = run_cli(["-f", "-a", str(sample_tree)])

    assert result.returncode == 0
    assert result.stdout == "R\n+---a\n|   \\---x\n|       \\---deep.txt\n+---b.txt\n\\---z\n"


def test_cli_defaults_to_working_directory(sample_tree: Path) -> None:
    """TC-03: Without a path argument the working directory is listed."""
    result = run_cli([], cwd=sample_tree / "a")

    assert result.returncode == 0
    assert result.stdout == "a\n└───x\n"


def test_cli_repeat_runs_are_identical(sample_tree: Path) -> None:
    """TC-04: Output is byte-identical across runs of an unchanged tree."""
    first = run_cli(["--files", str(sample_tree)])
    second = run_cli(["--files", str(sample_tree)])

    assert first.stdout == second.stdout


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    """TC-05: A missing path is reported on stderr with exit code 1."""
    result = run_cli([str(tmp_path / "non_existent_folder")])

    assert result.returncode == 1
    assert result.stdout == ""
    assert result.stderr.startswith("error: unable to canonicalize path")


def test_cli_rejects_file_path(sample_tree: Path) -> None:
    """TC-06: A regular file is not a valid root."""
    result = run_cli([str(sample_tree / "b.txt")])

    assert result.returncode == 1
    assert "path is not a directory" in result.stderr


def test_cli_version() -> None:
    """TC-07: --version prints the version and exits 0."""
    result = run_cli(["--version"])

    assert result.returncode == 0
    assert result.stdout.strip() == "dirtree 1.0.0"


def test_cli_debug_logs_to_stderr_only(sample_tree: Path) -> None:
    """TC-08: Diagnostics never leak into the tree on stdout."""
    result = run_cli(["--debug", str(sample_tree)])

    assert result.returncode == 0
    assert result.stdout == "R\n├───a\n│   └───x\n└───z\n"
    assert "DEBUG" in result.stderr


@pytest.mark.skipif(sys.platform == "win32", reason="Windows folds '..' lexically")
def test_cli_rejects_parent_of_file(sample_tree: Path) -> None:
    """TC-10: '..' after a regular file cannot be resolved."""
    result = run_cli([os.path.join(str(sample_tree / "b.txt"), "..")])

    assert result.returncode == 1
    assert result.stdout == ""
    assert result.stderr.startswith("error: unable to canonicalize path")


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores permissions")
def test_cli_tolerates_unreadable_subdirectory(sample_tree: Path) -> None:
    """TC-09: An unreadable subdirectory is listed as a leaf and the run succeeds."""
    locked = sample_tree / "a"
    os.chmod(locked, 0)
    try:
        result = run_cli([str(sample_tree)])
    finally:
        os.chmod(locked, 0o755)

    assert result.returncode == 0
    assert result.stdout == "R\n├───a\n└───z\n"
    assert result.stderr == ""
