"""Integration tests for the command-line interface.

These tests run the CLI in a subprocess against a real directory tree.
"""

import subprocess
import sys

import pytest

# Skip all tests in this module unless --run-cli-tests is given
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


@pytest.fixture
def temp_project(tmp_path):
    """Create a temporary project directory with test files."""
    (tmp_path / "src" / "utils").mkdir(parents=True)
    (tmp_path / "docs").mkdir()
    (tmp_path / "src" / "main.py").write_text("def main():\n    pass\n")
    (tmp_path / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (tmp_path / "docs" / "README.md").write_text("# Test Project\n")
    (tmp_path / ".gitignore").write_text("docs/\n")
    return tmp_path


def run_cli(args, cwd=None, timeout=10):
    """Run the CLI module with ``args`` and return the completed process."""
    cmd = [sys.executable, "-m", "pathtree.cli.main", *args]
    return subprocess.run(
        cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True, encoding="utf-8", cwd=cwd, timeout=timeout
    )


def test_cli_lists_current_directory(temp_project):
    result = run_cli([], cwd=temp_project)
    assert result.returncode == 0
    assert result.stdout.splitlines() == [
        "./",
        " ├─docs/",
        " │ └─README.md",
        " └─src/",
        "   ├─utils(+)/",
        "   └─main.py",
    ]


def test_cli_exclude_file(temp_project):
    result = run_cli(["-a", "-e", ".gitignore", "1"], cwd=temp_project)
    assert result.returncode == 0
    assert result.stdout.splitlines() == ["./", " ├─src(+)/", " └─.gitignore"]


def test_cli_missing_directory(tmp_path):
    result = run_cli(["-d", str(tmp_path / "missing")])
    assert result.returncode == 1
    assert result.stderr.startswith("Error: ")


def test_cli_usage_error():
    result = run_cli(["--no-such-flag"])
    assert result.returncode == 2


def test_cli_version():
    result = run_cli(["-V"])
    assert result.returncode == 0
    assert result.stdout.startswith("pathtree ")
