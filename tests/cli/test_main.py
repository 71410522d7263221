"""Unit tests for the CLI main module."""

import contextlib
import io
from unittest.mock import patch

import pytest

from pathtree.cli.main import build_exclusion_rules, main
from pathtree.config import ListingConfig


@pytest.fixture
def project(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").touch()
    (tmp_path / "src" / "pkg").mkdir()
    (tmp_path / "src" / "pkg" / "module.py").touch()
    (tmp_path / ".hidden").touch()
    (tmp_path / "debug.log").touch()
    return tmp_path


def run_main(argv):
    """Run main() with ``argv``, returning (stdout, stderr, exit mock)."""
    stdout = io.StringIO()
    stderr = io.StringIO()
    with patch("sys.argv", ["pathtree", *argv]), patch("sys.exit") as mock_exit:
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            main()
    return stdout.getvalue(), stderr.getvalue(), mock_exit


def test_main_prints_tree(project):
    stdout, stderr, mock_exit = run_main(["-d", str(project)])
    assert stdout == "./\n ├─src/\n │ ├─pkg(+)/\n │ └─main.py\n └─debug.log\n"
    assert stderr == ""
    mock_exit.assert_not_called()


def test_main_show_hidden_and_depth(project):
    stdout, _, _ = run_main(["-a", "3", "-d", str(project)])
    assert " ├─.hidden" in stdout
    assert "module.py" in stdout
    assert "(+)" not in stdout


def test_main_colorized(project):
    stdout, _, _ = run_main(["-c", "-d", str(project)])
    assert "\x1b[1mmain.py\x1b[0m" in stdout


def test_main_ignore_patterns(project):
    stdout, _, _ = run_main(["-i", "*.log", "-d", str(project)])
    assert "debug.log" not in stdout


def test_main_missing_directory(tmp_path):
    _, stderr, mock_exit = run_main(["-d", str(tmp_path / "missing")])
    assert stderr.startswith("Error: Root path does not exist")
    mock_exit.assert_called_once_with(1)


def test_main_negative_depth(project):
    _, stderr, mock_exit = run_main(["-d", str(project), "-1"])
    assert "depth must not be negative" in stderr
    mock_exit.assert_called_once_with(1)


def test_main_permission_error(project):
    with patch("pathtree.cli.main.DirectoryScanner.scan", side_effect=PermissionError("Access denied")):
        _, stderr, mock_exit = run_main(["-d", str(project)])
    assert stderr == "Error: Access denied\n"
    mock_exit.assert_called_once_with(126)


def test_main_keyboard_interrupt(project):
    with patch("pathtree.cli.main.DirectoryScanner.scan", side_effect=KeyboardInterrupt):
        _, _, mock_exit = run_main(["-d", str(project)])
    mock_exit.assert_called_once_with(130)


def test_build_exclusion_rules(tmp_path):
    ignore_file = tmp_path / ".gitignore"
    ignore_file.write_text("*.pyc\n")
    rules = build_exclusion_rules(ListingConfig(ignore=["build/"], exclude=[ignore_file]))
    assert rules.exclude("module.pyc")
    assert rules.exclude("build/")
    assert not rules.exclude("module.py")
