"""Test configuration and fixtures for pathtree."""

import pytest

from pathtree.path_tree.path_tree import PathTree


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def tree():
    """An empty tree without auto-wash."""
    return PathTree()


@pytest.fixture
def sample_tree():
    """A three-level tree used by the lookup and rendering tests."""
    tree = PathTree()
    tree.add_file("./a/b/c.txt")
    tree.add_file("./a/d.txt")
    tree.add_file("./e.txt")
    return tree
