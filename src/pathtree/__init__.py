"""In-memory folder/file trees rendered as ASCII diagrams.

This package provides a path-addressed tree of folders and files that lives
entirely in memory, plus a small directory-listing tool that fills such a
tree from a real directory and prints it.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("pathtree")
except PackageNotFoundError:
    __version__ = "unknown"
