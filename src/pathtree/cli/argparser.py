"""Command-line argument parsing for pathtree.

This module defines the command-line interface for pathtree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from pathtree import __version__
from pathtree.config import DEFAULT_MAX_DEPTH


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with pathtree's options.
    """
    description = """
    pathtree: print a directory as a tree diagram.

    The directory is walked up to a maximum depth; folders whose contents lie
    beyond that depth are shown with a "(+)" suffix and are not expanded.
    Hidden entries (names starting with a dot) are skipped unless -a is given.
    """

    epilog = """
    Examples:
      # List the current directory two levels deep
      pathtree

      # Include hidden entries, colour the output, list four levels deep
      pathtree -ac 4

      # List another directory, leaving out build output and logs
      pathtree -d /path/to/project -i "build/" -i "*.log"

      # Leave out everything matched by a .gitignore file
      pathtree -e .gitignore
    """

    parser = argparse.ArgumentParser(
        prog="pathtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"pathtree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "depth",
        type=int,
        nargs="?",
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum depth to list (default: {DEFAULT_MAX_DEPTH}).",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path("."),
        metavar="DIR",
        help="The directory to list (default: the current directory).",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Include hidden entries (names starting with a dot).",
    )
    parser.add_argument(
        "-c",
        "--color",
        action="store_true",
        help="Colour the tree with ANSI escape sequences.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="append",
        metavar="PATTERN",
        help="Gitignore-style pattern of entries to leave out (can be specified multiple times).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        type=Path,
        metavar="FILE",
        help="Ignore file (e.g., .gitignore) whose patterns are left out (can be specified multiple times).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.depth < 0:
        raise ValueError(f"depth must not be negative, got {args.depth}")
