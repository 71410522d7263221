"""Listing configuration assembled from command-line arguments."""

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

DEFAULT_MAX_DEPTH = 2


@dataclass
class ListingConfig:
    """Options controlling how a directory is scanned and printed.

    Attributes:
        directory: Directory to list.
        show_hidden: Include entries whose names start with a dot.
        colorize: Print the tree with ANSI colours.
        max_depth: Deepest level whose contents are listed.
        ignore: Individual gitignore-style patterns to leave out.
        exclude: Ignore files whose patterns are left out.
        verbose: Emit debug logging on stderr.
    """

    directory: Path = Path(".")
    show_hidden: bool = False
    colorize: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    ignore: List[str] = field(default_factory=list)
    exclude: List[Path] = field(default_factory=list)
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ListingConfig":
        """Build a configuration from parsed command-line arguments."""
        return cls(
            directory=args.directory,
            show_hidden=args.all,
            colorize=args.color,
            max_depth=args.depth,
            ignore=list(args.ignore or []),
            exclude=list(args.exclude or []),
            verbose=args.verbose,
        )
