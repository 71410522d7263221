"""Depth-limited directory walker feeding a PathTree.

This module provides the DirectoryScanner class, which lists a real directory
and records every entry it finds in a PathTree, relative to the scanned root.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pathtree.exclusion_rules.base_rules import BaseExclusionRules
from pathtree.path_tree.path_tree import PathTree
from pathtree.types import PathType

logger = logging.getLogger(__name__)

# Appended to a folder path when its contents lie beyond the depth limit
DEPTH_LIMIT_MARKER = "(+)"


class DirectoryScanner:
    """Walk a directory up to a maximum depth and record its entries in a PathTree.

    Entries are visited in name order. Hidden entries (names starting with a
    dot) are skipped unless requested. A directory whose contents would lie
    deeper than ``max_depth`` is recorded with DEPTH_LIMIT_MARKER appended to
    its name and is not descended into.

    Attributes:
        root_path (Path): The directory to scan.
        show_hidden (bool): Include entries whose names start with a dot.
        max_depth (int): Deepest level whose contents are listed; top-level
            entries are at depth 1.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for leaving entries out.

    Example:
        >>> scanner = DirectoryScanner("project", max_depth=1)  # doctest: +SKIP
        >>> print(scanner.scan().describe())  # doctest: +SKIP
        ./
         ├─src(+)/
         └─README.md
    """

    def __init__(
        self,
        root_path: PathType,
        show_hidden: bool = False,
        max_depth: int = 2,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        self.root_path = Path(root_path)
        self.show_hidden = show_hidden
        self.max_depth = max_depth
        self.exclusion_rules = exclusion_rules

    def scan(self, tree: Optional[PathTree] = None) -> PathTree:
        """Record the directory's entries in a tree.

        Args:
            tree: Tree to add entries to. A new PathTree is created when omitted.

        Returns:
            The tree holding the scanned entries.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        if tree is None:
            tree = PathTree()
        self._read_dir(tree, self.root_path, ".", 0)
        return tree

    def _read_dir(self, tree: PathTree, directory: Path, tree_path: str, depth: int) -> None:
        depth += 1

        try:
            names = sorted(os.listdir(directory))
        except PermissionError as e:
            # The folder itself stays in the tree, just without contents
            logger.warning("Skipping unreadable directory %s: %s", directory, e)
            return

        for name in names:
            if not self.show_hidden and name.startswith("."):
                continue

            # Paths are trimmed and blank segments dropped, so such names cannot be addressed
            if not name.strip() or name != name.strip():
                logger.warning("Skipping entry with leading or trailing whitespace: %r in %s", name, directory)
                continue

            entry = directory / name
            entry_tree_path = f"{tree_path}/{name}"
            is_dir = entry.is_dir()

            if self._is_excluded(entry_tree_path, is_dir):
                logger.debug("Excluded %s", entry_tree_path)
                continue

            if not is_dir:
                tree.add_file(entry_tree_path)
            elif depth + 1 > self.max_depth:
                tree.add_folder(entry_tree_path + DEPTH_LIMIT_MARKER)
            else:
                tree.add_folder(entry_tree_path)
                self._read_dir(tree, entry, entry_tree_path, depth)

    def _is_excluded(self, tree_path: str, is_dir: bool) -> bool:
        if self.exclusion_rules is None:
            return False
        # Drop the leading "./"; directories carry a trailing slash for dir-only patterns
        relative_path = tree_path[2:] + ("/" if is_dir else "")
        return self.exclusion_rules.exclude(relative_path)
