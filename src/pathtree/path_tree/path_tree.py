"""Path-addressed tree of folders and files held entirely in memory.

This module provides the PathTree class: folders and files are created on
first reference, looked up by path, removed with cascading removal hooks,
pruned when empty, and rendered as a box-drawing diagram.
"""

import logging
from typing import Any, Iterator, List, Mapping, Optional, Union

from anytree import PreOrderIter

from pathtree.failure import Failure
from pathtree.path_tree.nodes import FileNode, FolderNode
from pathtree.path_tree.paths import ROOT_NAME, split_path
from pathtree.path_tree.renderer import TreeRenderer
from pathtree.types import RemoveCallback

logger = logging.getLogger(__name__)


def _empty_folder(folder: FolderNode) -> int:
    """Remove everything below ``folder``, children before their parent.

    Child folders go first, each emptied before it is detached and its hook
    fired, then the files. Returns the number of removed nodes.
    """
    removed = 0
    for child in list(folder.folders.values()):
        removed += _empty_folder(child)
        child.parent = None
        child.notify_removed()
        removed += 1

    for file in list(folder.files.values()):
        file.parent = None
        file.notify_removed()
        removed += 1
    return removed


def _prune_empty_folders(folder: FolderNode) -> int:
    """Remove empty folders below ``folder``, bottom-up; ``folder`` itself stays.

    A child is checked only after its own descendants have been pruned, so a
    chain of folders that only held other empty folders goes in one pass.
    """
    removed = 0
    for child in list(folder.folders.values()):
        removed += _prune_empty_folders(child)
        if child.is_empty:
            child.parent = None
            child.notify_removed()
            removed += 1
    return removed


class PathTree:
    """An in-memory tree of folders and files addressed by slash-separated paths.

    Every path is resolved from the root folder ``.``; ``a/b``, ``/a/b/`` and
    ``./a//b`` all name the same node. Missing intermediate folders are
    created on insertion. Removing a folder removes everything below it,
    firing each node's ``on_remove`` hook after its own subtree is gone.

    Operations never raise for bad arguments. They return a falsy Failure
    instead; lookups return None and removals return False when nothing
    matches the path.

    Attributes:
        auto_wash (bool): Prune empty folders after every successful removal.
        root (FolderNode): The root folder, named ``.``. It is never removed.

    Example:
        >>> tree = PathTree()
        >>> _ = tree.add_file("src/main.py")
        >>> _ = tree.add_file("README.md")
        >>> print(tree.describe())
        ./
         ├─src/
         │ └─main.py
         └─README.md
        >>> tree.remove_folder("src")
        True
        >>> tree.get_file("src/main.py") is None
        True
    """

    def __init__(self, auto_wash: bool = False) -> None:
        """Initialize a PathTree holding only the root folder.

        Args:
            auto_wash: Whether removals should prune empty folders. Defaults to False.
        """
        self.auto_wash = auto_wash
        self.root = FolderNode(ROOT_NAME)

    def _invalid(self, operation: str, reason: str) -> Failure:
        logger.debug("%s: %s", operation, reason)
        return Failure(operation, reason)

    def _check_arguments(
        self,
        operation: str,
        path: object,
        data: object = None,
        on_remove: object = None,
    ) -> Optional[Failure]:
        if not isinstance(path, str):
            return self._invalid(operation, "path should be a string")
        if data is not None and not isinstance(data, Mapping):
            return self._invalid(operation, "data should be a mapping")
        if on_remove is not None and not callable(on_remove):
            return self._invalid(operation, "on_remove should be callable")
        return None

    def _resolve_folder(self, segments: List[str]) -> Optional[FolderNode]:
        """Walk ``segments`` (starting with the root) through existing folders only."""
        folder = self.root
        for segment in segments[1:]:
            child = folder.folders.get(segment)
            if child is None:
                return None
            folder = child
        return folder

    def add_folder(
        self,
        path: str,
        data: Optional[Mapping[str, Any]] = None,
        on_remove: Optional[RemoveCallback] = None,
    ) -> Union[FolderNode, Failure]:
        """Add a folder, creating any missing folders along the path.

        Only a folder created for the last segment receives ``data`` and
        ``on_remove``; intermediate folders start with empty metadata. An
        existing folder is returned as is, its metadata untouched.

        Args:
            path: Path of the folder, e.g. ``./a/b``.
            data: Metadata for the new folder.
            on_remove: Hook fired when the new folder is removed.

        Returns:
            The folder at ``path``, or a Failure on invalid arguments.

        Example:
            >>> tree = PathTree()
            >>> folder = tree.add_folder("a/b", {"owner": "ci"})
            >>> folder.tree_path, folder.data
            ('./a/b', {'owner': 'ci'})
            >>> tree.get_folder("a").data
            {}
            >>> tree.add_folder("./a/b/") is folder
            True
        """
        failure = self._check_arguments("add_folder", path, data, on_remove)
        if failure is not None:
            return failure

        return self._ensure_folder(split_path(path), data, on_remove)

    def _ensure_folder(
        self,
        segments: List[str],
        data: Optional[Mapping[str, Any]] = None,
        on_remove: Optional[RemoveCallback] = None,
    ) -> FolderNode:
        folder = self.root
        for index, segment in enumerate(segments[1:], start=1):
            child = folder.folders.get(segment)
            if child is None:
                is_target = index == len(segments) - 1
                child = FolderNode(
                    segment,
                    parent=folder,
                    data=data if is_target else None,
                    on_remove=on_remove if is_target else None,
                )
            folder = child
        return folder

    def add_file(
        self,
        path: str,
        data: Optional[Mapping[str, Any]] = None,
        on_remove: Optional[RemoveCallback] = None,
    ) -> Union[FileNode, Failure]:
        """Add a file, creating any missing parent folders.

        A file already present at ``path`` is replaced in place: the new node
        keeps the old one's position among its siblings, and the old node's
        ``on_remove`` hook is dropped without being fired.

        Args:
            path: Path of the file; its last segment is the file name.
            data: Metadata for the file.
            on_remove: Hook fired when the file is removed.

        Returns:
            The new file, or a Failure on invalid arguments.
        """
        failure = self._check_arguments("add_file", path, data, on_remove)
        if failure is not None:
            return failure

        segments = split_path(path)
        if len(segments) < 2:
            return self._invalid("add_file", "path should name a file below the root")

        folder = self._ensure_folder(segments[:-1])
        name = segments[-1]
        file = FileNode(name, data=data, on_remove=on_remove)

        existing = folder.files.get(name)
        if existing is None:
            file.parent = folder
        else:
            siblings = list(folder.children)
            siblings[siblings.index(existing)] = file
            folder.children = siblings
        return file

    def remove_folder(self, path: str) -> Union[bool, Failure]:
        """Remove a folder and everything below it.

        Descendants go first, depth-first, each firing its ``on_remove`` hook
        as it is detached: a folder's subfolders (each after its own
        contents), then its files. The target folder is detached and its
        hook fired last. With ``auto_wash``, empty folders are pruned after.

        Args:
            path: Path of the folder to remove.

        Returns:
            True if a folder was removed, False if none exists at ``path`` or
            ``path`` is the root, a Failure on invalid arguments.

        Example:
            >>> removed = []
            >>> tree = PathTree()
            >>> _ = tree.add_folder("f", on_remove=lambda node: removed.append(node.name))
            >>> _ = tree.add_file("f/x.txt", on_remove=lambda node: removed.append(node.name))
            >>> _ = tree.add_file("f/g/y.txt", on_remove=lambda node: removed.append(node.name))
            >>> tree.remove_folder("f")
            True
            >>> removed
            ['y.txt', 'x.txt', 'f']
        """
        failure = self._check_arguments("remove_folder", path)
        if failure is not None:
            return failure

        segments = split_path(path)
        if len(segments) < 2:
            return False

        parent = self._resolve_folder(segments[:-1])
        if parent is None:
            return False
        folder = parent.folders.get(segments[-1])
        if folder is None:
            return False

        _empty_folder(folder)
        folder.parent = None
        folder.notify_removed()

        if self.auto_wash:
            self.remove_empty_folders()
        return True

    def remove_file(self, path: str) -> Union[bool, Failure]:
        """Remove a single file.

        With ``auto_wash``, empty folders are pruned before the file's own
        ``on_remove`` hook fires.

        Args:
            path: Path of the file to remove.

        Returns:
            True if a file was removed, False if none exists at ``path``, a
            Failure on invalid arguments.
        """
        failure = self._check_arguments("remove_file", path)
        if failure is not None:
            return failure

        segments = split_path(path)
        if len(segments) < 2:
            return False

        parent = self._resolve_folder(segments[:-1])
        if parent is None:
            return False
        file = parent.files.get(segments[-1])
        if file is None:
            return False

        file.parent = None
        if self.auto_wash:
            self.remove_empty_folders()
        file.notify_removed()
        return True

    def get_folder(self, path: str) -> Union[FolderNode, None, Failure]:
        """Look up a folder without creating anything.

        Returns:
            The folder, None when any segment is missing, or a Failure on
            invalid arguments.
        """
        failure = self._check_arguments("get_folder", path)
        if failure is not None:
            return failure
        return self._resolve_folder(split_path(path))

    def get_file(self, path: str) -> Union[FileNode, None, Failure]:
        """Look up a file without creating anything.

        Returns:
            The file, None when it or any parent segment is missing, or a
            Failure on invalid arguments.
        """
        failure = self._check_arguments("get_file", path)
        if failure is not None:
            return failure

        segments = split_path(path)
        if len(segments) < 2:
            return None
        parent = self._resolve_folder(segments[:-1])
        if parent is None:
            return None
        return parent.files.get(segments[-1])

    def remove_empty_folders(self) -> int:
        """Remove every folder that holds no folders and no files.

        Pruning runs bottom-up, so nested empty folders all go in one call.
        Each removed folder's ``on_remove`` hook fires. The root is kept even
        when empty.

        Returns:
            The number of removed folders.

        Example:
            >>> tree = PathTree()
            >>> _ = tree.add_folder("a/b/c")
            >>> _ = tree.add_file("d/keep.txt")
            >>> tree.remove_empty_folders()
            3
            >>> list(tree.root.folders)
            ['d']
        """
        removed = _prune_empty_folders(self.root)
        logger.debug("remove_empty_folders: pruned %d folder(s)", removed)
        return removed

    def get_folder_count(self) -> int:
        """Get the number of folders in the tree, excluding the root."""
        return sum(1 for node in PreOrderIter(self.root) if isinstance(node, FolderNode)) - 1

    def get_file_count(self) -> int:
        """Get the number of files in the tree."""
        return sum(1 for node in PreOrderIter(self.root) if isinstance(node, FileNode))

    def iterate_files(self) -> Iterator[str]:
        """Yield the path of every file, in the order ``describe`` lists them."""
        yield from self._iterate_files(self.root)

    def _iterate_files(self, folder: FolderNode) -> Iterator[str]:
        for child in folder.folders.values():
            yield from self._iterate_files(child)
        for file in folder.files.values():
            yield file.tree_path

    def stream_tree_representation(self, colorize: bool = False) -> Iterator[str]:
        """Generate the tree diagram one line at a time.

        Args:
            colorize: Wrap connectors and names in ANSI styles.

        Yields:
            Lines of the diagram, the first one being ``./``.
        """
        yield from TreeRenderer(colorize).stream_lines(self.root)

    def describe(self, write_to_stdout: bool = False, colorize: bool = False) -> str:
        """Render the tree with box-drawing connectors.

        Args:
            write_to_stdout: Also print the diagram to standard output.
            colorize: Wrap connectors, folder names and file names (bold) in
                ANSI styles.

        Returns:
            The diagram, lines joined with newlines.
        """
        tree_string = "\n".join(self.stream_tree_representation(colorize))
        if write_to_stdout:
            print(tree_string)
        return tree_string
