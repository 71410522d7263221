"""Box-drawing rendering of a PathTree, with optional ANSI colours."""

from typing import Iterator, List

from pathtree.path_tree.nodes import FolderNode, TreeNode

STRUCTURE_STYLE = "\x1b[38;5;234m"
FOLDER_STYLE = "\x1b[38;5;246m"
FILE_STYLE = "\x1b[1m"
RESET = "\x1b[0m"

BRANCH = " ├"
LAST_BRANCH = " └"
CONTINUATION = " │"
PADDING = "  "
DASH = "─"


class TreeRenderer:
    """Render folders and files as lines of tree art.

    Each folder lists its child folders first, each followed by its own
    subtree, then its files. Every line carries one column per enclosing
    depth: a vertical bar while the ancestor at that depth still has siblings
    below it, blank padding once it was the last one.

    Attributes:
        colorize (bool): Wrap connectors, folder names and file names in ANSI styles.

    Example:
        >>> root = FolderNode(".")
        >>> src = FolderNode("src", parent=root)
        >>> print("\\n".join(TreeRenderer().stream_lines(root)))
        ./
         └─src/
    """

    def __init__(self, colorize: bool = False) -> None:
        self.colorize = colorize

    def _paint(self, value: str, style: str) -> str:
        if not self.colorize:
            return value
        return f"{style}{value}{RESET}"

    def stream_lines(self, root: FolderNode) -> Iterator[str]:
        """Yield the rendered lines, starting with ``./`` for the root."""
        yield self._paint(".", FOLDER_STYLE) + self._paint("/", STRUCTURE_STYLE)
        yield from self._describe_folder(root, [])

    def _describe_folder(self, folder: FolderNode, last_flags: List[bool]) -> Iterator[str]:
        folders = list(folder.folders.values())
        entries: List[TreeNode] = [*folders, *folder.files.values()]

        for index, entry in enumerate(entries):
            is_last = index == len(entries) - 1
            yield self._entry_line(entry, last_flags, is_last)

            if isinstance(entry, FolderNode):
                yield from self._describe_folder(entry, last_flags + [is_last])

    def _entry_line(self, entry: TreeNode, last_flags: List[bool], is_last: bool) -> str:
        pieces = [self._paint(PADDING if flag else CONTINUATION, STRUCTURE_STYLE) for flag in last_flags]
        pieces.append(self._paint(LAST_BRANCH if is_last else BRANCH, STRUCTURE_STYLE))
        pieces.append(self._paint(DASH, STRUCTURE_STYLE))

        if isinstance(entry, FolderNode):
            pieces.append(self._paint(f"{entry.name}/", FOLDER_STYLE))
        else:
            pieces.append(self._paint(entry.name, FILE_STYLE))
        return "".join(pieces)
