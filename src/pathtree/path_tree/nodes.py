"""Node representation for folders and files held by a PathTree."""

from typing import Any, Dict, Mapping, Optional

from anytree import Node, TreeError

from pathtree.types import NodeKind, RemoveCallback


class TreeNode(Node):  # type: ignore
    """Base node class for entries of a PathTree.

    Extends anytree.Node with a metadata map and an optional removal hook.
    Parent/child links, ancestry and iteration come from anytree; the order
    of ``children`` is the insertion order of the entries.

    Attributes:
        name (str): The entry name (a single path segment).
        parent (Optional[FolderNode]): The containing folder, or None once detached.
        data (Dict[str, Any]): Open metadata map supplied when the node was created.
        on_remove (Optional[RemoveCallback]): Called with the node after it has been
            removed from the tree.
        kind (NodeKind): FOLDER or FILE.
    """

    kind: NodeKind

    def __init__(
        self,
        name: str,
        parent: Optional["FolderNode"] = None,
        data: Optional[Mapping[str, Any]] = None,
        on_remove: Optional[RemoveCallback] = None,
    ) -> None:
        """Initialize a TreeNode.

        Args:
            name: The entry name.
            parent: The containing folder. Defaults to None.
            data: Metadata to attach to the node. The mapping is copied.
            on_remove: Hook fired once when the node is removed. Defaults to None.
        """
        super().__init__(name, parent)
        self.data: Dict[str, Any] = dict(data) if data else {}
        self.on_remove = on_remove

    def _pre_attach(self, parent: Node) -> None:
        if isinstance(parent, FileNode):
            raise TreeError(f"File {parent.name!r} cannot hold children.")

    @property
    def tree_path(self) -> str:
        """Slash-joined names from the topmost ancestor down to this node.

        For a node attached to a PathTree this is its path from the root.
        A removed node is detached from its parent before its ``on_remove``
        hook runs, so inside a hook ``tree_path`` is just the node's name.
        Any detached node returns the path from its topmost ancestor.

        Example:
            >>> root = FolderNode(".")
            >>> file = FileNode("x.txt", parent=FolderNode("a", parent=root))
            >>> file.tree_path
            './a/x.txt'
            >>> file.parent.parent = None
            >>> file.tree_path
            'a/x.txt'
        """
        return "/".join(node.name for node in self.path)

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER

    def notify_removed(self) -> None:
        """Fire the removal hook, if any, with this node as the argument."""
        if self.on_remove is not None:
            self.on_remove(self)


class FolderNode(TreeNode):
    """Folder entry owning child folders and files.

    ``folders`` and ``files`` are ordered snapshots keyed by name; they are
    rebuilt from the anytree children on every access, so mutating them does
    not change the tree.

    Example:
        >>> root = FolderNode(".")
        >>> sub = FolderNode("src", parent=root)
        >>> readme = FileNode("README.md", parent=root)
        >>> list(root.folders), list(root.files)
        (['src'], ['README.md'])
        >>> sub.is_empty
        True
    """

    kind = NodeKind.FOLDER

    @property
    def folders(self) -> Dict[str, "FolderNode"]:
        return {child.name: child for child in self.children if isinstance(child, FolderNode)}

    @property
    def files(self) -> Dict[str, "FileNode"]:
        return {child.name: child for child in self.children if isinstance(child, FileNode)}

    @property
    def is_empty(self) -> bool:
        """True when the folder holds neither folders nor files."""
        return not self.children


class FileNode(TreeNode):
    """Leaf entry. Attaching a child to a file raises anytree.TreeError."""

    kind = NodeKind.FILE
