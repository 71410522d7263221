from enum import Enum
from os import PathLike
from typing import TYPE_CHECKING, Callable, Union

if TYPE_CHECKING:
    from pathtree.path_tree.nodes import TreeNode

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Hook fired with the removed node once it has been detached from the tree
RemoveCallback = Callable[["TreeNode"], None]


class NodeKind(Enum):
    """Enumeration of node kinds held by a PathTree.

    Attributes:
        FOLDER: Node that owns child folders and files
        FILE: Leaf node
    """

    FOLDER = "folder"
    FILE = "file"
