"""Unit tests for tree rendering."""

import io
from contextlib import redirect_stdout

from pathtree.path_tree.nodes import FileNode, FolderNode
from pathtree.path_tree.path_tree import PathTree
from pathtree.path_tree.renderer import FILE_STYLE, FOLDER_STYLE, RESET, STRUCTURE_STYLE, TreeRenderer


def test_describe_empty_tree(tree):
    assert tree.describe() == "./"


def test_describe_single_root_file(tree):
    tree.add_file("x.txt")
    assert tree.describe() == "./\n └─x.txt"


def test_describe_three_levels(sample_tree):
    expected = "\n".join(
        [
            "./",
            " ├─a/",
            " │ ├─b/",
            " │ │ └─c.txt",
            " │ └─d.txt",
            " └─e.txt",
        ]
    )
    assert sample_tree.describe() == expected


def test_describe_last_ancestor_gets_padding():
    tree = PathTree()
    tree.add_file("a/first.txt")
    tree.add_file("z/y/x/deep.txt")
    tree.add_file("z/y/sibling.txt")
    tree.add_file("z/y/x/deeper/leaf.txt")

    expected = "\n".join(
        [
            "./",
            " ├─a/",
            " │ └─first.txt",
            " └─z/",
            "   └─y/",
            "     ├─x/",
            "     │ ├─deeper/",
            "     │ │ └─leaf.txt",
            "     │ └─deep.txt",
            "     └─sibling.txt",
        ]
    )
    assert tree.describe() == expected


def test_describe_sibling_folders_do_not_leak_flags():
    tree = PathTree()
    tree.add_folder("first/inner")
    tree.add_folder("second/inner")
    tree.add_file("second/inner/leaf.txt")
    tree.add_file("third.txt")

    expected = "\n".join(
        [
            "./",
            " ├─first/",
            " │ └─inner/",
            " ├─second/",
            " │ └─inner/",
            " │   └─leaf.txt",
            " └─third.txt",
        ]
    )
    assert tree.describe() == expected


def test_describe_folders_before_files():
    tree = PathTree()
    tree.add_file("b.txt")
    tree.add_folder("z")
    tree.add_file("a.txt")
    tree.add_folder("y")
    assert tree.describe() == "./\n ├─z/\n ├─y/\n ├─b.txt\n └─a.txt"


def test_describe_colorized(tree):
    tree.add_folder("src")
    tree.add_file("x.txt")

    def paint(value, style):
        return f"{style}{value}{RESET}"

    structure = lambda value: paint(value, STRUCTURE_STYLE)  # noqa: E731
    expected = "\n".join(
        [
            paint(".", FOLDER_STYLE) + structure("/"),
            structure(" ├") + structure("─") + paint("src/", FOLDER_STYLE),
            structure(" └") + structure("─") + paint("x.txt", FILE_STYLE),
        ]
    )
    assert tree.describe(colorize=True) == expected


def test_describe_colorized_nested_columns(tree):
    tree.add_file("a/b.txt")
    lines = tree.describe(colorize=True).split("\n")
    assert lines[2] == (
        f"{STRUCTURE_STYLE}  {RESET}{STRUCTURE_STYLE} └{RESET}{STRUCTURE_STYLE}─{RESET}{FILE_STYLE}b.txt{RESET}"
    )


def test_describe_write_to_stdout(sample_tree):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        result = sample_tree.describe(write_to_stdout=True)
    assert buffer.getvalue() == result + "\n"


def test_describe_is_silent_by_default(sample_tree):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        sample_tree.describe()
    assert buffer.getvalue() == ""


def test_stream_tree_representation_matches_describe(sample_tree):
    assert "\n".join(sample_tree.stream_tree_representation()) == sample_tree.describe()


def test_renderer_on_bare_nodes():
    root = FolderNode(".")
    docs = FolderNode("docs", parent=root)
    FileNode("index.md", parent=docs)
    assert list(TreeRenderer().stream_lines(root)) == ["./", " └─docs/", "   └─index.md"]
