"""Navigation tree: class/module forest plus the files group."""

from .builder import TreeBuilder, build_class_tree, build_tree, select_roots
from .files import FilesTrie, build_file_tree
from .keys import tree_keys
from .models import ClassNode, FileLeaf, GroupNode, TreeNode, dump_tree, tree_to_wire

__all__ = [
    "TreeBuilder",
    "build_tree",
    "build_class_tree",
    "build_file_tree",
    "select_roots",
    "FilesTrie",
    "tree_keys",
    "ClassNode",
    "GroupNode",
    "FileLeaf",
    "TreeNode",
    "dump_tree",
    "tree_to_wire",
]
