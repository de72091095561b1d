"""Navigation tree nodes.

The panel script consumes every node as a 4-element array::

    [name, path, suffix_or_label, children]

The third slot is overloaded: an inheritance suffix (``" < Base"``) on
class/module nodes, a group label on directory and group nodes. Nodes are
kept as distinct types here and only flattened by ``to_wire``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Union


@dataclass
class ClassNode:
    """A class or module. ``path`` is empty when it has no page of its own."""

    name: str
    path: str = ""
    suffix: str = ""
    children: list[TreeNode] = field(default_factory=list)

    def to_wire(self) -> list:
        return [self.name, self.path, self.suffix, [c.to_wire() for c in self.children]]


@dataclass
class GroupNode:
    """A labelled folder: a directory in the file tree or the files group itself."""

    label: str
    children: list[TreeNode] = field(default_factory=list)

    def to_wire(self) -> list:
        return ["", "", self.label, [c.to_wire() for c in self.children]]


@dataclass
class FileLeaf:
    """A rendered file page."""

    name: str
    url: str

    def to_wire(self) -> list:
        return [self.name, self.url, "", []]


TreeNode = Union[ClassNode, GroupNode, FileLeaf]


def tree_to_wire(nodes: list[TreeNode]) -> list[list]:
    """Flatten a forest to nested arrays."""
    return [node.to_wire() for node in nodes]


def dump_tree(nodes: list[TreeNode]) -> str:
    """Serialize a forest to compact JSON. Output is stable for equal input."""
    return json.dumps(tree_to_wire(nodes), ensure_ascii=False, separators=(",", ":"))


def count_nodes(nodes: list[TreeNode]) -> int:
    """Total number of nodes in a forest, groups included."""
    total = 0
    stack = list(nodes)
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(getattr(node, "children", []))
    return total
