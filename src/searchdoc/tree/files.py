"""Directory tree built from the relative paths of rendered files."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence, Union

from ..entities.models import DocumentableEntity
from ..exceptions import DuplicateEntityError, EntityError, MissingFieldError
from .models import FileLeaf, GroupNode, TreeNode

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"


class FilesTrie:
    """Path-segment trie. Leaves map a segment to the file's output URL."""

    def __init__(self) -> None:
        self.children: dict[str, Union[str, FilesTrie]] = {}

    def add(self, path: Union[str, Sequence[str]], url: str) -> None:
        """Insert a file by relative path (string or pre-split segments)."""
        parts = split_path(path) if isinstance(path, str) else list(path)
        if not parts:
            raise MissingFieldError("relative_name", url or None)

        node = self
        for depth, part in enumerate(parts[:-1]):
            child = node.children.get(part)
            if isinstance(child, str):
                raise EntityError(
                    f"File path collides with another file: {PATH_SEPARATOR.join(parts)}",
                    details={"file": PATH_SEPARATOR.join(parts[: depth + 1])},
                )
            if child is None:
                child = node.children[part] = FilesTrie()
            node = child

        leaf = parts[-1]
        existing = node.children.get(leaf)
        if isinstance(existing, FilesTrie):
            raise EntityError(
                f"File path collides with a directory: {PATH_SEPARATOR.join(parts)}",
                details={"file": PATH_SEPARATOR.join(parts)},
            )
        if existing is not None:
            raise DuplicateEntityError(PATH_SEPARATOR.join(parts))
        node.children[leaf] = url

    def to_nodes(self) -> list[TreeNode]:
        """Convert to tree nodes, each level sorted by segment name."""
        nodes: list[TreeNode] = []
        for name in sorted(self.children):
            child = self.children[name]
            if isinstance(child, str):
                nodes.append(FileLeaf(name, child))
            else:
                nodes.append(GroupNode(name, child.to_nodes()))
        return nodes


def split_path(path: str) -> list[str]:
    """Split a relative path into segments, ignoring empty and ``.`` parts."""
    return [p for p in path.split(PATH_SEPARATOR) if p and p != "."]


def build_file_tree(files: Iterable[DocumentableEntity], label: str = "files") -> list[TreeNode]:
    """Build the files group, or nothing for a project with fewer than two files."""
    files = list(files)
    if len(files) <= 1:
        logger.debug("Skipping file tree for %d file(s)", len(files))
        return []

    trie = FilesTrie()
    for entity in files:
        trie.add(entity.relative_name, entity.path)

    return [GroupNode(label, trie.to_nodes())]
