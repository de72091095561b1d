"""Navigation tree construction for classes, modules and files.

The class/module tree is a depth-first walk from the top-level entities.
Containment links come from an external extractor and may not form a
strict tree, so one visited set (keyed by full name) is threaded through
the whole walk: an entity reachable from several parents is emitted under
the first one reached in sorted order and omitted everywhere else.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..entities.models import DocumentableEntity, sort_key
from ..exceptions import MissingFieldError
from .files import build_file_tree
from .models import ClassNode, TreeNode, count_nodes

logger = logging.getLogger(__name__)


def select_roots(classes: Iterable[DocumentableEntity]) -> list[DocumentableEntity]:
    """Top-level entities: those whose parent is not a class or module."""
    return [c for c in classes if c.parent is None or not c.parent.is_class_or_module]


def build_class_tree(classes: Iterable[DocumentableEntity]) -> list[ClassNode]:
    """Build the class/module forest with a fresh visited set."""
    visited: set[str] = set()
    return _build_level(select_roots(classes), visited)


def _build_level(
    candidates: Iterable[DocumentableEntity], visited: set[str]
) -> list[ClassNode]:
    eligible = sorted(
        (c for c in candidates if _key(c) not in visited and c.has_documentation),
        key=sort_key,
    )

    level: list[ClassNode] = []
    for entity in eligible:
        # An earlier sibling's subtree may have claimed it since filtering
        if entity.full_name in visited:
            logger.debug("Skipping %s: already emitted", entity.full_name)
            continue
        visited.add(entity.full_name)
        level.append(
            ClassNode(
                name=entity.name,
                path=entity.path if entity.is_documented else "",
                suffix=entity.inheritance_label(),
                children=_build_level(entity.classes_and_modules, visited),
            )
        )
    return level


def _key(entity: DocumentableEntity) -> str:
    if not entity.full_name:
        raise MissingFieldError("full_name", entity.name or None)
    return entity.full_name


def build_tree(
    classes: Iterable[DocumentableEntity],
    files: Iterable[DocumentableEntity] = (),
    files_label: str = "files",
) -> list[TreeNode]:
    """Combined navigation forest: the files group (if any) first, then classes."""
    file_tree = build_file_tree(files, label=files_label)
    class_tree = build_class_tree(classes)
    return [*file_tree, *class_tree]


class TreeBuilder:
    """Builds the navigation tree for one generation run."""

    def __init__(self, files_label: str = "files"):
        self.files_label = files_label

    def build(
        self,
        classes: Iterable[DocumentableEntity],
        files: Optional[Iterable[DocumentableEntity]] = None,
    ) -> list[TreeNode]:
        classes = list(classes)
        files = list(files or [])
        logger.debug(
            "Building navigation tree from %d classes/modules and %d files",
            len(classes),
            len(files),
        )
        tree = build_tree(classes, files, files_label=self.files_label)
        logger.debug("Navigation tree has %d nodes", count_nodes(tree))
        return tree
