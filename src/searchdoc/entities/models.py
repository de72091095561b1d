"""Documentable entities handed to the builders by an external extractor.

Containment is supplied as parent/children links. The extractor does not
guarantee a strict tree: an entity may be listed under several parents and
links may form cycles, so anything walking ``children`` must carry its own
visited set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class EntityKind(Enum):
    """The kinds of entity that can carry rendered documentation."""

    CLASS = "class"
    MODULE = "module"
    FILE = "file"


@dataclass(frozen=True)
class DocumentedMethod:
    """A method with rendered documentation on its owner's page."""

    name: str
    summary: str = ""
    anchor_url: str = ""


@dataclass(eq=False)
class DocumentableEntity:
    """A class, module or file that may carry rendered documentation.

    ``full_name`` is unique across a collection and is the key used for
    deduplication. Equality and hashing are by identity so that cyclic
    parent/children links never recurse.
    """

    name: str
    full_name: str
    kind: EntityKind
    path: str = ""
    documents_self: bool = False
    superclass_name: Optional[str] = None
    documented_methods: list[DocumentedMethod] = field(default_factory=list)
    relative_name: str = ""
    parent: Optional[DocumentableEntity] = field(default=None, repr=False)
    children: list[DocumentableEntity] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.kind is EntityKind.FILE and not self.relative_name:
            self.relative_name = self.full_name

    # ── Kind helpers ──────────────────────────────────────────────

    @property
    def is_module(self) -> bool:
        return self.kind is EntityKind.MODULE

    @property
    def is_class_or_module(self) -> bool:
        return self.kind in (EntityKind.CLASS, EntityKind.MODULE)

    @property
    def classes_and_modules(self) -> list[DocumentableEntity]:
        """Nested classes and modules, in containment order."""
        return [c for c in self.children if c.is_class_or_module]

    # ── Documentation flags ───────────────────────────────────────

    @property
    def is_documented(self) -> bool:
        """True when the entity documents itself or any of its methods."""
        return self.documents_self or bool(self.documented_methods)

    @property
    def has_documentation(self) -> bool:
        """True when this entity or any nested class/module is documented.

        Computed depth-first on every access; cycles in the containment
        links are cut by a per-call visited set.
        """
        return _has_documentation(self, set())

    def inheritance_label(self) -> str:
        """Suffix shown next to a class in the navigation tree."""
        if self.is_module or not self.superclass_name:
            return ""
        return f" < {self.superclass_name}"

    def add_child(self, child: DocumentableEntity) -> DocumentableEntity:
        """Link ``child`` under this entity and return it."""
        if child.parent is None:
            child.parent = self
        if not any(c is child for c in self.children):
            self.children.append(child)
        return child


def _has_documentation(entity: DocumentableEntity, seen: set[str]) -> bool:
    if entity.full_name in seen:
        return False
    seen.add(entity.full_name)
    if entity.is_documented:
        return True
    return any(_has_documentation(child, seen) for child in entity.classes_and_modules)


def sort_key(entity: DocumentableEntity) -> tuple[str, str]:
    """Sibling ordering: simple name, then full name for equal names."""
    return (entity.name, entity.full_name)
