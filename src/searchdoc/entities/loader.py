"""Read an extractor manifest (JSON) into linked entity collections.

Manifest layout::

    {
        "classes": [
            {
                "name": "Inner",
                "full_name": "Outer::Inner",
                "kind": "class",
                "parent": "Outer",
                "children": [],
                "path": "classes/Outer/Inner.html",
                "documents_self": true,
                "superclass": "Base",
                "methods": [
                    {"name": "run", "summary": "Runs it",
                     "anchor_url": "classes/Outer/Inner.html#method-i-run"}
                ]
            }
        ],
        "files": [
            {"name": "inner.rb", "full_name": "lib/inner.rb",
             "path": "files/lib/inner_rb.html"}
        ]
    }

``parent`` names the enclosing entity by full name. ``children`` adds
further containment edges; an entity listed there keeps its own parent
(or stays top-level), which is how aliased containment (the same module
reachable from two places) is expressed. Parent links must not loop.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

from ..exceptions import (
    EntityError,
    MissingFieldError,
    ParentCycleError,
    UnresolvedParentError,
)
from .models import DocumentableEntity, DocumentedMethod, EntityKind
from .validation import validate_collection

logger = logging.getLogger(__name__)

_CLASS_KINDS = {"class": EntityKind.CLASS, "module": EntityKind.MODULE}


class EntityCollection:
    """Classes/modules and files of one generation run."""

    def __init__(self, classes: list[DocumentableEntity], files: list[DocumentableEntity]):
        self.classes = classes
        self.files = files

    def __len__(self) -> int:
        return len(self.classes) + len(self.files)

    def find(self, full_name: str) -> DocumentableEntity | None:
        for entity in self.classes + self.files:
            if entity.full_name == full_name:
                return entity
        return None


def load_manifest(path: Union[str, Path]) -> EntityCollection:
    """Load and link a manifest file.

    Raises:
        EntityError: If the file is not valid JSON or breaks the entity contract
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise EntityError(
            f"Manifest is not valid JSON: {path}",
            details={"path": str(path), "reason": str(e)},
        ) from e

    logger.debug("Loaded manifest %s", path)
    return collection_from_manifest(data)


def collection_from_manifest(data: dict[str, Any]) -> EntityCollection:
    """Build linked entities from an already-parsed manifest."""
    if not isinstance(data, dict):
        raise EntityError("Manifest must be a JSON object")

    class_records = data.get("classes") or []
    file_records = data.get("files") or []

    classes = [_class_from_record(r) for r in class_records]
    files = [_file_from_record(r) for r in file_records]

    validate_collection(classes, files)

    by_name = {e.full_name: e for e in classes + files}
    for record, entity in zip(class_records, classes):
        parent_name = record.get("parent")
        if parent_name:
            parent = by_name.get(parent_name)
            if parent is None:
                raise UnresolvedParentError(entity.full_name, parent_name)
            parent.add_child(entity)

    for entity in classes:
        _check_ancestry(entity)

    # Aliased edges add children without reparenting
    for record, entity in zip(class_records, classes):
        for child_name in record.get("children") or []:
            child = by_name.get(child_name)
            if child is None:
                raise UnresolvedParentError(entity.full_name, child_name)
            if not any(c is child for c in entity.children):
                entity.children.append(child)

    logger.debug("Linked %d classes/modules and %d files", len(classes), len(files))
    return EntityCollection(classes, files)


def _check_ancestry(entity: DocumentableEntity) -> None:
    """Follow parent links upward and fail if they lead back to ``entity``."""
    chain = [entity.full_name]
    current = entity.parent
    while current is not None:
        chain.append(current.full_name)
        if current is entity:
            raise ParentCycleError(chain)
        if current.full_name in chain[:-1]:
            # Loop above entity, reported for its own members
            return
        current = current.parent


def _require(record: dict[str, Any], key: str) -> str:
    value = record.get(key)
    if not value:
        raise MissingFieldError(key, record.get("full_name") or record.get("name"))
    return str(value)


def _class_from_record(record: dict[str, Any]) -> DocumentableEntity:
    full_name = _require(record, "full_name")
    kind_name = record.get("kind", "class")
    kind = _CLASS_KINDS.get(kind_name)
    if kind is None:
        raise EntityError(
            f"Unknown kind {kind_name!r} for {full_name}",
            details={"full_name": full_name, "kind": str(kind_name)},
        )

    methods = [
        DocumentedMethod(
            name=_require(m, "name"),
            summary=m.get("summary") or "",
            anchor_url=m.get("anchor_url") or "",
        )
        for m in record.get("methods") or []
    ]

    return DocumentableEntity(
        name=record.get("name") or full_name.rsplit("::", 1)[-1],
        full_name=full_name,
        kind=kind,
        path=record.get("path") or "",
        documents_self=bool(record.get("documents_self", False)),
        superclass_name=record.get("superclass"),
        documented_methods=methods,
    )


def _file_from_record(record: dict[str, Any]) -> DocumentableEntity:
    full_name = _require(record, "full_name")
    return DocumentableEntity(
        name=record.get("name") or full_name.rsplit("/", 1)[-1],
        full_name=full_name,
        kind=EntityKind.FILE,
        path=record.get("path") or "",
        documents_self=bool(record.get("documents_self", True)),
        relative_name=record.get("relative_name") or full_name,
    )
