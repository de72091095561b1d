"""Precondition checks run before either builder sees a collection."""

import logging
from typing import Iterable

from ..exceptions import DuplicateEntityError, EntityError, MissingFieldError
from .models import DocumentableEntity, EntityKind

logger = logging.getLogger(__name__)


def validate_collection(
    classes: Iterable[DocumentableEntity],
    files: Iterable[DocumentableEntity],
) -> None:
    """Check the extractor's contract on a class and a file collection.

    Raises:
        MissingFieldError: An entity has no name or full name.
        DuplicateEntityError: Two entities share a full name.
        EntityError: An entity sits in the wrong collection.
    """
    seen: set[str] = set()
    count = 0

    for entity in classes:
        _check_fields(entity)
        if not entity.is_class_or_module:
            raise EntityError(
                f"Expected a class or module, got {entity.kind.value}: {entity.full_name}",
                details={"full_name": entity.full_name, "kind": entity.kind.value},
            )
        _check_unique(entity, seen)
        count += 1

    for entity in files:
        _check_fields(entity)
        if entity.kind is not EntityKind.FILE:
            raise EntityError(
                f"Expected a file, got {entity.kind.value}: {entity.full_name}",
                details={"full_name": entity.full_name, "kind": entity.kind.value},
            )
        if not entity.relative_name:
            raise MissingFieldError("relative_name", entity.full_name)
        _check_unique(entity, seen)
        count += 1

    logger.debug("Validated %d entities", count)


def _check_fields(entity: DocumentableEntity) -> None:
    if not entity.full_name:
        raise MissingFieldError("full_name", entity.name or None)
    if not entity.name:
        raise MissingFieldError("name", entity.full_name)


def _check_unique(entity: DocumentableEntity, seen: set[str]) -> None:
    if entity.full_name in seen:
        raise DuplicateEntityError(entity.full_name)
    seen.add(entity.full_name)
