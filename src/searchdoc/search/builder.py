"""Flatten classes, modules and their documented methods into a search index."""

from __future__ import annotations

import logging
from typing import Iterable

from ..entities.models import DocumentableEntity
from .models import ClassRecord, MethodRecord, NameIndex, SearchIndex, SearchRecord

logger = logging.getLogger(__name__)


def build_search_index(classes: Iterable[DocumentableEntity]) -> SearchIndex:
    """Build the index from every class/module of a run.

    Entities are visited sorted by full name; each documented entity
    contributes its own record (when it has a page) followed by one record
    per documented method in declaration order. Undocumented entities are
    skipped. Each full name is indexed at most once.
    """
    records: list[SearchRecord] = []
    seen: set[str] = set()
    skipped = 0

    for entity in sorted(classes, key=lambda e: e.full_name):
        if entity.full_name in seen:
            continue
        seen.add(entity.full_name)

        if not entity.has_documentation:
            skipped += 1
            continue

        if entity.is_documented:
            records.append(ClassRecord(entity.kind.value, entity.full_name, entity.path))

        for method in entity.documented_methods:
            records.append(
                MethodRecord(
                    owning_full_name=entity.full_name,
                    method_name=method.name,
                    summary=method.summary,
                    anchor_url=method.anchor_url,
                )
            )

    if skipped:
        logger.debug("Skipped %d undocumented classes/modules", skipped)

    return SearchIndex(records=records, name_index=NameIndex.from_records(records))


class SearchIndexBuilder:
    """Builds the search index for one generation run."""

    def build(self, classes: Iterable[DocumentableEntity]) -> SearchIndex:
        classes = list(classes)
        logger.debug("Building search index from %d classes/modules", len(classes))
        index = build_search_index(classes)
        logger.debug(
            "Search index has %d records and %d name keys", len(index), len(index.name_index)
        )
        return index
