"""Documentable entities and the manifest adapter that produces them."""

from .loader import EntityCollection, collection_from_manifest, load_manifest
from .models import DocumentableEntity, DocumentedMethod, EntityKind, sort_key
from .validation import validate_collection

__all__ = [
    "DocumentableEntity",
    "DocumentedMethod",
    "EntityKind",
    "EntityCollection",
    "collection_from_manifest",
    "load_manifest",
    "sort_key",
    "validate_collection",
]
