"""
searchdoc - navigation tree and search index builder for static API docs.

Turns the classes, modules, methods and files reported by a documentation
extractor into the two data assets a static documentation site needs: a
deduplicated navigation tree for the side panel and a flat index for
in-browser fuzzy search.
"""

__version__ = "0.1.0"

from .config import GeneratorConfig, load_config
from .entities import DocumentableEntity, DocumentedMethod, EntityKind, load_manifest
from .generator import GenerationResult, Generator
from .search import SearchIndex, build_search_index, search
from .tree import build_tree, tree_keys

__all__ = [
    "Generator",  # Main entry point
    "GenerationResult",
    "GeneratorConfig",
    "load_config",
    "DocumentableEntity",
    "DocumentedMethod",
    "EntityKind",
    "load_manifest",
    "build_tree",
    "build_search_index",
    "SearchIndex",
    "search",
    "tree_keys",
]
