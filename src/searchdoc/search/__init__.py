"""Search index: flat records plus a sorted name index."""

from .builder import SearchIndexBuilder, build_search_index
from .models import ClassRecord, MethodRecord, NameIndex, SearchIndex, SearchRecord
from .query import SearchMatch, search

__all__ = [
    "SearchIndexBuilder",
    "build_search_index",
    "ClassRecord",
    "MethodRecord",
    "NameIndex",
    "SearchIndex",
    "SearchRecord",
    "SearchMatch",
    "search",
]
