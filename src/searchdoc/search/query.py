"""Reference matcher for the client-side search contract.

The browser runs its own implementation against the same artifact; this one
lets the CLI and tests exercise the index without a browser.

Ranking, best first:

    0. exact key match
    1. key prefix match (found through the name index)
    2. substring match
    3. in-order subsequence (fuzzy) match

Ties go to the shorter key, then to the earlier record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .models import SearchIndex, SearchRecord

EXACT = 0
PREFIX = 1
SUBSTRING = 2
FUZZY = 3


@dataclass(frozen=True)
class SearchMatch:
    """A ranked hit."""

    record: SearchRecord
    position: int
    key: str
    tier: int

    @property
    def rank(self) -> tuple[int, int, int]:
        return (self.tier, len(self.key), self.position)


def is_subsequence(needle: str, haystack: str) -> bool:
    """True when every character of needle appears in haystack, in order."""
    it = iter(haystack)
    return all(ch in it for ch in needle)


def match_tier(query: str, key: str) -> Optional[int]:
    """Tier of ``key`` for an already lower-cased query, or None."""
    if key == query:
        return EXACT
    if key.startswith(query):
        return PREFIX
    if query in key:
        return SUBSTRING
    if is_subsequence(query, key):
        return FUZZY
    return None


def search(index: SearchIndex, query: str, limit: Optional[int] = None) -> list[SearchMatch]:
    """Return the records matching ``query``, best first, one hit per record."""
    query = query.strip().lower()
    if not query:
        return []

    best: dict[int, SearchMatch] = {}

    def offer(key: str, position: int, tier: int) -> None:
        match = SearchMatch(index.records[position], position, key, tier)
        current = best.get(position)
        if current is None or match.rank < current.rank:
            best[position] = match

    # Prefix hits come straight from the sorted keys
    for key, position in index.name_index.prefix(query):
        offer(key, position, EXACT if key == query else PREFIX)

    for key, position in index.name_index.entries:
        if position in best and best[position].tier <= PREFIX:
            continue
        tier = match_tier(query, key)
        if tier is not None and tier > PREFIX:
            offer(key, position, tier)

    ranked = sorted(best.values(), key=lambda m: m.rank)
    if limit is not None:
        ranked = ranked[:limit]
    return ranked
