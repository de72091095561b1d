"""Search index records and the sorted name index.

Records are flat: a method is its own record pointing back at its owner by
full name, so the client can scan a single list on every keystroke.
"""

from __future__ import annotations

import json
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class ClassRecord:
    """A class or module with a page of its own."""

    type: str
    full_name: str
    path: str

    @property
    def search_keys(self) -> list[str]:
        return [self.full_name]

    @property
    def url(self) -> str:
        return self.path

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "fullName": self.full_name, "path": self.path}


@dataclass(frozen=True)
class MethodRecord:
    """A documented method, addressed by an anchor on its owner's page."""

    owning_full_name: str
    method_name: str
    summary: str
    anchor_url: str
    type: str = field(default="method", init=False)

    @property
    def search_keys(self) -> list[str]:
        return [f"{self.owning_full_name}#{self.method_name}", self.method_name]

    @property
    def url(self) -> str:
        return self.anchor_url

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "owningFullName": self.owning_full_name,
            "methodName": self.method_name,
            "summary": self.summary,
            "anchorUrl": self.anchor_url,
        }


SearchRecord = Union[ClassRecord, MethodRecord]


class NameIndex:
    """Lower-cased search keys sorted for prefix lookup by binary search.

    Each entry is ``(key, position)`` where ``position`` indexes the record
    list. A record contributes one entry per search key.
    """

    def __init__(self, entries: list[tuple[str, int]]):
        self.entries = sorted(entries)
        self._keys = [key for key, _ in self.entries]

    @classmethod
    def from_records(cls, records: list[SearchRecord]) -> NameIndex:
        entries = []
        for position, record in enumerate(records):
            for key in dict.fromkeys(record.search_keys):
                entries.append((key.lower(), position))
        return cls(entries)

    def __len__(self) -> int:
        return len(self.entries)

    def prefix(self, prefix: str) -> list[tuple[str, int]]:
        """Entries whose key starts with ``prefix`` (already lower-cased)."""
        start = bisect_left(self._keys, prefix)
        matches = []
        for key, position in self.entries[start:]:
            if not key.startswith(prefix):
                break
            matches.append((key, position))
        return matches

    def to_wire(self) -> list[list]:
        return [[key, position] for key, position in self.entries]


@dataclass
class SearchIndex:
    """Flat record list plus its name index."""

    records: list[SearchRecord] = field(default_factory=list)
    name_index: NameIndex = field(default_factory=lambda: NameIndex([]))

    def __len__(self) -> int:
        return len(self.records)

    def to_wire(self) -> list[dict[str, Any]]:
        return [record.to_dict() for record in self.records]

    def dump_records(self) -> str:
        return json.dumps(self.to_wire(), ensure_ascii=False, separators=(",", ":"))

    def dump_name_index(self) -> str:
        return json.dumps(self.name_index.to_wire(), ensure_ascii=False, separators=(",", ":"))
