"""Input-contract exceptions: entities handed over by the extractor.

These are precondition violations. They abort the whole run before any
artifact is written and are never caught inside the builders.
"""

from typing import Optional, Sequence

from .base import SearchdocError


class EntityError(SearchdocError):
    """Base class for malformed entity collections."""

    pass


class MissingFieldError(EntityError):
    """Raised when an entity lacks a required field."""

    def __init__(self, field: str, entity: Optional[str] = None):
        details = {"field": field}
        if entity:
            details["entity"] = entity

        super().__init__(f"Entity is missing required field '{field}'", details=details)
        self.field = field
        self.entity = entity


class DuplicateEntityError(EntityError):
    """Raised when two entities share a full name."""

    def __init__(self, full_name: str):
        super().__init__(
            f"Duplicate entity full name: {full_name}",
            details={"full_name": full_name},
        )
        self.full_name = full_name


class UnresolvedParentError(EntityError):
    """Raised when a parent or child link points at an unknown entity."""

    def __init__(self, full_name: str, reference: str):
        super().__init__(
            f"Cannot resolve '{reference}' referenced by {full_name}",
            details={"full_name": full_name, "reference": reference},
        )
        self.full_name = full_name
        self.reference = reference


class ParentCycleError(EntityError):
    """Raised when following parent links leads back to the starting entity."""

    def __init__(self, chain: Sequence[str]):
        self.chain = list(chain)
        self.full_name = self.chain[0]
        super().__init__(
            f"Parent links of {self.full_name} form a cycle",
            details={"chain": " -> ".join(self.chain)},
        )
