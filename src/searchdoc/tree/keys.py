"""Keys of the navigation branches to open for a given page."""

from __future__ import annotations

from ..entities.models import DocumentableEntity
from .files import PATH_SEPARATOR, split_path


def tree_keys(entity: DocumentableEntity, files_label: str = "files") -> list[str]:
    """Return root-first keys of the branch leading to ``entity``.

    Classes and modules yield the full names of their class/module ancestors
    and then their own (``A::B::C`` gives ``A``, ``A::B``, ``A::B::C``).
    Files yield the files group label followed by the cumulative path
    prefixes of their relative name.
    """
    if entity.is_class_or_module:
        chain: list[str] = []
        seen: set[str] = set()
        node = entity
        while node is not None and node.is_class_or_module and node.full_name not in seen:
            seen.add(node.full_name)
            chain.append(node.full_name)
            node = node.parent
        return list(reversed(chain))

    parts = split_path(entity.relative_name)
    keys = [files_label]
    for i in range(1, len(parts) + 1):
        keys.append(files_label + PATH_SEPARATOR + PATH_SEPARATOR.join(parts[:i]))
    return keys
