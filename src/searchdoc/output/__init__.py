"""Artifact output: the tree script and the search index module."""

from .writer import (
    ArtifactWriter,
    render_search_index_module,
    render_tree_script,
    write_artifact,
)

__all__ = [
    "ArtifactWriter",
    "render_search_index_module",
    "render_tree_script",
    "write_artifact",
]
