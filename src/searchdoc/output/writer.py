"""Write the tree script and search index module to the output directory.

Each artifact is rendered in full, written to a temporary file beside its
target and then renamed over it, so a failed write leaves any previous
artifact in place.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from ..exceptions import OutputError
from ..search.models import SearchIndex
from ..tree.models import TreeNode, dump_tree

logger = logging.getLogger(__name__)

ARTIFACT_MODE = 0o644


def render_tree_script(nodes: list[TreeNode], variable: str = "tree") -> str:
    """``var tree = [...]`` for the page shell to load before the panel script."""
    return f"var {variable} = {dump_tree(nodes)}"


def render_search_index_module(index: SearchIndex) -> str:
    """ES module exporting the records by default and the name index by name."""
    return (
        f"export default {index.dump_records()};\n"
        f"export const nameIndex = {index.dump_name_index()};\n"
    )


def write_artifact(path: Path, content: str) -> Path:
    """Atomically replace one artifact, creating parent directories.

    Raises:
        OutputError: If the file cannot be written
    """
    tmp_path = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.chmod(tmp_path, ARTIFACT_MODE)
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise OutputError(path, e.strerror or str(e)) from e

    logger.info("Wrote %s (%d bytes)", path, len(content.encode("utf-8")))
    return path


class ArtifactWriter:
    """Writes both artifacts for a run, or only reports them on a dry run."""

    def __init__(
        self,
        tree_path: Path,
        search_index_path: Path,
        tree_variable: str = "tree",
        dry_run: bool = False,
    ):
        self.tree_path = tree_path
        self.search_index_path = search_index_path
        self.tree_variable = tree_variable
        self.dry_run = dry_run

    def write(self, tree: list[TreeNode], index: SearchIndex) -> list[Path]:
        """Render both artifacts, then write them. Returns the paths written."""
        outputs = [
            (self.search_index_path, render_search_index_module(index)),
            (self.tree_path, render_tree_script(tree, self.tree_variable)),
        ]

        if self.dry_run:
            for path, content in outputs:
                logger.info("Dry run: would write %s (%d bytes)", path, len(content))
            return []

        return [write_artifact(path, content) for path, content in outputs]
