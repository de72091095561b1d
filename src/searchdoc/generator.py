"""Generation run: validate the collection, build both artifacts, write them."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Iterable, Optional

from .config import GeneratorConfig
from .entities.models import DocumentableEntity
from .entities.validation import validate_collection
from .exceptions import MainPageNotFoundError
from .output.writer import ArtifactWriter
from .search.builder import SearchIndexBuilder
from .search.models import SearchIndex
from .tree.builder import TreeBuilder
from .tree.models import TreeNode

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Everything one run produced."""

    tree: list[TreeNode]
    search_index: SearchIndex
    main_page: Optional[DocumentableEntity] = None
    written: list[Path] = field(default_factory=list)


class Generator:
    """Builds the navigation tree and search index for a documentation site.

    The whole collection must be resolved before ``generate`` is called.
    Nothing is written until both artifacts exist in memory; any
    precondition violation aborts the run before the first write.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.tree_builder = TreeBuilder(files_label=self.config.files_label)
        self.search_index_builder = SearchIndexBuilder()
        self.writer = ArtifactWriter(
            tree_path=self.config.tree_path,
            search_index_path=self.config.search_index_path,
            tree_variable=self.config.tree_variable,
            dry_run=self.config.dry_run,
        )

    def generate(
        self,
        classes: Iterable[DocumentableEntity],
        files: Iterable[DocumentableEntity] = (),
    ) -> GenerationResult:
        # Main page falls back to the first file in the order supplied
        supplied_files = list(files)
        files = sorted(supplied_files, key=lambda e: e.full_name)
        classes = sorted(classes, key=lambda e: e.full_name)
        validate_collection(classes, files)

        main_page = self.resolve_main_page(supplied_files)

        logger.info(
            "Generating %s from %d classes/modules and %d files",
            self.config.title,
            len(classes),
            len(files),
        )
        search_index = self.search_index_builder.build(classes)
        tree = self.tree_builder.build(classes, files)

        written = self.writer.write(tree, search_index)
        return GenerationResult(
            tree=tree, search_index=search_index, main_page=main_page, written=written
        )

    def resolve_main_page(
        self, files: Iterable[DocumentableEntity]
    ) -> Optional[DocumentableEntity]:
        """Find the file rendered as the site's index page.

        Uses ``config.main_page`` when set, otherwise the first file. The
        returned entity is a copy with an empty ``path``: the index page is
        served from the site root.

        Raises:
            MainPageNotFoundError: If the main page is not among the files
        """
        files = list(files)
        wanted = self.config.main_page
        if wanted is None:
            if not files:
                return None
            match = files[0]
        else:
            target = PurePosixPath(wanted)
            match = next((f for f in files if PurePosixPath(f.relative_name) == target), None)
            if match is None:
                raise MainPageNotFoundError(wanted)

        logger.debug("Main page is %s", match.relative_name)
        return dataclasses.replace(match, path="")
