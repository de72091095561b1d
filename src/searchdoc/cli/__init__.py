"""CLI entry point: registers all subcommands."""

import typer

app = typer.Typer(
    name="searchdoc",
    help="searchdoc - navigation tree and search index builder for API docs",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .build import main as _main_callback  # noqa: F401, E402
from .build import build as _build  # noqa: F401, E402
from .tree import tree as _tree  # noqa: F401, E402
from .search import search as _search  # noqa: F401, E402
