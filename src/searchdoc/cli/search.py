"""Search command: query the index the way the browser would."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..logging_config import get_logger
from ..search.builder import SearchIndexBuilder
from ..search.models import ClassRecord
from ..search.query import search as run_search
from . import app
from ._common import console, fail, load_collection, start_run

_TIERS = {0: "exact", 1: "prefix", 2: "substring", 3: "fuzzy"}


@app.command()
def search(
    manifest: Path = typer.Argument(
        ...,
        help="Entity manifest (JSON) produced by the extractor",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    query: str = typer.Argument(..., help="Search query, e.g. 'Base#run' or 'run'"),
    limit: int = typer.Option(10, "--limit", "-n", help="Maximum results", min=1),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """Rank index records against a query."""
    logger = get_logger("cli.search")

    try:
        start_run(config=config, verbose=verbose)
        collection = load_collection(manifest)
        index = SearchIndexBuilder().build(collection.classes)
    except typer.Exit:
        raise
    except Exception as e:
        raise fail(logger, e)

    matches = run_search(index, query, limit=limit)
    if not matches:
        console.print(f"[yellow]No results for[/yellow] {escape(query)}")
        raise typer.Exit(0)

    table = Table(title=f"Results for {escape(query)}")
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Match", style="dim")
    table.add_column("URL", style="cyan")
    table.add_column("Summary")
    for match in matches:
        record = match.record
        if isinstance(record, ClassRecord):
            name, summary = record.full_name, ""
        else:
            name, summary = f"{record.owning_full_name}#{record.method_name}", record.summary
        table.add_row(
            escape(name), record.type, _TIERS[match.tier], escape(record.url), escape(summary)
        )
    console.print(table)
