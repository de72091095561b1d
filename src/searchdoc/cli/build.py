"""Build command: write the navigation tree and search index."""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..generator import Generator
from ..logging_config import get_logger
from ..tree.models import count_nodes
from . import app
from ._common import console, fail, load_collection, start_run


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Build navigation and search data for a static documentation site.

    [bold cyan]Examples:[/bold cyan]

      searchdoc build manifest.json -o doc

      searchdoc tree manifest.json

      searchdoc search manifest.json "Base#run"
    """
    if ctx.invoked_subcommand is not None:
        return

    from .. import __version__

    if version:
        console.print(f"[bold cyan]searchdoc[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    typer.echo(ctx.get_help())


@app.command()
def build(
    manifest: Path = typer.Argument(
        ...,
        help="Entity manifest (JSON) produced by the extractor",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory (default: doc)",
        file_okay=False,
        dir_okay=True,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Build everything but write nothing",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress logging",
    ),
):
    """
    Write [bold]panel/tree.js[/bold] and [bold]js/search-index.js[/bold] for a manifest.

    Nothing is written if the manifest breaks the entity contract.
    """
    logger = get_logger("cli.build")

    try:
        settings = start_run(
            config=config, output=output, dry_run=dry_run, verbose=verbose, quiet=quiet
        )
        collection = load_collection(manifest)
        result = Generator(settings).generate(collection.classes, collection.files)
    except typer.Exit:
        raise
    except Exception as e:
        raise fail(logger, e)

    table = Table(title=settings.title, show_header=False)
    table.add_column("Item", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Classes/modules", str(len(collection.classes)))
    table.add_row("Files", str(len(collection.files)))
    table.add_row("Tree nodes", str(count_nodes(result.tree)))
    table.add_row("Search records", str(len(result.search_index)))
    console.print(table)

    if settings.dry_run:
        console.print("[yellow]Dry run:[/yellow] no files written")
    for path in result.written:
        console.print(f"Wrote [bold green]{path}[/bold green]")
