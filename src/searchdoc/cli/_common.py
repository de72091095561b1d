"""Shared CLI helpers."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import GeneratorConfig, load_config
from ..entities import EntityCollection, load_manifest
from ..exceptions import SearchdocError
from ..logging_config import setup_logging

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    output: Optional[Path] = None,
    dry_run: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> GeneratorConfig:
    """Build settings from CLI options."""
    overrides = {}
    if output is not None:
        overrides["output_dir"] = str(output)
    if dry_run:
        overrides["dry_run"] = True
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)


def start_run(
    config: Optional[Path] = None,
    output: Optional[Path] = None,
    dry_run: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> GeneratorConfig:
    """Resolve settings, then configure logging from their verbosity."""
    settings = resolve_config(
        config=config, output=output, dry_run=dry_run, verbose=verbose, quiet=quiet
    )
    setup_logging(settings.verbosity, log_file=settings.log_file)
    return settings


def load_collection(manifest: Path) -> EntityCollection:
    return load_manifest(manifest)


def fail(logger: logging.Logger, error: Exception) -> typer.Exit:
    """Report an error the way every command does and return the exit to raise."""
    exit_code = 1
    if isinstance(error, SearchdocError):
        logger.debug("Run aborted", exc_info=True)
        exit_code = error.exit_code
    else:
        logger.exception("Unexpected failure")
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    return typer.Exit(exit_code)
