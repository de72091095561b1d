"""Tree command: preview the navigation tree in the terminal."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.tree import Tree

from ..logging_config import get_logger
from ..tree.builder import TreeBuilder
from ..tree.models import ClassNode, FileLeaf, TreeNode
from . import app
from ._common import console, fail, load_collection, start_run


def _label(node: TreeNode) -> str:
    if isinstance(node, ClassNode):
        text = f"[bold]{escape(node.name)}[/bold]{escape(node.suffix)}"
        if node.path:
            text += f" [dim]{escape(node.path)}[/dim]"
        return text
    if isinstance(node, FileLeaf):
        return f"{escape(node.name)} [dim]{escape(node.url)}[/dim]"
    return f"[cyan]{escape(node.label)}/[/cyan]"


def _attach(parent: Tree, nodes: list[TreeNode]) -> None:
    for node in nodes:
        branch = parent.add(_label(node))
        _attach(branch, getattr(node, "children", []))


@app.command()
def tree(
    manifest: Path = typer.Argument(
        ...,
        help="Entity manifest (JSON) produced by the extractor",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
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
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """Print the navigation tree the panel will show."""
    logger = get_logger("cli.tree")

    try:
        settings = start_run(config=config, verbose=verbose)
        collection = load_collection(manifest)
        nodes = TreeBuilder(files_label=settings.files_label).build(
            collection.classes, collection.files
        )
    except typer.Exit:
        raise
    except Exception as e:
        raise fail(logger, e)

    root = Tree(f"[bold cyan]{escape(settings.title)}[/bold cyan]")
    _attach(root, nodes)
    console.print(root)
