"""CLI interface for taskview using Typer.

Usage:
    taskview show workspace.json      # Print the task tree
    taskview view group on            # Group tasks by task group

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups (tree, view)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from taskview import __version__
from taskview.interfaces.cli.commands import tree, view

app = typer.Typer(
    name="taskview",
    help="Task tree of build projects",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"taskview version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """taskview - browse the tasks of build projects as a tree."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(tree.app, name="tree")
app.add_typer(view.app, name="view")


# =============================================================================
# Top-Level Shortcuts for Common Commands
# =============================================================================


@app.command("show")
def show(
    snapshot: Path = typer.Argument(..., help="Workspace snapshot JSON file"),
    grouped: Optional[bool] = typer.Option(
        None,
        "--grouped/--flat",
        help="Group tasks by task group (default: saved view state)",
    ),
) -> None:
    """Print the task tree (shortcut for 'tree show')."""
    tree.show(snapshot=snapshot, grouped=grouped)


__all__ = ["app"]
