"""CLI command groups for taskview.

Command groups:
- tree: Render the task tree of a workspace snapshot
- view: Persisted view preferences

Each command group is a Typer app registered with the main app.
"""

from taskview.interfaces.cli.commands import tree, view

__all__ = ["tree", "view"]
