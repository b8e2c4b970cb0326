"""Task tree CLI commands.

Commands for rendering the task tree of a workspace snapshot.
"""

from pathlib import Path
from typing import Optional

import typer

from taskview.application import TreeProjection, rebuild_tree, walk_tree
from taskview.domain.shared.result import Err
from taskview.domain.tree import ProjectMatcher
from taskview.global_config import get_view_state
from taskview.infrastructure import InMemoryWorkspace, SnapshotRepository
from taskview.interfaces.cli.common import format_element, print_error, print_info

app = typer.Typer(help="Task tree commands")


# =============================================================================
# Commands
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
    """Print the task tree of a workspace snapshot.

    Example:
        taskview tree show workspace.json --grouped
    """
    result = SnapshotRepository().load(snapshot)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)

    workspace_snapshot = result.value
    view_state = get_view_state()
    if grouped is not None:
        view_state = view_state.model_copy(update={"group_tasks": grouped})

    workspace = InMemoryWorkspace(workspace_snapshot.workspace)
    projection = TreeProjection(view_state, ProjectMatcher(workspace, workspace))

    rebuilt = rebuild_tree(projection, workspace_snapshot.to_content())
    if isinstance(rebuilt, Err):
        print_error(rebuilt.error.reason)
        raise typer.Exit(1)

    elements, event = rebuilt.value
    if not elements:
        print_info("No projects in snapshot")
        return

    for depth, element in walk_tree(projection, elements):
        typer.echo(f"{'  ' * depth}{format_element(element)}")
    typer.echo("")
    typer.echo(f"{event.project_count} projects, {event.faulty_count} faulty")
