"""View state CLI commands."""

from enum import Enum

import typer

from taskview.domain.shared.result import Err
from taskview.global_config import get_view_state, save_view_state
from taskview.interfaces.cli.common import print_error, print_success

app = typer.Typer(help="Task view preferences")


class Toggle(str, Enum):
    ON = "on"
    OFF = "off"


@app.command("group")
def group(
    mode: Toggle = typer.Argument(..., help="'on' to group tasks, 'off' to list them flat"),
) -> None:
    """Set whether tasks are grouped by task group.

    Example:
        taskview view group on
    """
    enabled = mode == Toggle.ON
    result = save_view_state(get_view_state().model_copy(update={"group_tasks": enabled}))
    if isinstance(result, Err):
        print_error(f"Failed to save view state: {result.error}")
        raise typer.Exit(1)
    print_success(f"Task grouping {'enabled' if enabled else 'disabled'}")


@app.command("status")
def status() -> None:
    """Show the saved view state."""
    state = get_view_state()
    typer.echo(f"group_tasks: {state.group_tasks}")
