"""Shared utilities for taskview CLI commands.

- Formatted output helpers (error, success, info)
- Labels for tree elements
"""

import typer

from taskview.domain.shared.result import Ok
from taskview.domain.tree import (
    FaultyProjectNode,
    ProjectNode,
    ProjectTaskNode,
    TaskGroupNode,
    TaskSelectorNode,
    TreeElement,
)


def print_error(msg: str) -> None:
    """Print a formatted error message to stderr."""
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.CYAN))


def format_element(element: TreeElement) -> str:
    """Return a one-line label for a tree element.

    Args:
        element: Any node produced by the tree projection.

    Returns:
        Plain-text label, e.g. "lib (:lib) [included]"
    """
    match element:
        case ProjectNode():
            label = f"{element.name} ({element.path})"
            if element.included:
                label += " [included]"
            elif not isinstance(element.workspace_project, Ok):
                label += " [not in workspace]"
            return label
        case FaultyProjectNode():
            return typer.style(f"{element.name} [faulty]", fg=typer.colors.RED)
        case TaskGroupNode():
            return f"{element.label}/"
        case ProjectTaskNode(task=task):
            return f"{task.name} ({task.path})" if task.public else f"{task.name} ({task.path}) [private]"
        case TaskSelectorNode(selector=selector):
            paths = ", ".join(str(path) for path in selector.selected_task_paths)
            return f"{selector.name} -> {paths}"
        case _:
            return str(element)
