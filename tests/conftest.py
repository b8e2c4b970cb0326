"""Shared fixtures for taskview tests."""

from pathlib import Path

import pytest

from taskview.domain.build import BuildProject, BuildTask
from taskview.domain.tree import ProjectMatcher
from taskview.global_config import TaskViewState
from taskview.infrastructure import InMemoryWorkspace, WorkspaceEntry


def make_project(
    name: str,
    path: str,
    project_dir: str,
    root_dir: str,
    tasks: list[BuildTask] | None = None,
    children: list[BuildProject] | None = None,
) -> BuildProject:
    return BuildProject(
        name=name,
        path=path,
        project_dir=Path(project_dir),
        root_dir=Path(root_dir),
        tasks=tasks or [],
        children=children or [],
    )


@pytest.fixture
def multi_project_build() -> BuildProject:
    """Build rooted at /repo with :lib and :lib:core subprojects."""
    core = make_project(
        "core",
        ":lib:core",
        "/repo/lib/core",
        "/repo",
        tasks=[
            BuildTask(name="build", path=":lib:core:build", group="build"),
            BuildTask(name="test", path=":lib:core:test", group="verification"),
        ],
    )
    lib = make_project(
        "lib",
        ":lib",
        "/repo/lib",
        "/repo",
        tasks=[
            BuildTask(name="test", path=":lib:test", group="verification"),
            BuildTask(name="compile", path=":lib:compile", public=False),
        ],
        children=[core],
    )
    return make_project(
        "app",
        ":",
        "/repo",
        "/repo",
        tasks=[BuildTask(name="build", path=":build", group="build")],
        children=[lib],
    )


@pytest.fixture
def workspace() -> InMemoryWorkspace:
    return InMemoryWorkspace(
        [
            WorkspaceEntry(name="app", location=Path("/repo"), root_project_dir=Path("/repo")),
            WorkspaceEntry(name="lib", location=Path("/repo/lib"), root_project_dir=Path("/repo")),
            WorkspaceEntry(name="broken", location=Path("/broken"), root_project_dir=Path("/broken")),
        ]
    )


@pytest.fixture
def matcher(workspace: InMemoryWorkspace) -> ProjectMatcher:
    return ProjectMatcher(workspace, workspace)


@pytest.fixture
def view_state() -> TaskViewState:
    return TaskViewState(group_tasks=False)
