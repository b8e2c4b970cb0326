"""Tests for matching build projects to workspace projects."""

from pathlib import Path

from taskview.domain.shared import Ok, is_err, is_ok
from taskview.domain.tree import ProjectMatcher
from taskview.domain.workspace import WorkspaceProject
from taskview.infrastructure import InMemoryWorkspace, WorkspaceEntry

from tests.conftest import make_project


def matcher_for(*entries: WorkspaceEntry) -> ProjectMatcher:
    workspace = InMemoryWorkspace(entries)
    return ProjectMatcher(workspace, workspace)


class TestProjectMatcher:
    """Tests for ProjectMatcher."""

    def test_included_build_member(self) -> None:
        """Config root differs from the model root: member of an included build."""
        matcher = matcher_for(
            WorkspaceEntry(name="lib", location=Path("/repo/lib"), root_project_dir=Path("/repo"))
        )
        project = make_project("lib", ":", "/repo/lib", "/repo/lib")

        match = matcher.match(project)

        assert match.workspace_project == Ok(WorkspaceProject("lib", Path("/repo/lib")))
        assert match.included is True

    def test_project_anchoring_the_build_is_not_included(self) -> None:
        matcher = matcher_for(
            WorkspaceEntry(name="lib", location=Path("/repo/lib"), root_project_dir=Path("/repo/lib"))
        )
        project = make_project("lib", ":", "/repo/lib", "/repo/lib")

        match = matcher.match(project)

        assert isinstance(match.workspace_project, Ok)
        assert match.included is False

    def test_unmatched_project(self) -> None:
        match = matcher_for().match(make_project("ghost", ":", "/ghost", "/ghost"))
        assert is_err(match.workspace_project)
        assert not is_ok(match.workspace_project)
        assert match.included is False

    def test_missing_build_nature_is_not_included(self) -> None:
        matcher = matcher_for(
            WorkspaceEntry(
                name="lib",
                location=Path("/repo/lib"),
                build_nature=False,
                root_project_dir=Path("/repo"),
            )
        )
        match = matcher.match(make_project("lib", ":", "/repo/lib", "/repo/lib"))
        assert isinstance(match.workspace_project, Ok)
        assert match.included is False

    def test_missing_configuration_is_not_included(self) -> None:
        matcher = matcher_for(WorkspaceEntry(name="lib", location=Path("/repo/lib")))
        match = matcher.match(make_project("lib", ":", "/repo/lib", "/repo/lib"))
        assert isinstance(match.workspace_project, Ok)
        assert match.included is False

    def test_duplicate_names_first_registered_wins(self) -> None:
        matcher = matcher_for(
            WorkspaceEntry(name="lib", location=Path("/one"), root_project_dir=Path("/x")),
            WorkspaceEntry(name="lib", location=Path("/two"), root_project_dir=Path("/two")),
        )
        match = matcher.match(make_project("lib", ":", "/two", "/two"))
        assert match.workspace_project == Ok(WorkspaceProject("lib", Path("/one")))
        assert match.included is True
