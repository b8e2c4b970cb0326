"""Tests for the tree projection."""

from pathlib import Path

import pytest

from taskview.application import TaskViewContent, TreeProjection, rebuild_tree, walk_tree
from taskview.domain.build import (
    BuildInvocations,
    BuildProject,
    InvocationIndex,
    ProjectTask,
    TaskSelector,
)
from taskview.domain.shared import Err, Ok
from taskview.domain.tree import (
    FaultyProjectNode,
    ProjectMatcher,
    ProjectNode,
    ProjectTaskNode,
    TaskGroupNode,
    TaskSelectorNode,
    TreeRebuilt,
)
from taskview.domain.types import BuildPath
from taskview.domain.workspace import WorkspaceProject
from taskview.global_config import TaskViewState

from tests.conftest import make_project


def p(path: str) -> BuildPath:
    return BuildPath.from_string(path)


BUILD_TASK = ProjectTask(name="build", path=p(":build"), project_path=p(":"), group="build")
TEST_SELECTOR = TaskSelector.create(
    name="test",
    description="",
    project_path=p(":b"),
    public=True,
    group="verification",
    selected_task_paths=[p(":b:test")],
)


def example_source(root: BuildProject) -> InvocationIndex:
    return InvocationIndex(
        {
            p(":"): BuildInvocations(project_tasks=(BUILD_TASK,)),
            p(":b"): BuildInvocations(task_selectors=(TEST_SELECTOR,)),
        }
    )


@pytest.fixture
def example_build() -> BuildProject:
    """Project A (root, /a) with child B (/a/b)."""
    return make_project("A", ":", "/a", "/a", children=[make_project("B", ":b", "/a/b", "/a")])


@pytest.fixture
def projection(view_state: TaskViewState, matcher: ProjectMatcher) -> TreeProjection:
    return TreeProjection(view_state, matcher, example_source)


class TestElements:
    """Tests for the top level of the tree."""

    def test_example_tree(self, projection: TreeProjection, example_build: BuildProject) -> None:
        elements = projection.elements(TaskViewContent(projects=[example_build]))

        assert [node.name for node in elements] == ["A"]
        a, b = projection.forest.project_nodes()
        assert projection.parent(b) == a
        assert projection.parent(a) is None

    def test_faulty_projects_at_top_level(
        self, projection: TreeProjection, example_build: BuildProject
    ) -> None:
        broken = WorkspaceProject("broken", Path("/broken"))
        elements = projection.elements(
            TaskViewContent(projects=[example_build], faulty_projects=[broken])
        )

        assert elements[-1] == FaultyProjectNode(broken)
        assert projection.has_children(elements[-1]) is False
        assert projection.children(elements[-1]) == []
        assert projection.parent(elements[-1]) is None

    def test_unsupported_input(self, projection: TreeProjection) -> None:
        assert projection.elements(object()) == []

    def test_lifecycle_no_ops(self, projection: TreeProjection, example_build: BuildProject) -> None:
        content = TaskViewContent(projects=[example_build])
        projection.elements(content)
        projection.input_changed(None, content)
        projection.dispose()
        assert len(projection.forest) == 2


class TestChildren:
    """Tests for children, has_children and parent."""

    def test_flat_children(self, projection: TreeProjection, example_build: BuildProject) -> None:
        projection.elements(TaskViewContent(projects=[example_build]))
        a, b = projection.forest.project_nodes()

        assert projection.children(a) == [ProjectTaskNode(a, BUILD_TASK)]
        assert projection.children(b) == [TaskSelectorNode(b, TEST_SELECTOR)]

    def test_child_projects_are_not_children(
        self, projection: TreeProjection, example_build: BuildProject
    ) -> None:
        projection.elements(TaskViewContent(projects=[example_build]))
        a, b = projection.forest.project_nodes()

        assert b not in projection.children(a)
        assert projection.child_projects(a) == [b]
        assert projection.child_projects(b) == []
        assert projection.child_projects(ProjectTaskNode(a, BUILD_TASK)) == []

    def test_grouped_children(self, matcher: ProjectMatcher, example_build: BuildProject) -> None:
        projection = TreeProjection(TaskViewState(group_tasks=True), matcher, example_source)
        projection.elements(TaskViewContent(projects=[example_build]))
        a, b = projection.forest.project_nodes()

        default, build = projection.children(a)

        assert default == TaskGroupNode(a, None)
        assert default.task_nodes == ()
        assert build == TaskGroupNode(a, "build")
        assert projection.children(build) == [ProjectTaskNode(a, BUILD_TASK)]
        assert projection.parent(build) == a

    def test_view_mode_read_on_every_call(
        self, view_state: TaskViewState, matcher: ProjectMatcher, example_build: BuildProject
    ) -> None:
        projection = TreeProjection(view_state, matcher, example_source)
        projection.elements(TaskViewContent(projects=[example_build]))
        a = projection.forest.project_nodes()[0]

        assert isinstance(projection.children(a)[-1], ProjectTaskNode)
        view_state.group_tasks = True
        assert isinstance(projection.children(a)[-1], TaskGroupNode)

    def test_has_children(self, projection: TreeProjection, example_build: BuildProject) -> None:
        projection.elements(TaskViewContent(projects=[example_build]))
        a, b = projection.forest.project_nodes()
        build = ProjectTaskNode(a, BUILD_TASK)

        assert projection.has_children(a) is True
        assert projection.has_children(build) is False
        assert projection.has_children(TaskSelectorNode(b, TEST_SELECTOR)) is False
        assert projection.has_children(TaskGroupNode(a, None)) is True

    def test_task_parent_is_owning_project(
        self, projection: TreeProjection, example_build: BuildProject
    ) -> None:
        projection.elements(TaskViewContent(projects=[example_build]))
        a, b = projection.forest.project_nodes()

        assert projection.parent(ProjectTaskNode(a, BUILD_TASK)) == a
        assert projection.parent(TaskSelectorNode(b, TEST_SELECTOR)) == b
        assert projection.parent("unknown") is None

    @pytest.mark.parametrize("grouped", [False, True])
    def test_walk_reaches_every_project_once(
        self,
        grouped: bool,
        matcher: ProjectMatcher,
        multi_project_build: BuildProject,
    ) -> None:
        projection = TreeProjection(TaskViewState(group_tasks=grouped), matcher)
        broken = WorkspaceProject("broken", Path("/broken"))
        elements = projection.elements(
            TaskViewContent(projects=[multi_project_build], faulty_projects=[broken])
        )

        walked = [element for _, element in walk_tree(projection, elements)]
        project_nodes = [e for e in walked if isinstance(e, ProjectNode)]
        faulty_nodes = [e for e in walked if isinstance(e, FaultyProjectNode)]

        assert len(project_nodes) == len(multi_project_build.walk())
        assert len(set(project_nodes)) == len(project_nodes)
        assert faulty_nodes == [FaultyProjectNode(broken)]
        for node in project_nodes:
            parent = projection.parent(node)
            if node.path.is_root:
                assert parent is None
            else:
                assert parent is not None and parent.path == node.path.parent()
        for element in walked:
            for child in projection.children(element):
                assert not isinstance(child, (FaultyProjectNode, ProjectNode))


class TestRebuildTree:
    """Tests for rebuild_tree."""

    def test_success(self, projection: TreeProjection, example_build: BuildProject) -> None:
        broken = WorkspaceProject("broken", Path("/broken"))
        result = rebuild_tree(
            projection, TaskViewContent(projects=[example_build], faulty_projects=[broken])
        )

        assert isinstance(result, Ok)
        elements, event = result.value
        assert isinstance(event, TreeRebuilt)
        assert event.project_count == 2
        assert event.faulty_count == 1
        assert len(elements) == 2

    def test_failure_keeps_previous_tree(
        self, projection: TreeProjection, example_build: BuildProject
    ) -> None:
        rebuild_tree(projection, TaskViewContent(projects=[example_build]))
        previous = projection.forest

        unknown = make_project("other", ":", "/other", "/other", children=[make_project("x", ":x", "/other/x", "/other")])
        result = rebuild_tree(projection, TaskViewContent(projects=[unknown]))

        assert isinstance(result, Err)
        assert ":x" in result.error.reason
        assert projection.forest is previous
