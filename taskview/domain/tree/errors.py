"""Errors raised while deriving the task tree."""

from taskview.domain.types import BuildPath


class TaskViewError(Exception):
    """Base class for task view errors."""


class MissingInvocationsError(TaskViewError):
    """A project path has no entry in its build's invocation index.

    The build model and the invocation source disagree, so the tree
    cannot be built correctly. Aborts the current rebuild.
    """

    def __init__(self, project_name: str, path: BuildPath) -> None:
        super().__init__(f"No invocations found for project '{project_name}' ({path})")
        self.project_name = project_name
        self.path = path
