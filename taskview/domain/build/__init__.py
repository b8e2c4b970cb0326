"""Build domain: the build tool's projects, tasks and task selectors."""

from taskview.domain.build.invocations import (
    BuildInvocations,
    InvocationIndex,
    InvocationSource,
    ProjectTask,
    TaskSelector,
    build_invocation_index,
)
from taskview.domain.build.models import BuildProject, BuildTask

__all__ = [
    # Models
    "BuildProject",
    "BuildTask",
    # Invocations
    "ProjectTask",
    "TaskSelector",
    "BuildInvocations",
    "InvocationIndex",
    "InvocationSource",
    "build_invocation_index",
]
