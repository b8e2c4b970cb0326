"""Global configuration storage for taskview.

Stores the task view state (e.g. whether tasks are grouped) in
~/.taskview/config.json
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

from taskview.domain.shared.result import Err, Result
from taskview.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)


class TaskViewState(BaseModel):
    """Persisted preferences of the task view."""

    group_tasks: bool = False


def get_config_dir() -> Path:
    """Get the taskview config directory."""
    config_dir = Path.home() / ".taskview"
    config_dir.mkdir(exist_ok=True)
    return config_dir


def get_view_state(storage: JsonStorage | None = None) -> TaskViewState:
    """Load the task view state, falling back to defaults."""
    config_file = get_config_dir() / "config.json"
    if not config_file.exists():
        return TaskViewState()

    result = (storage or JsonStorage()).load_json(config_file)
    if isinstance(result, Err):
        logger.warning(f"Ignoring view state: {result.error}")
        return TaskViewState()
    try:
        return TaskViewState(**result.value)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid view state in {config_file}: {e}")
        return TaskViewState()


def save_view_state(state: TaskViewState, storage: JsonStorage | None = None) -> Result[None, str]:
    """Save the task view state.

    Returns:
        Ok(None) if successful, Err(str) with error message if failed.
    """
    config_file = get_config_dir() / "config.json"
    return (storage or JsonStorage()).save_json(config_file, state.model_dump())
