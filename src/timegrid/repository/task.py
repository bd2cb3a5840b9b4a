# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Any, Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from timegrid.model.timeline import TaskDates

logger = logging.getLogger(__name__)

_FIELD_ALIASES = {
    "start_date": ("start_date", "startDate", "start"),
    "end_date": ("end_date", "endDate", "end"),
}


class TaskFileError(ValueError):
    """Raised when a task file does not hold a mapping of tasks."""


def _date_value(raw: dict[str, Any], field: str) -> Optional[str]:
    for key in _FIELD_ALIASES[field]:
        if raw.get(key) is not None:
            # YAML turns unquoted dates into date objects; keep them as text
            return str(raw[key])
    return None


def load_tasks(path: Path) -> dict[str, TaskDates]:
    """
    Read task date ranges from a YAML file.

    The file holds a mapping of task id to `start_date` / `end_date`, either at
    the top level or under a `tasks` key. Entries that are not mappings are
    skipped. Dates are left as strings; they are parsed by the layout engine,
    which ignores values it cannot read.

    Args:
        path: Path to the YAML file

    Returns:
        Mapping of task id to its date strings

    Raises:
        TaskFileError: If the file does not contain a mapping of tasks
    """
    data = load(path.read_text(), Loader=Loader)
    if isinstance(data, dict) and isinstance(data.get("tasks"), dict):
        data = data["tasks"]
    if not isinstance(data, dict):
        raise TaskFileError(f"{path} does not contain a mapping of tasks")

    tasks: dict[str, TaskDates] = {}
    for task_id, raw in data.items():
        if not isinstance(raw, dict):
            logger.debug("skipping task %s: not a mapping", task_id)
            continue
        tasks[str(task_id)] = {
            "start_date": _date_value(raw, "start_date") or "",
            "end_date": _date_value(raw, "end_date") or "",
        }
    return tasks
