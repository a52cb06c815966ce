"""JSON persistence for task snapshots.

The file holds a list of task objects. Loading into a registry re-inserts
every task in file order, so cycles and duplicate IDs are rejected exactly as
they would be for tasks created in code.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..engine.registry import TaskRegistry
from ..models.task import Priority, Task, TaskStatus
from ..policies.base import RankingPolicy
from ..utils.datetime_utils import parse_datetime

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
TaskEntry = Dict[str, Any]


def task_to_dict(task: Task) -> TaskEntry:
    return {
        'task_id': task.task_id,
        'title': task.title,
        'description': task.description,
        'priority': task.priority.name,
        'deadline': task.deadline.isoformat(),
        'estimated_hours': task.estimated_hours,
        'dependencies': list(task.dependencies),
        'status': task.status.value,
        'created_at': task.created_at.isoformat() if task.created_at else None,
    }


def _decode_priority(value: Any) -> Priority:
    if isinstance(value, str):
        if value.strip().isdigit():
            return Priority.from_value(int(value))
        return Priority.from_name(value)
    return Priority.from_value(value)


def task_from_dict(raw: TaskEntry) -> Task:
    """Build a task from its JSON form.

    Priority may be stored as a name (``"HIGH"``) or a number (``3``).

    Raises:
        InvalidPriority: if the priority cannot be decoded.
        KeyError: if a required field is missing.
        ValueError: if status or timestamps are malformed.
    """
    return Task(
        task_id=str(raw['task_id']),
        title=str(raw['title']),
        description=raw.get('description', ""),
        priority=_decode_priority(raw['priority']),
        deadline=parse_datetime(raw['deadline']),
        estimated_hours=float(raw.get('estimated_hours', 0.0)),
        dependencies=[str(dep_id) for dep_id in raw.get('dependencies', [])],
        status=TaskStatus(raw.get('status', TaskStatus.PENDING.value)),
        created_at=parse_datetime(raw.get('created_at')),
    )


def save_tasks(path: PathLike, tasks: Iterable[Task]) -> Path:
    """Persist tasks to disk (pretty-printed)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = [task_to_dict(task) for task in tasks]
    with open(path, 'w') as f:
        json.dump(data, f, indent=2)
    logger.debug("Saved %d tasks to %s", len(data), path)
    return path


def load_tasks(path: PathLike) -> List[Task]:
    """Load tasks from a JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Tasks file not found: {path}")

    with open(path, 'r') as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Tasks file must contain a list of tasks: {path}")

    return [task_from_dict(raw) for raw in data]


def load_registry(
    path: PathLike,
    policy: Optional[RankingPolicy] = None,
    config: Optional[dict] = None,
) -> TaskRegistry:
    """Load a tasks file into a new registry, validating every insertion."""
    registry = TaskRegistry(policy=policy, config=config)
    for task in load_tasks(path):
        registry.insert(task)
    logger.info("Loaded %d tasks from %s", len(registry), path)
    return registry
