"""Task registry: owns the task set and answers scheduling queries."""

import logging
import threading
from datetime import datetime
from typing import Dict, Iterator, List, Optional

from ..models.errors import CircularDependency, DuplicateId, TaskNotFound
from ..models.report import TaskStatistics
from ..models.task import Priority, Task, TaskStatus
from ..policies.base import RankingPolicy
from ..policies.urgency import UrgencyPolicy
from .graph import topological_order, unresolved_dependencies, would_create_cycle

logger = logging.getLogger(__name__)


DEFAULT_RECOMMENDED_LIMIT = 5


class TaskRegistry:
    """Owns the collection of tasks and is the only writer of task status.

    Tasks are kept in insertion order. Every public method runs under a single
    lock so queries always see a consistent dependency graph, and list results
    are fresh copies that callers may keep.
    """

    def __init__(self, policy: Optional[RankingPolicy] = None, config: Optional[dict] = None):
        """Initialize registry with a ranking policy and configuration."""
        self.config = config or {}
        self.scorer = UrgencyPolicy(self.config)
        self.policy = policy or self.scorer
        self.recommended_limit = self.config.get('display', {}).get(
            'recommended_limit', DEFAULT_RECOMMENDED_LIMIT
        )
        self._tasks: Dict[str, Task] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(self.all_tasks())

    # -------------------- mutation --------------------
    def insert(self, task: Task) -> None:
        """Register a new task.

        Raises:
            DuplicateId: if a task with the same ID is already registered.
            CircularDependency: if the task's dependencies would close a cycle.
                The registry is left unchanged.
        """
        with self._lock:
            if task.task_id in self._tasks:
                raise DuplicateId(f"Task ID already registered: {task.task_id}", task_id=task.task_id)

            if would_create_cycle(task, self._tasks.get):
                raise CircularDependency(
                    f"Circular dependency detected for task {task.task_id}", task_id=task.task_id
                )

            self._tasks[task.task_id] = task
            logger.debug("Added task %s (%s)", task.task_id, task.title)

    def update_status(self, task_id: str, status: TaskStatus) -> None:
        """Set the status of a task. Any transition is allowed.

        Raises:
            TaskNotFound: if no task has the given ID.
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFound(f"Task not found: {task_id}", task_id=task_id)

            previous = task.status
            task.status = status
            logger.debug("Task %s status %s -> %s", task_id, previous.name, status.name)

    # -------------------- lookup --------------------
    def find_by_id(self, task_id: str) -> Optional[Task]:
        with self._lock:
            return self._tasks.get(task_id)

    def all_tasks(self) -> List[Task]:
        with self._lock:
            return list(self._tasks.values())

    def tasks_by_priority(self, priority: Priority) -> List[Task]:
        with self._lock:
            return [task for task in self._tasks.values() if task.priority == priority]

    def overdue_tasks(self, now: datetime) -> List[Task]:
        with self._lock:
            return [task for task in self._tasks.values() if task.is_overdue(now)]

    # -------------------- scheduling queries --------------------
    def is_executable(self, task: Task) -> bool:
        """A task is executable when it is pending and every dependency is completed.

        A dependency ID that is not registered blocks execution.
        """
        with self._lock:
            return (
                task.status == TaskStatus.PENDING
                and not unresolved_dependencies(task, self._tasks.get)
            )

    def executable_tasks(self, now: datetime) -> List[Task]:
        """Get executable tasks by descending urgency score, insertion order on ties.

        Always ranked by urgency, whatever listing policy the registry uses.
        """
        with self._lock:
            executable = [task for task in self._tasks.values() if self.is_executable(task)]
            return self.scorer.order_tasks(executable, now)

    def recommended_tasks(self, now: datetime, limit: Optional[int] = None) -> List[Task]:
        """Get the top executable tasks to work on next."""
        limit = self.recommended_limit if limit is None else limit
        return self.executable_tasks(now)[:limit]

    def ranked_tasks(self, now: datetime) -> List[Task]:
        """Get every task ranked by the registry's policy."""
        with self._lock:
            return self.policy.order_tasks(list(self._tasks.values()), now)

    def execution_order(self, now: datetime) -> List[Task]:
        """Get all incomplete tasks in dependency order (dependencies first).

        ``now`` is accepted for interface symmetry with the other queries; the
        order depends only on the graph and task status.

        Raises:
            CircularDependency: if the stored graph contains a cycle.
        """
        with self._lock:
            return topological_order(self._tasks.values(), self._tasks.get)

    def statistics(self, now: datetime) -> TaskStatistics:
        """Compute aggregate statistics for the current task set."""
        with self._lock:
            tasks = list(self._tasks.values())
            total = len(tasks)
            status_counts = {status: 0 for status in TaskStatus}
            for task in tasks:
                status_counts[task.status] += 1

            completed = status_counts[TaskStatus.COMPLETED]
            scores = [self.scorer.score(task, now) for task in tasks]

            return TaskStatistics(
                generated_at=now,
                total=total,
                completed=completed,
                in_progress=status_counts[TaskStatus.IN_PROGRESS],
                pending=status_counts[TaskStatus.PENDING],
                blocked=status_counts[TaskStatus.BLOCKED],
                overdue=sum(1 for task in tasks if task.is_overdue(now)),
                completion_rate=(completed / total * 100) if total > 0 else 0.0,
                average_urgency=(sum(scores) / total) if total > 0 else 0.0,
                priority_distribution={
                    priority.name: sum(1 for task in tasks if task.priority == priority)
                    for priority in Priority
                },
            )

