"""Deadline-then-priority ranking policy."""

from datetime import datetime
from typing import List

from ..models.task import Task
from .base import RankingPolicy


class DeadlinePolicy(RankingPolicy):
    """Earliest deadline first, then priority, then creation time."""

    def order_tasks(self, tasks: List[Task], now: datetime) -> List[Task]:
        """Order tasks by deadline, then priority, then created_at."""

        def sort_key(task: Task):
            # Higher priority first, so negate
            return (task.deadline, -task.priority.value, task.created_at)

        return sorted(tasks, key=sort_key)

    def get_policy_name(self) -> str:
        """Return policy name."""
        return "DEADLINE"
