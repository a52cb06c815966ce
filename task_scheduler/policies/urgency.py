"""Urgency-score ranking policy."""

from datetime import datetime
from typing import List, Optional

from ..models.task import DEADLINE_HORIZON_HOURS, PRIORITY_WEIGHT, Task
from .base import RankingPolicy


class UrgencyPolicy(RankingPolicy):
    """Rank tasks by urgency score, highest first."""

    def __init__(self, config: Optional[dict] = None):
        """Initialize urgency policy."""
        super().__init__(config)
        scoring = self.config.get('scoring', {})
        self.priority_weight = scoring.get('priority_weight', PRIORITY_WEIGHT)
        self.horizon_hours = scoring.get('deadline_horizon_hours', DEADLINE_HORIZON_HOURS)

    def score(self, task: Task, now: datetime) -> float:
        """Compute the urgency score of a task with the configured weights."""
        return task.urgency_score(now, self.priority_weight, self.horizon_hours)

    def order_tasks(self, tasks: List[Task], now: datetime) -> List[Task]:
        """Order tasks by urgency score (highest first), keeping input order on ties."""
        scores = {task.task_id: self.score(task, now) for task in tasks}
        return sorted(tasks, key=lambda task: -scores[task.task_id])

    def get_policy_name(self) -> str:
        """Return policy name."""
        return "URGENCY"
