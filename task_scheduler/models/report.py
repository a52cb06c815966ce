"""Statistics snapshot of a task registry."""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict


@dataclass
class TaskStatistics:
    """Aggregate counts and scores for the tasks in a registry."""

    generated_at: datetime
    total: int
    completed: int
    in_progress: int
    pending: int
    blocked: int
    overdue: int
    completion_rate: float
    average_urgency: float
    priority_distribution: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary for JSON export."""
        return asdict(self)

    def to_human_readable(self) -> str:
        """Generate human-readable summary."""
        lines = [
            "=" * 60,
            "Task Statistics",
            "=" * 60,
            f"{'Total tasks:':<16}{self.total}",
            f"{'Completed:':<16}{self.completed}",
            f"{'In progress:':<16}{self.in_progress}",
            f"{'Pending:':<16}{self.pending}",
            f"{'Blocked:':<16}{self.blocked}",
            f"{'Overdue:':<16}{self.overdue}",
            f"{'Completion:':<16}{self.completion_rate:.1f}%",
            f"{'Avg urgency:':<16}{self.average_urgency:.2f}",
            "",
            "Priority distribution:",
        ]

        for name, count in self.priority_distribution.items():
            lines.append(f"  {name:<10}: {count}")

        lines.append("=" * 60)

        return "\n".join(lines)
