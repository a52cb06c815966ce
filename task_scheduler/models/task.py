"""Task, priority and status data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import Optional, Tuple

from ..utils.datetime_utils import hours_until
from .errors import InvalidPriority


PRIORITY_WEIGHT = 10
DEADLINE_HORIZON_HOURS = 100


class Priority(IntEnum):
    """Ordinal task priority (higher = more important)."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    URGENT = 4

    @classmethod
    def from_value(cls, value: int) -> "Priority":
        """Decode a numeric priority. Booleans and fractional values are rejected."""
        try:
            if isinstance(value, bool) or int(value) != value:
                raise ValueError(value)
            return cls(int(value))
        except (TypeError, ValueError, OverflowError):
            raise InvalidPriority(f"Invalid priority: {value!r}")

    @classmethod
    def from_name(cls, name: str) -> "Priority":
        """Decode a priority name such as ``"high"``."""
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise InvalidPriority(f"Invalid priority: {name!r}")


class TaskStatus(Enum):
    """Execution state of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"  # only ever set by callers


@dataclass
class Task:
    """A unit of work with a deadline and dependencies on other tasks.

    ``status`` is the only attribute that can change after construction, and it
    is changed through ``TaskRegistry.update_status``. Assigning any other
    field raises ``AttributeError``, and ``dependencies`` is stored as a tuple,
    so the dependency graph of a registered task cannot be edited in place.
    """

    task_id: str
    title: str
    priority: Priority
    deadline: datetime
    description: str = ""
    estimated_hours: float = 0.0
    dependencies: Tuple[str, ...] = ()
    status: TaskStatus = TaskStatus.PENDING
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Normalize priority and initialize default created_at."""
        if not isinstance(self.priority, Priority):
            self.priority = Priority.from_value(self.priority)
        if self.estimated_hours < 0:
            raise ValueError(f"estimated_hours must be non-negative: {self.estimated_hours}")
        self.dependencies = tuple(self.dependencies)
        if self.created_at is None:
            self.created_at = datetime.now()
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name, value):
        if name != "status" and getattr(self, "_frozen", False):
            raise AttributeError(f"Task.{name} is read-only after construction")
        super().__setattr__(name, value)

    def is_overdue(self, now: datetime) -> bool:
        return now > self.deadline and self.status != TaskStatus.COMPLETED

    def hours_until_deadline(self, now: datetime) -> int:
        """Whole hours left before the deadline, floored; negative when past."""
        return hours_until(now, self.deadline)

    def urgency_score(
        self,
        now: datetime,
        priority_weight: float = PRIORITY_WEIGHT,
        horizon_hours: float = DEADLINE_HORIZON_HOURS,
    ) -> float:
        """Combine priority and deadline proximity (higher = more urgent).

        The deadline term is not clamped from above, so an overdue task keeps
        gaining urgency the further past its deadline it gets.
        """
        priority_score = self.priority.value * priority_weight
        deadline_score = max(0.0, horizon_hours - self.hours_until_deadline(now))
        return float(priority_score + deadline_score)
