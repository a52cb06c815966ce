"""Base ranking policy interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..models.task import Task


class RankingPolicy(ABC):
    """Abstract base class for task ranking policies."""

    def __init__(self, config: Optional[dict] = None):
        """Initialize policy with configuration."""
        self.config = config or {}

    @abstractmethod
    def order_tasks(self, tasks: List[Task], now: datetime) -> List[Task]:
        """Order tasks according to policy logic, most pressing first.

        Implementations must be stable so that tasks that compare equal
        keep the order in which they were given.
        """
        pass

    @abstractmethod
    def get_policy_name(self) -> str:
        """Return the name of this policy."""
        pass
