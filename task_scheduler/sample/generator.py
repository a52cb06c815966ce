"""Sample and randomly generated task sets."""

import random
from datetime import datetime, timedelta
from typing import List, Optional

from ..models.task import Priority, Task


class SampleDataGenerator:
    """Generates deterministic task sets for demos and tests."""

    def __init__(self, seed: int = 42, config: Optional[dict] = None):
        """Initialize generator with seed for reproducibility."""
        self.seed = seed
        self.random = random.Random(seed)
        self.config = config or {}
        self.sample_config = self.config.get('sample', {})

    def sample_tasks(self, now: datetime) -> List[Task]:
        """Build the fixed sample project: a small web system delivery plan."""
        return [
            Task(
                task_id="TASK-001",
                title="Database design",
                description="Design the database schema for the new system",
                priority=Priority.HIGH,
                deadline=now + timedelta(days=3),
                estimated_hours=8.0,
                created_at=now,
            ),
            Task(
                task_id="TASK-002",
                title="API implementation",
                description="Implement the RESTful API endpoints",
                priority=Priority.HIGH,
                deadline=now + timedelta(days=5),
                estimated_hours=16.0,
                dependencies=["TASK-001"],
                created_at=now,
            ),
            Task(
                task_id="TASK-003",
                title="Frontend implementation",
                description="Implement the user interface",
                priority=Priority.MEDIUM,
                deadline=now + timedelta(days=7),
                estimated_hours=20.0,
                dependencies=["TASK-002"],
                created_at=now,
            ),
            Task(
                task_id="TASK-004",
                title="Write tests",
                description="Write unit and integration tests",
                priority=Priority.MEDIUM,
                deadline=now + timedelta(days=8),
                estimated_hours=12.0,
                dependencies=["TASK-002", "TASK-003"],
                created_at=now,
            ),
            Task(
                task_id="TASK-005",
                title="Documentation",
                description="Write the API reference and user manual",
                priority=Priority.LOW,
                deadline=now + timedelta(days=10),
                estimated_hours=6.0,
                dependencies=["TASK-003"],
                created_at=now,
            ),
            Task(
                task_id="TASK-006",
                title="Urgent bug fix",
                description="Fix a critical bug found in production",
                priority=Priority.URGENT,
                deadline=now + timedelta(hours=12),
                estimated_hours=4.0,
                created_at=now,
            ),
            Task(
                task_id="TASK-007",
                title="Performance tuning",
                description="Optimize queries and add caching",
                priority=Priority.MEDIUM,
                deadline=now + timedelta(days=6),
                estimated_hours=10.0,
                dependencies=["TASK-001"],
                created_at=now,
            ),
        ]

    def generate_tasks(
        self,
        now: datetime,
        count: int = None,
        deadline_range_days: int = None,
        dependency_probability: float = None,
    ) -> List[Task]:
        """Generate a random task set whose dependency graph is acyclic.

        Dependencies only point at tasks generated earlier, so inserting the
        tasks in list order always succeeds.
        """
        count = count or self.sample_config.get('task_count', 20)
        deadline_range_days = deadline_range_days or self.sample_config.get('deadline_range_days', 14)
        if dependency_probability is None:
            dependency_probability = self.sample_config.get('dependency_probability', 0.3)

        tasks = []
        for i in range(count):
            task_id = f"task_{i:03d}"

            # Deadlines spread across the range, a few already overdue
            hours_offset = self.random.randint(-12, deadline_range_days * 24)
            deadline = now + timedelta(hours=hours_offset)

            # Vary task sizes (some small, some large)
            if self.random.random() < 0.3:
                estimated_hours = round(self.random.uniform(0.5, 2.0), 1)
            else:
                estimated_hours = round(self.random.uniform(2.0, 16.0), 1)

            dependencies = []
            if i > 0 and self.random.random() < dependency_probability:
                dep_count = self.random.randint(1, min(2, i))
                dependencies = [
                    f"task_{dep_idx:03d}"
                    for dep_idx in sorted(self.random.sample(range(i), dep_count))
                ]

            tasks.append(Task(
                task_id=task_id,
                title=f"Task {i}",
                priority=self.random.choice(list(Priority)),
                deadline=deadline,
                estimated_hours=estimated_hours,
                dependencies=dependencies,
                created_at=now - timedelta(days=self.random.randint(0, 7)),
            ))

        return tasks
