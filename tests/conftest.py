"""Shared fixtures for the task scheduler tests."""

from datetime import datetime, timedelta

import pytest

from task_scheduler.engine.registry import TaskRegistry
from task_scheduler.models.task import Priority, Task

NOW = datetime(2024, 1, 15, 9, 0, 0)


@pytest.fixture
def now():
    """A fixed reference time so scores are deterministic."""
    return NOW


@pytest.fixture
def make_task():
    """Factory for tasks with sensible defaults relative to NOW."""

    def _make(task_id, dependencies=None, priority=Priority.MEDIUM, hours=48, **kwargs):
        return Task(
            task_id=task_id,
            title=kwargs.pop('title', f"Task {task_id}"),
            priority=priority,
            deadline=kwargs.pop('deadline', NOW + timedelta(hours=hours)),
            dependencies=dependencies or [],
            created_at=kwargs.pop('created_at', NOW),
            **kwargs,
        )

    return _make


@pytest.fixture
def registry():
    """Create an empty registry for each test."""
    return TaskRegistry()
