"""Tests for JSON task persistence."""

import json

import pytest

from task_scheduler.models.errors import CircularDependency, DuplicateId, InvalidPriority
from task_scheduler.models.task import Priority, TaskStatus
from task_scheduler.storage.json_store import (
    load_registry,
    load_tasks,
    save_tasks,
    task_from_dict,
    task_to_dict,
)


def _write(path, data):
    path.write_text(json.dumps(data))
    return path


def _entry(task_id, dependencies=None, priority="MEDIUM"):
    return {
        'task_id': task_id,
        'title': f"Task {task_id}",
        'priority': priority,
        'deadline': "2024-01-20T09:00:00",
        'dependencies': dependencies or [],
    }


class TestTaskDict:
    """Test task <-> dict conversion."""

    def test_to_dict(self, make_task, now):
        task = make_task("T1", ["T0"], priority=Priority.URGENT, estimated_hours=2.5)
        data = task_to_dict(task)
        assert data['priority'] == "URGENT"
        assert data['status'] == "pending"
        assert data['dependencies'] == ["T0"]
        assert data['created_at'] == now.isoformat()

    def test_from_dict_accepts_numeric_priority(self):
        assert task_from_dict(_entry("T1", priority=4)).priority is Priority.URGENT
        assert task_from_dict(_entry("T1", priority="2")).priority is Priority.MEDIUM

    def test_from_dict_invalid_priority(self):
        with pytest.raises(InvalidPriority):
            task_from_dict(_entry("T1", priority=7))
        with pytest.raises(InvalidPriority):
            task_from_dict(_entry("T1", priority=3.9))
        with pytest.raises(InvalidPriority):
            task_from_dict(_entry("T1", priority=True))
        with pytest.raises(InvalidPriority):
            task_from_dict(_entry("T1", priority="severe"))

    def test_from_dict_defaults(self):
        task = task_from_dict(_entry("T1"))
        assert task.status is TaskStatus.PENDING
        assert task.estimated_hours == 0.0


class TestSaveLoad:
    """Test saving and loading task files."""

    def test_save_then_load_preserves_fields(self, tmp_path, make_task):
        tasks = [
            make_task("T1", estimated_hours=3.0, description="first"),
            make_task("T2", ["T1"], status=TaskStatus.BLOCKED),
        ]
        path = save_tasks(tmp_path / "nested" / "tasks.json", tasks)
        loaded = load_tasks(path)
        assert loaded == tasks

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_tasks(tmp_path / "absent.json")

    def test_not_a_list(self, tmp_path):
        path = _write(tmp_path / "tasks.json", {'tasks': []})
        with pytest.raises(ValueError):
            load_tasks(path)

    def test_load_registry(self, tmp_path, now):
        path = _write(tmp_path / "tasks.json", [_entry("A"), _entry("B", ["A"])])
        registry = load_registry(path)
        assert [task.task_id for task in registry.execution_order(now)] == ["A", "B"]

    def test_load_registry_rejects_cycles(self, tmp_path):
        path = _write(tmp_path / "tasks.json", [_entry("A", ["B"]), _entry("B", ["A"])])
        with pytest.raises(CircularDependency):
            load_registry(path)

    def test_load_registry_rejects_duplicates(self, tmp_path):
        path = _write(tmp_path / "tasks.json", [_entry("A"), _entry("A")])
        with pytest.raises(DuplicateId):
            load_registry(path)
