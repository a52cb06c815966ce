"""Error types raised by the task registry and scheduling engine."""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    """Tag identifying which kind of task error occurred."""

    CIRCULAR_DEPENDENCY = "circular_dependency"
    TASK_NOT_FOUND = "task_not_found"
    INVALID_PRIORITY = "invalid_priority"
    DUPLICATE_ID = "duplicate_id"


class TaskError(Exception):
    """Base class for all recoverable task errors.

    Every error carries its ``kind`` so callers can branch on a single
    ``except TaskError`` clause instead of catching each subclass.
    """

    kind: ErrorKind

    def __init__(self, message: str, task_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.task_id = task_id

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON export."""
        result: Dict[str, Any] = {
            'error': self.kind.value,
            'message': self.message,
        }
        if self.task_id is not None:
            result['task_id'] = self.task_id
        return result


class CircularDependency(TaskError):
    """A dependency cycle was found at insertion or sort time."""

    kind = ErrorKind.CIRCULAR_DEPENDENCY


class TaskNotFound(TaskError):
    """A status update referenced an unknown task ID."""

    kind = ErrorKind.TASK_NOT_FOUND


class InvalidPriority(TaskError):
    """A priority value could not be decoded."""

    kind = ErrorKind.INVALID_PRIORITY


class DuplicateId(TaskError):
    """A task with the same ID is already registered."""

    kind = ErrorKind.DUPLICATE_ID
