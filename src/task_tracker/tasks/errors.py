# src/task_tracker/tasks/errors.py

from __future__ import annotations


class TaskManagementError(Exception):
    """Base class for errors the console reports and recovers from."""


class TaskValidationError(TaskManagementError, ValueError):
    """Raised when a task is created with a blank title or description."""


class TaskNotFoundError(TaskManagementError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found")
        self.task_id = task_id
