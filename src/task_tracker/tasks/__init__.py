"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, Priority, TaskSummary)
- errors.py: validation / not-found error taxonomy
- task_manager.py: in-memory collection manager (ids, queries, summary)
- task_api.py: input parsing helpers and demo data seeding
"""

from .errors import TaskManagementError, TaskNotFoundError, TaskValidationError
from .task_manager import TaskManager
from .task_models import Priority, Task, TaskStatus, TaskSummary

__all__ = [
    "Priority",
    "Task",
    "TaskManagementError",
    "TaskManager",
    "TaskNotFoundError",
    "TaskStatus",
    "TaskSummary",
    "TaskValidationError",
]
