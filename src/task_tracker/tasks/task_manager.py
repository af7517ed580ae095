# src/task_tracker/tasks/task_manager.py

from __future__ import annotations

import logging
from datetime import datetime

from ..core.ports import Clock
from .errors import TaskNotFoundError, TaskValidationError
from .task_models import Priority, Task, TaskStatus, TaskSummary

logger = logging.getLogger(__name__)


class TaskManager:
    """
    In-memory owner of the task collection.

    - tasks keep insertion (creation) order
    - ids start at 1, grow monotonically and are never reused, even after delete
    - every operation either succeeds or raises with the collection untouched

    Not thread-safe: callers sharing one manager must serialise access themselves.
    """

    def __init__(self, *, clock: Clock = datetime.now) -> None:
        self._tasks: list[Task] = []
        self._next_id: int = 1
        self._clock = clock

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- mutation ----

    def create_task(
        self,
        title: str,
        description: str,
        priority: Priority = Priority.MEDIUM,
        due_date: datetime | None = None,
    ) -> Task:
        if not title or not title.strip():
            raise TaskValidationError("Task title cannot be empty")
        if not description or not description.strip():
            raise TaskValidationError("Task description cannot be empty")

        task = Task(self._next_id, title, description, priority, due_date, clock=self._clock)
        self._next_id += 1
        self._tasks.append(task)
        logger.debug(
            "Task created id=%s priority=%s due_date=%s",
            task.id,
            task.priority.label,
            task.due_date,
        )
        return task

    def delete_task(self, task_id: int) -> None:
        task = self.get_task_by_id(task_id)
        self._tasks.remove(task)
        logger.debug("Task deleted id=%s", task_id)

    def update_task_status(self, task_id: int, status: TaskStatus) -> Task:
        """
        Set a task's status.

        COMPLETED (re)stamps completed_date. Any other status leaves a previous
        completed_date in place.
        """
        task = self.get_task_by_id(task_id)
        task.status = status
        if status == TaskStatus.COMPLETED:
            task.mark_completed()
        logger.debug("Task status updated id=%s status=%s", task_id, status.value)
        return task

    # ---- queries ----

    def get_task_by_id(self, task_id: int) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def get_all_tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get_tasks_by_status(self, status: TaskStatus) -> list[Task]:
        return [t for t in self._tasks if t.status == status]

    def get_tasks_by_priority(self, priority: Priority) -> list[Task]:
        return [t for t in self._tasks if t.priority == priority]

    def get_overdue_tasks(self) -> list[Task]:
        now = self._clock()
        return [t for t in self._tasks if t.is_overdue(now)]

    def get_tasks_sorted_by_priority(self) -> list[Task]:
        """
        Highest priority first; within a tier, earliest due date first and
        tasks without a due date last. sorted() is stable, so creation order
        breaks the remaining ties.
        """
        return sorted(
            self._tasks,
            key=lambda t: (-t.priority.rank, t.due_date if t.due_date is not None else datetime.max),
        )

    def summary(self) -> TaskSummary:
        now = self._clock()
        return TaskSummary(
            total=len(self._tasks),
            completed=sum(1 for t in self._tasks if t.status == TaskStatus.COMPLETED),
            pending=sum(1 for t in self._tasks if t.status == TaskStatus.PENDING),
            overdue=sum(1 for t in self._tasks if t.is_overdue(now)),
        )
