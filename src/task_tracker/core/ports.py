# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the console layer.

The menu depends on Protocols instead of TaskManager directly, so a test harness
or a future front-end can drive any object with the same API.
"""

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any, Protocol

Clock = Callable[[], datetime]
# Returns "now" as a naive local datetime (datetime.now by default).

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class TaskRepo(Protocol):
    def __len__(self) -> int: ...

    def create_task(
            self,
            title: str,
            description: str,
            priority: Any = ...,
            due_date: datetime | None = None,
    ) -> Any: ...

    def get_task_by_id(self, task_id: int) -> Any: ...
    def delete_task(self, task_id: int) -> None: ...
    def update_task_status(self, task_id: int, status: Any) -> Any: ...

    def get_all_tasks(self) -> Sequence[Any]: ...
    def get_tasks_by_status(self, status: Any) -> Sequence[Any]: ...
    def get_tasks_by_priority(self, priority: Any) -> Sequence[Any]: ...
    def get_overdue_tasks(self) -> Sequence[Any]: ...
    def get_tasks_sorted_by_priority(self) -> Sequence[Any]: ...
    def summary(self) -> Any: ...
