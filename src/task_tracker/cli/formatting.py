# src/task_tracker/cli/formatting.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from ..tasks.task_models import Task

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def format_task_details(task: Task, now: datetime | None = None) -> str:
    lines = [task.render(now)]
    if task.description:
        lines.append(f"    Description: {task.description}")
    lines.append(f"    Created: {task.created_at.strftime(TIMESTAMP_FORMAT)}")
    if task.completed_date is not None:
        lines.append(f"    Completed: {task.completed_date.strftime(TIMESTAMP_FORMAT)}")
    return "\n".join(lines)


def format_task_list(tasks: Iterable[Task], title: str, now: datetime | None = None) -> str:
    """Header + one details block per task (blank line after each), or "No tasks found."."""
    tasks = list(tasks)
    lines = [f"\n=== {title.upper()} ==="]
    if not tasks:
        lines.append("No tasks found.")
        return "\n".join(lines)
    for task in tasks:
        lines.append(format_task_details(task, now))
        lines.append("")
    return "\n".join(lines)
