# src/task_tracker/tasks/task_api.py

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from dateutil import parser as dateutil_parser

from .task_manager import TaskManager
from .task_models import Priority, TaskStatus, to_local_naive

logger = logging.getLogger(__name__)

# Menu numbering for the status picker (1-based).
STATUS_CHOICES: tuple[TaskStatus, ...] = (
    TaskStatus.PENDING,
    TaskStatus.IN_PROGRESS,
    TaskStatus.COMPLETED,
    TaskStatus.CANCELLED,
)

SAMPLE_TASKS: tuple[tuple[str, str, Priority, int | None], ...] = (
    (
        "Design Database Schema",
        "Create ERD and database design for the new project",
        Priority.HIGH,
        -2,
    ),
    (
        "Implement User Authentication",
        "Add login/logout functionality with JWT tokens",
        Priority.CRITICAL,
        3,
    ),
    (
        "Write Unit Tests",
        "Create comprehensive unit tests for the API endpoints",
        Priority.MEDIUM,
        7,
    ),
    (
        "Update Documentation",
        "Update API documentation and README file",
        Priority.LOW,
        14,
    ),
    ("Code Review", "Review pull requests from team members", Priority.MEDIUM, None),
)


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_task_id(raw: str | None) -> int | None:
    return _parse_int(raw)


def parse_priority(raw: str | None, default: Priority = Priority.MEDIUM) -> Priority:
    """Map "1".."4" to a Priority; anything else (blank, junk, out of range) -> default."""
    value = _parse_int(raw)
    if value is None:
        return default
    try:
        return Priority.from_number(value)
    except ValueError:
        return default


def parse_status_choice(raw: str | None) -> TaskStatus | None:
    value = _parse_int(raw)
    if value is None or not 1 <= value <= len(STATUS_CHOICES):
        return None
    return STATUS_CHOICES[value - 1]


def parse_due_date(raw: str | None) -> datetime | None:
    """
    Lenient calendar-date parsing.

    Blank or unparseable input means "no due date". Timezone-aware input is
    converted to local naive time so it compares with datetime.now().
    """
    if raw is None or not raw.strip():
        return None
    try:
        parsed = dateutil_parser.parse(raw.strip())
    except (ValueError, OverflowError):
        logger.debug("Ignoring unparseable due date %r", raw)
        return None
    return to_local_naive(parsed)


def seed_sample_data(manager: TaskManager, now: datetime | None = None) -> None:
    """
    Create the demo tasks: due dates are relative to `now`, the first task is
    completed and the last one is in progress.
    """
    if now is None:
        now = datetime.now()

    created = []
    for title, description, priority, days in SAMPLE_TASKS:
        due = now + timedelta(days=days) if days is not None else None
        created.append(manager.create_task(title, description, priority, due))

    manager.update_task_status(created[0].id, TaskStatus.COMPLETED)
    manager.update_task_status(created[-1].id, TaskStatus.IN_PROGRESS)
    logger.info("Seeded %d sample tasks", len(created))
