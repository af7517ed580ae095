# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, StrEnum

from ..core.ports import Clock
from .errors import TaskValidationError

DUE_DATE_FORMAT = "%Y-%m-%d"


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class Priority(Enum):
    """
    Priority tier.

    Values match the numbers shown in the console prompt (1=Low ... 4=Critical).
    Comparisons go through `rank`, never through enum declaration order.
    """

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @property
    def rank(self) -> int:
        return int(self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_number(cls, raw: int) -> Priority:
        for p in cls:
            if p.value == raw:
                return p
        raise ValueError(f"Unknown priority: {raw}")


class TaskStatus(StrEnum):
    """Task lifecycle status."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.PENDING: "Pending",
    TaskStatus.IN_PROGRESS: "InProgress",
    TaskStatus.COMPLETED: "Completed",
    TaskStatus.CANCELLED: "Cancelled",
}


@dataclass(slots=True, eq=False)
class Task:
    """
    One unit of tracked work.

    Tasks are created through TaskManager.create_task; the manager owns id assignment.
    Identity is by object: two tasks with equal fields are still different tasks.
    """

    id: int
    title: str
    description: str
    priority: Priority = Priority.MEDIUM
    due_date: datetime | None = None

    status: TaskStatus = field(default=TaskStatus.PENDING, init=False)
    created_at: datetime = field(init=False)
    completed_date: datetime | None = field(default=None, init=False)

    clock: Clock = field(default=datetime.now, repr=False, kw_only=True)

    def __post_init__(self) -> None:
        if self.title is None or not str(self.title).strip():
            raise TaskValidationError("Task title cannot be empty")
        if self.description is None or not str(self.description).strip():
            raise TaskValidationError("Task description cannot be empty")
        # Stored due dates are naive local time so they compare with clock().
        if self.due_date is not None:
            self.due_date = to_local_naive(self.due_date)
        self.created_at = self.clock()

    def mark_completed(self, now: datetime | None = None) -> None:
        # Re-marking overwrites the previous stamp.
        self.status = TaskStatus.COMPLETED
        self.completed_date = now if now is not None else self.clock()

    def is_overdue(self, now: datetime | None = None) -> bool:
        if self.due_date is None:
            return False
        if now is None:
            now = self.clock()
        return self.due_date < now and self.status != TaskStatus.COMPLETED

    def render(self, now: datetime | None = None) -> str:
        due = self.due_date.strftime(DUE_DATE_FORMAT) if self.due_date else "No due date"
        overdue = " [OVERDUE]" if self.is_overdue(now) else ""
        return (
            f"[{self.id}] {self.title} - {self.status.label} "
            f"({self.priority.label}) - Due: {due}{overdue}"
        )

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class TaskSummary:
    total: int = 0
    completed: int = 0
    pending: int = 0
    overdue: int = 0

    @property
    def completion_rate(self) -> float | None:
        """Percentage of completed tasks, or None for an empty collection."""
        if self.total <= 0:
            return None
        return self.completed * 100.0 / self.total

    def render(self) -> str:
        lines = [
            "=== TASK SUMMARY ===",
            f"Total Tasks: {self.total}",
            f"Completed: {self.completed}",
            f"Pending: {self.pending}",
            f"Overdue: {self.overdue}",
        ]
        rate = self.completion_rate
        if rate is not None:
            lines.append(f"Completion Rate: {rate:.1f}%")
        return "\n".join(lines)
