# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from task_tracker.tasks.errors import TaskValidationError
from task_tracker.tasks.task_models import Priority, Task, TaskStatus, TaskSummary

from .fakes import FakeClock


def test_new_task_defaults(clock: FakeClock) -> None:
    task = Task(1, "Write report", "Quarterly numbers", clock=clock)

    assert task.status == TaskStatus.PENDING
    assert task.priority == Priority.MEDIUM
    assert task.due_date is None
    assert task.completed_date is None
    assert task.created_at == clock.now


@pytest.mark.parametrize(
    ("title", "description"),
    [("", "desc"), ("title", ""), ("   ", "desc"), ("title", "\t"), (None, "desc")],
)
def test_task_rejects_blank_title_or_description(title, description) -> None:
    with pytest.raises(TaskValidationError):
        Task(1, title, description)


def test_mark_completed_restamps_each_call(clock: FakeClock) -> None:
    task = Task(1, "t", "d", clock=clock)

    task.mark_completed()
    first = task.completed_date
    assert task.status == TaskStatus.COMPLETED
    assert first == clock.now

    clock.advance(hours=2)
    task.mark_completed()
    assert task.completed_date == clock.now
    assert task.completed_date > first


def test_is_overdue_rules(clock: FakeClock) -> None:
    yesterday = clock.now - timedelta(days=1)
    task = Task(1, "t", "d", due_date=yesterday, clock=clock)
    assert task.is_overdue()

    task.status = TaskStatus.CANCELLED
    assert task.is_overdue()

    task.mark_completed()
    assert not task.is_overdue()

    no_due = Task(2, "t", "d", clock=clock)
    for status in TaskStatus:
        no_due.status = status
        assert not no_due.is_overdue()


def test_due_exactly_now_is_not_overdue(clock: FakeClock) -> None:
    task = Task(1, "t", "d", due_date=clock.now, clock=clock)
    assert not task.is_overdue()
    assert task.is_overdue(now=clock.now + timedelta(seconds=1))


def test_render_format(clock: FakeClock) -> None:
    task = Task(7, "Ship it", "d", Priority.HIGH, datetime(2026, 10, 1), clock=clock)
    assert task.render() == "[7] Ship it - Pending (High) - Due: 2026-10-01 [OVERDUE]"

    task.status = TaskStatus.IN_PROGRESS
    task.due_date = datetime(2026, 12, 24, 18, 30)
    assert str(task) == "[7] Ship it - InProgress (High) - Due: 2026-12-24"

    plain = Task(8, "Later", "d", Priority.LOW, clock=clock)
    assert plain.render() == "[8] Later - Pending (Low) - Due: No due date"


def test_priority_has_explicit_rank_and_labels() -> None:
    assert [p.rank for p in (Priority.LOW, Priority.MEDIUM, Priority.HIGH, Priority.CRITICAL)] == [
        1,
        2,
        3,
        4,
    ]
    assert Priority.CRITICAL.label == "Critical"
    assert Priority.from_number(3) is Priority.HIGH
    with pytest.raises(ValueError):
        Priority.from_number(5)


def test_status_labels() -> None:
    assert [s.label for s in TaskStatus] == ["Pending", "InProgress", "Completed", "Cancelled"]


def test_summary_completion_rate_and_render() -> None:
    summary = TaskSummary(total=5, completed=2, pending=3, overdue=1)
    assert summary.completion_rate == pytest.approx(40.0)
    assert summary.render().splitlines() == [
        "=== TASK SUMMARY ===",
        "Total Tasks: 5",
        "Completed: 2",
        "Pending: 3",
        "Overdue: 1",
        "Completion Rate: 40.0%",
    ]


def test_empty_summary_omits_completion_rate() -> None:
    summary = TaskSummary()
    assert summary.completion_rate is None
    assert "Completion Rate" not in summary.render()
    assert "Total Tasks: 0" in summary.render()
