# tests/test_bootstrap.py

from __future__ import annotations

import logging

import pytest

from task_tracker.cli import bootstrap
from task_tracker.cli.bootstrap import create_initial_state
from task_tracker.config import Settings
from task_tracker.tasks.task_models import TaskStatus

from .fakes import CapturedOutput, FakeClock


def test_bootstrap_without_seed_starts_empty(clock: FakeClock) -> None:
    out = CapturedOutput()
    state = create_initial_state(
        settings=Settings(seed_sample_data=False, pause_after_command=False),
        clock=clock,
        output=out,
    )

    assert len(state.tasks) == 0
    assert state.pause_after_command is False
    assert out.lines == []


def test_bootstrap_seeds_sample_tasks(clock: FakeClock) -> None:
    out = CapturedOutput()
    state = create_initial_state(settings=Settings(), clock=clock, output=out)

    assert len(state.tasks) == 5
    assert state.tasks.get_task_by_id(1).status == TaskStatus.COMPLETED
    assert state.tasks.get_task_by_id(5).status == TaskStatus.IN_PROGRESS
    assert state.pause_after_command is True
    assert out.lines == ["Sample data initialized successfully!\n"]


def test_each_bootstrap_gets_its_own_manager(clock: FakeClock) -> None:
    settings = Settings(seed_sample_data=False)
    a = create_initial_state(settings=settings, clock=clock, output=CapturedOutput())
    b = create_initial_state(settings=settings, clock=clock, output=CapturedOutput())

    a.tasks.create_task("only in a", "d")
    assert len(a.tasks) == 1
    assert len(b.tasks) == 0


def test_seeding_failure_is_reported_not_fatal(
    clock: FakeClock, monkeypatch: pytest.MonkeyPatch, caplog
) -> None:
    def broken_seed(manager, now=None):
        manager.create_task("partial", "d")
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(bootstrap, "seed_sample_data", broken_seed)
    out = CapturedOutput()

    with caplog.at_level(logging.ERROR, logger="task_tracker"):
        state = create_initial_state(settings=Settings(), clock=clock, output=out)

    assert out.lines == ["Error initializing sample data: disk on fire"]
    assert any("Failed to seed sample data" in r.message for r in caplog.records)
    assert len(state.tasks) == 1
    assert state.tasks.create_task("next", "d").id == 2
