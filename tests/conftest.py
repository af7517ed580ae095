# tests/conftest.py

from __future__ import annotations

from datetime import datetime

import pytest

from task_tracker.config import Settings
from task_tracker.core.state import AppState
from task_tracker.tasks.task_manager import TaskManager

from .fakes import FakeClock

NOW = datetime(2026, 10, 17, 10, 0, 0)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture()
def settings() -> Settings:
    """
    Explicit settings instead of Settings.from_env(), to keep unit tests
    isolated from the developer's environment and .env file.
    """
    return Settings(seed_sample_data=False, pause_after_command=False)


@pytest.fixture()
def manager(clock: FakeClock) -> TaskManager:
    return TaskManager(clock=clock)


@pytest.fixture()
def state(settings: Settings, manager: TaskManager) -> AppState:
    return AppState(
        settings=settings,
        tasks=manager,
        pause_after_command=settings.pause_after_command,
    )
