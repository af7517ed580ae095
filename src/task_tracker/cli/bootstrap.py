# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (injected, or the process default),
- constructs the one TaskManager the app will use,
- optionally seeds demo tasks.
"""

from __future__ import annotations

import logging
from datetime import datetime

from ..config import Settings, get_settings
from ..core.ports import Clock, OutputFn
from ..core.state import AppState
from ..tasks.task_api import seed_sample_data
from ..tasks.task_manager import TaskManager

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings: Settings | None = None,
    clock: Clock = datetime.now,
    output: OutputFn = print,
) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). Seeding errors are
    reported and logged, never raised: the app starts with whatever was created.
    """
    if settings is None:
        settings = get_settings()

    manager = TaskManager(clock=clock)

    if settings.seed_sample_data:
        try:
            seed_sample_data(manager, now=clock())
            output("Sample data initialized successfully!\n")
        except Exception as e:
            logger.exception("Failed to seed sample data.")
            output(f"Error initializing sample data: {e}")

    return AppState(
        settings=settings,
        tasks=manager,
        pause_after_command=settings.pause_after_command,
    )
