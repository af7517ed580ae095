# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings live on the state so handlers never read global config.
    settings: object

    # Constructed by bootstrap (or a test) and passed around explicitly.
    tasks: TaskRepo

    pause_after_command: bool = True
