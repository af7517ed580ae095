# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menu in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import resolve_level, setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    setup_logging(log_dir=settings.log_dir, console_level=resolve_level(settings.log_level))
    logger.info("Starting %s...", settings.app_name)

    print("=== Task Management System ===\n")
    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
