# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.ports import InputFn, OutputFn
from ..core.state import AppState
from ..tasks.errors import TaskManagementError

logger = logging.getLogger(__name__)

QUIT_WORDS = frozenset({"q", "quit", "exit"})


def run_console_loop(
    state: AppState,
    *,
    registry: CommandRegistry | None = None,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> None:
    """
    Interactive menu loop.

    Never exits because of a failing command: task errors print "Error: ...",
    anything else is logged and printed as "Unexpected error: ...". Ends on
    Q/quit/exit, EOF or Ctrl+C.
    """
    registry = registry or command_registry
    logger.info("Console menu started (tasks=%d).", len(state.tasks))

    while True:
        output(registry.build_menu())
        try:
            choice = input_fn("\nSelect an option: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output("")
            break

        if choice.lower() in QUIT_WORDS:
            output("Goodbye!")
            break

        try:
            output(registry.handle(state, choice, input_fn))
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed mid-command, exiting.")
            output("")
            break
        except TaskManagementError as e:
            logger.info("Command %r failed: %s", choice, e)
            output(f"Error: {e}")
        except Exception as e:
            logger.exception("Command handler crashed.")
            output(f"Unexpected error: {e}")

        if state.pause_after_command:
            try:
                input_fn("\nPress Enter to continue...")
            except (EOFError, KeyboardInterrupt):
                logger.info("Console input closed, exiting.")
                break

    logger.info("Console menu finished.")
