# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import InputFn
from ..core.state import AppState
from ..tasks.task_api import parse_due_date, parse_priority, parse_status_choice, parse_task_id
from ..tasks.task_models import TaskStatus
from .formatting import format_task_list

CommandHandler = Callable[[AppState, InputFn], str]

INVALID_OPTION = "Invalid option. Please try again."

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Numbered menu registry used by the console connector (1..8)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._labels: dict[str, str] = {}

    def register(
        self,
        key: str,
        handler: CommandHandler,
        label: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        k = key.lower()
        self._handlers[k] = handler
        self._labels[k] = label
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, choice: str, prompt: InputFn) -> str:
        """
        Run the command selected by `choice` and return its output.

        Task errors raised by handlers propagate; the console loop reports them.
        """
        key = choice.strip().lower()
        handler = self._handlers.get(key)
        if handler is None:
            return INVALID_OPTION
        logger.debug("Menu command %r", key)
        return handler(state, prompt)

    def build_menu(self) -> str:
        lines = ["\n=== MAIN MENU ==="]
        for key, label in self._labels.items():
            lines.append(f"{key}. {label}")
        lines.append("Q. Quit")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_create(state: AppState, prompt: InputFn) -> str:
    title = prompt("Enter task title: ")
    description = prompt("Enter task description: ")
    priority = parse_priority(
        prompt("Enter priority (1=Low, 2=Medium, 3=High, 4=Critical) [default: 2]: ")
    )
    due_date = parse_due_date(prompt("Enter due date (yyyy-mm-dd) [optional]: "))

    task = state.tasks.create_task(title, description, priority, due_date)
    return f"\nTask created successfully: {task}"


def cmd_list_all(state: AppState, prompt: InputFn) -> str:
    return format_task_list(state.tasks.get_all_tasks(), "All Tasks")


def cmd_list_by_status(state: AppState, prompt: InputFn) -> str:
    choice = prompt(
        "Select status:\n"
        "1. Pending\n"
        "2. In Progress\n"
        "3. Completed\n"
        "4. Cancelled\n"
        "Enter choice: "
    )
    status = parse_status_choice(choice)
    if status is None:
        return "Invalid choice."
    return format_task_list(state.tasks.get_tasks_by_status(status), f"{status.label} Tasks")


def cmd_complete(state: AppState, prompt: InputFn) -> str:
    task_id = parse_task_id(prompt("Enter task ID to mark as completed: "))
    if task_id is None:
        return "Invalid task ID."
    state.tasks.update_task_status(task_id, TaskStatus.COMPLETED)
    return "Task marked as completed!"


def cmd_list_overdue(state: AppState, prompt: InputFn) -> str:
    return format_task_list(state.tasks.get_overdue_tasks(), "Overdue Tasks")


def cmd_list_sorted(state: AppState, prompt: InputFn) -> str:
    return format_task_list(state.tasks.get_tasks_sorted_by_priority(), "Tasks Sorted by Priority")


def cmd_summary(state: AppState, prompt: InputFn) -> str:
    return "\n" + state.tasks.summary().render()


def cmd_delete(state: AppState, prompt: InputFn) -> str:
    task_id = parse_task_id(prompt("Enter task ID to delete: "))
    if task_id is None:
        return "Invalid task ID."
    state.tasks.delete_task(task_id)
    return "Task deleted successfully!"


registry.register("1", cmd_create, label="Create New Task")
registry.register("2", cmd_list_all, label="View All Tasks")
registry.register("3", cmd_list_by_status, label="View Tasks by Status")
registry.register("4", cmd_complete, label="Mark Task as Completed")
registry.register("5", cmd_list_overdue, label="View Overdue Tasks")
registry.register("6", cmd_list_sorted, label="View Tasks by Priority")
registry.register("7", cmd_summary, label="View Task Summary")
registry.register("8", cmd_delete, label="Delete Task")
