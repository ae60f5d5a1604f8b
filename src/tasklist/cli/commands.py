# src/tasklist/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..errors import InvalidArgumentError
from ..tasks.task_api import DATE_FORMAT_HINT, format_task, format_task_list, parse_due_date

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._maxsplit: dict[str, int] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        maxsplit: int = -1,
    ) -> None:
        """
        `maxsplit` limits how the argument string is split, so the last argument
        keeps its inner whitespace (e.g. a task name).
        """
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._maxsplit[key] = maxsplit
        for alias in aliases:
            self._handlers[alias.lower()] = handler
            self._maxsplit[alias.lower()] = maxsplit

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].strip().split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""
        args = rest.split(maxsplit=self._maxsplit.get(name, -1))

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    app_name = str(getattr(state.settings, "app_name", "tasklist"))
    return f"Status:\n  App: {app_name}\n  Tasks: {state.task_store.count_tasks()}"


def cmd_add(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /add 2026-02-10 Write report   -> task due on that date
    /add - Call mom                -> task without a due date
    """
    if len(args) < 2:
        return f"Usage: /add {DATE_FORMAT_HINT}|- task name"

    try:
        due_date = parse_due_date(args[0])
        task = state.task_store.add_task(args[1], due_date)
    except InvalidArgumentError as e:
        return f"Cannot add task: {e}"

    if emit:
        with contextlib.suppress(Exception):
            emit(f"[TASKS] {state.task_store.count_tasks()} task(s) in the list.")

    logger.debug("Command /add stored task name=%r", task.name)
    return f"Added: {format_task(task)}"


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_task_list(state.task_store.list_all_tasks(), title="Tasks:")


def cmd_due(state: AppState, args: list[str]) -> str:
    """
    /due 2026-02-25  -> tasks due strictly before that date
    """
    if len(args) != 1:
        return f"Usage: /due {DATE_FORMAT_HINT}"

    try:
        cutoff = parse_due_date(args[0])
        tasks = state.task_store.list_tasks_due_before(cutoff)
    except InvalidArgumentError as e:
        return f"Cannot filter tasks: {e}"

    return format_task_list(
        tasks,
        title=f"Tasks due before {cutoff}:",
        empty=f"No tasks due before {cutoff}.",
    )


def cmd_remove(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /remove task name"

    name = args[0]
    if state.task_store.remove_tasks_by_name(name):
        return f"Removed all tasks named {name!r}."
    return f"No task named {name!r}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show app name and task count.")
registry.register(
    "add",
    cmd_add,
    help_text=f"Add a task: /add {DATE_FORMAT_HINT}|- name (- = no due date).",
    maxsplit=1,
)
registry.register("list", cmd_list, help_text="List all tasks in insertion order.", aliases=["ls"])
registry.register("due", cmd_due, help_text=f"List tasks due before a date: /due {DATE_FORMAT_HINT}.")
registry.register(
    "remove",
    cmd_remove,
    help_text="Remove all tasks with this name (any case).",
    aliases=["rm"],
    maxsplit=0,
)
