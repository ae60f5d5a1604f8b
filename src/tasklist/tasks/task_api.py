# src/tasklist/tasks/task_api.py

from __future__ import annotations

from datetime import date

from ..errors import InvalidArgumentError
from .task_models import Task

DATE_FORMAT_HINT = "YYYY-MM-DD"
NO_DATE_TOKEN = "-"


def parse_due_date(raw: str) -> date | None:
    """
    Parse a user-supplied date token.

    "-" means "no due date". Anything else must be an ISO calendar date.
    """
    raw = raw.strip()
    if raw == NO_DATE_TOKEN:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise InvalidArgumentError(f"Invalid date {raw!r}, expected {DATE_FORMAT_HINT}.") from None


def format_task(task: Task) -> str:
    if task.due_date is None:
        return f"{task.name} (no due date)"
    return f"{task.name} (due {task.due_date.isoformat()})"


def format_task_list(tasks: list[Task], *, title: str, empty: str = "No tasks.") -> str:
    if not tasks:
        return empty
    lines = [title]
    for i, t in enumerate(tasks, start=1):
        lines.append(f"{i}. {format_task(t)}")
    return "\n".join(lines)
