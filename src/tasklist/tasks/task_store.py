# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
from datetime import date

from ..errors import BLANK_NAME_MESSAGE, InvalidArgumentError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Keeps tasks in insertion order. Names are not unique: several tasks may share
    a name until they are removed (removal drops all of them).

    Thread-safety:
    - none; callers that share a store across threads hold AppState.lock
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        logger.debug("TaskStore ready (in-memory)")

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(self, name: str | None, due_date: date | None) -> Task:
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError(BLANK_NAME_MESSAGE)

        task = Task(name=name, due_date=due_date)
        self._tasks.append(task)
        logger.debug("Task added name=%r due_date=%s total=%d", name, due_date, len(self._tasks))
        return task

    def list_all_tasks(self) -> list[Task]:
        """Return a copy of all tasks in insertion order."""
        return list(self._tasks)

    def list_tasks_due_before(self, cutoff: date | None) -> list[Task]:
        """
        Return tasks whose due date is strictly earlier than `cutoff`.

        - a task due exactly on `cutoff` is not included
        - tasks without a due date never match
        - order follows insertion order
        """
        if cutoff is None:
            raise InvalidArgumentError("cutoff date is required")

        return [t for t in self._tasks if t.due_date is not None and t.due_date < cutoff]

    def remove_tasks_by_name(self, name: str | None) -> bool:
        """
        Remove every task whose name matches `name`, ignoring case.

        Returns True if at least one task was removed.
        """
        if not isinstance(name, str):
            return False

        key = name.casefold()
        kept = [t for t in self._tasks if t.name.casefold() != key]
        removed = len(self._tasks) - len(kept)
        if not removed:
            return False

        self._tasks = kept
        logger.debug("Tasks removed name=%r count=%d total=%d", name, removed, len(kept))
        return True
