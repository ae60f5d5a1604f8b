# src/tasklist/errors.py

from __future__ import annotations

BLANK_NAME_MESSAGE = "task name must not be blank"


class TaskListError(Exception):
    """Base exception for tasklist errors."""

    pass


class InvalidArgumentError(TaskListError, ValueError):
    """Raised when an operation receives an argument it cannot accept."""

    pass
