# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command surface.

Commands depend on a Protocol instead of the concrete TaskStore,
so the storage stays swappable and tests can pass fakes.
"""

from datetime import date
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def count_tasks(self) -> int: ...

    def add_task(self, name: str | None, due_date: date | None) -> Task: ...

    def list_all_tasks(self) -> list[Task]: ...

    def list_tasks_due_before(self, cutoff: date | None) -> list[Task]: ...

    def remove_tasks_by_name(self, name: str | None) -> bool: ...
