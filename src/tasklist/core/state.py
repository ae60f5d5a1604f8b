# src/tasklist/core/state.py

from __future__ import annotations

import threading
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from typing import Any

from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskRepo

    # Held by connectors around every store access; the store itself is not thread-safe.
    lock: AbstractContextManager[Any] = field(default_factory=threading.RLock)
