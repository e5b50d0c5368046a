# src/todo_tracker/core/ports.py

"""
Ports (interfaces) used by the command layer.

Commands depend on this Protocol instead of a concrete store, so the SQLite
and JSON Lines backends are interchangeable and tests can use either.
"""

from __future__ import annotations

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """
    One open handle on the task store, held for a single command.

    complete/remove return False when no task has the id; that is a normal
    outcome, not an error. Storage failures raise StoreError.
    """

    def add(self, description: str) -> int: ...
    def list_tasks(self) -> list[Task]: ...
    def complete(self, task_id: int) -> bool: ...
    def remove(self, task_id: int) -> bool: ...

    # File-backed stores write everything here; the SQLite store has nothing left to do.
    def flush(self) -> None: ...
    def close(self) -> None: ...
