# src/todo_tracker/tasks/errors.py

from __future__ import annotations


class StoreError(RuntimeError):
    """A task store could not be opened, read from or written to."""
