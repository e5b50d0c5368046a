# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it turns Settings into one concrete
task store and hands it out for the lifetime of a single command.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from ..config import STORE_BACKENDS, STORE_JSONL, STORE_SQLITE, get_settings
from ..core.ports import TaskRepo
from ..tasks.errors import StoreError
from ..tasks.task_file import FileTaskStore
from ..tasks.task_store import SqliteTaskStore

logger = logging.getLogger(__name__)


def create_task_store(*, settings=None) -> TaskRepo:
    """
    Build the store selected by settings.store_backend.

    Settings stay injectable so tests never read the real environment.
    """
    if settings is None:
        settings = get_settings()

    backend = settings.store_backend
    if backend == STORE_SQLITE:
        store: TaskRepo = SqliteTaskStore(settings.tasks_db_path)
        logger.info("Using SQLite task store at %s", settings.tasks_db_path)
    elif backend == STORE_JSONL:
        store = FileTaskStore(settings.tasks_file_path)
        logger.info("Using JSON Lines task store at %s", settings.tasks_file_path)
    else:
        raise StoreError(
            f"unknown store backend {backend!r} (expected one of: {', '.join(STORE_BACKENDS)})"
        )
    return store


@contextmanager
def open_task_store(*, settings=None) -> Iterator[TaskRepo]:
    """Open the configured store and always close it when the command is over."""
    store = create_task_store(settings=settings)
    try:
        yield store
    finally:
        store.close()
