# src/todo_tracker/tasks/task_file.py

"""
JSON Lines task file: one self-describing task record per line.

JsonlTaskFile does the raw load/save; FileTaskStore wraps it in the same
interface as SqliteTaskStore (load once on open, rewrite everything on flush).
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from . import task_ops
from .errors import StoreError
from .task_models import LoadResult, Task, TaskList

logger = logging.getLogger(__name__)


class JsonlTaskFile:
    def __init__(self, path: str | Path = "tasks.jsonl") -> None:
        self.path = Path(path)

    def load(self) -> LoadResult:
        """
        Read every task from the file.

        Bad lines are skipped and reported in `warnings` (also logged); they
        never abort the load. A missing file is an empty list. A file that
        cannot be read at all is an empty list plus one warning.
        """
        try:
            text = self.path.read_text("utf-8")
        except FileNotFoundError:
            return LoadResult(tasks=[], warnings=[])
        except (OSError, UnicodeDecodeError) as e:
            msg = f"cannot read {self.path}: {e}"
            logger.warning("Starting with an empty task list: %s", msg)
            return LoadResult(tasks=[], warnings=[msg])

        tasks: list[Task] = []
        warnings: list[str] = []
        seen: set[int] = set()

        # Split on "\n" only: json.dumps leaves U+2028 and U+0085 unescaped.
        for lineno, line in enumerate(text.split("\n"), start=1):
            line = line.removesuffix("\r")
            if not line.strip():
                continue
            try:
                task = Task.from_record(json.loads(line))
            except ValueError as e:
                # json.JSONDecodeError is a ValueError too.
                warnings.append(f"line {lineno}: {e}")
                continue
            if task.id in seen:
                warnings.append(f"line {lineno}: duplicate id {task.id}")
                continue
            seen.add(task.id)
            tasks.append(task)

        for w in warnings:
            logger.warning("Skipped task record in %s, %s", self.path, w)
        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return LoadResult(tasks=tasks, warnings=warnings)

    def save(self, tasks: TaskList | list[Task]) -> None:
        """
        Replace the file with one record per task, in collection order.

        Written to a temporary sibling first and swapped in with os.replace,
        so an interrupted save leaves the previous file untouched.
        """
        payload = "".join(json.dumps(t.to_record(), ensure_ascii=False) + "\n" for t in tasks)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self.path)
        except (OSError, UnicodeError) as e:
            raise StoreError(f"cannot write {self.path}: {e}") from e
        logger.debug("Saved %d tasks to %s", len(tasks), self.path)


class FileTaskStore:
    """Task store over a JSON Lines file; changes reach disk only on flush()."""

    def __init__(self, path: str | Path = "tasks.jsonl") -> None:
        self._file = JsonlTaskFile(path)
        loaded = self._file.load()
        self.warnings: list[str] = loaded.warnings
        self._tasks = TaskList(loaded.tasks)

    def close(self) -> None:
        return

    def flush(self) -> None:
        self._file.save(self._tasks)

    def __enter__(self) -> FileTaskStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def add(self, description: str) -> int:
        return task_ops.add_task(self._tasks, description)

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def complete(self, task_id: int) -> bool:
        return task_ops.complete_task(self._tasks, task_id)

    def remove(self, task_id: int) -> bool:
        return task_ops.remove_task(self._tasks, task_id)
