# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Any

from .errors import StoreError
from .task_models import Task, format_timestamp, parse_timestamp, utc_now

logger = logging.getLogger(__name__)


class SqliteTaskStore:
    """
    SQLite task store.

    The schema is simple and migration-safe:
    - create table if missing (on every open)
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    One connection is held from construction until close(); every write is
    committed before the method returns.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        except (OSError, sqlite3.Error) as e:
            raise StoreError(f"cannot open task database {self._db_path}: {e}") from e
        self._conn.row_factory = sqlite3.Row
        try:
            self._ensure_schema()
            total = self.count_tasks()
        except StoreError:
            self._conn.close()
            raise
        logger.debug("SqliteTaskStore ready db=%s total=%s", self._db_path, total)

    def close(self) -> None:
        self._conn.close()

    def flush(self) -> None:
        """Nothing to do: each operation is already committed."""
        return

    def __enter__(self) -> SqliteTaskStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ---- low-level helpers ----

    def _execute(self, sql: str, params: tuple[Any, ...] = ()) -> sqlite3.Cursor:
        try:
            cur = self._conn.execute(sql, params)
            self._conn.commit()
            return cur
        except sqlite3.Error as e:
            with contextlib.suppress(sqlite3.Error):
                self._conn.rollback()
            raise StoreError(f"task database error ({self._db_path}): {e}") from e

    def _query(self, sql: str, params: tuple[Any, ...] = ()) -> list[sqlite3.Row]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"task database error ({self._db_path}): {e}") from e

    def _ensure_schema(self) -> None:
        self._execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                description TEXT NOT NULL,
                done BOOLEAN NOT NULL DEFAULT 0,
                created_at TEXT,
                updated_at TEXT
            )
            """
        )

        # Migrations (safe): databases from the timestamp-less revision lack these.
        cols = {row["name"] for row in self._query("PRAGMA table_info(tasks)")}

        def add_col(name: str, decl: str) -> None:
            if name in cols:
                return
            self._execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
            logger.info("SqliteTaskStore migration: added column %s", name)

        add_col("created_at", "TEXT")
        add_col("updated_at", "TEXT")

    def _parse_ts(self, row: sqlite3.Row, column: str) -> datetime | None:
        try:
            return parse_timestamp(row[column])
        except ValueError:
            logger.warning(
                "Task %s has an unreadable %s=%r; showing it without timestamps.",
                row["id"],
                column,
                row[column],
            )
            return None

    def _row_to_task(self, row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            description=str(row["description"] or ""),
            done=bool(row["done"]),
            created_at=self._parse_ts(row, "created_at"),
            updated_at=self._parse_ts(row, "updated_at"),
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        rows = self._query("SELECT COUNT(*) FROM tasks")
        return int(rows[0][0])

    def add(self, description: str) -> int:
        task = Task.new(0, description)
        cur = self._execute(
            "INSERT INTO tasks(description, done, created_at, updated_at) VALUES (?, ?, ?, ?)",
            (
                task.description,
                task.done,
                format_timestamp(task.created_at),
                format_timestamp(task.updated_at),
            ),
        )
        rowid = cur.lastrowid
        if rowid is None:
            raise StoreError("SQLite did not return lastrowid for tasks insert")
        task_id = int(rowid)
        logger.debug("Task added id=%s", task_id)
        return task_id

    def list_tasks(self) -> list[Task]:
        rows = self._query(
            "SELECT id, description, done, created_at, updated_at FROM tasks ORDER BY id"
        )
        return [self._row_to_task(r) for r in rows]

    def complete(self, task_id: int) -> bool:
        """
        Mark a task done. updated_at only moves when done actually flips.

        Returns True if a row with this id exists.
        """
        cur = self._execute(
            """
            UPDATE tasks
            SET updated_at = CASE WHEN done THEN updated_at ELSE ? END,
                done = 1
            WHERE id = ?
            """,
            (format_timestamp(utc_now()), int(task_id)),
        )
        found = cur.rowcount > 0
        logger.debug("Task complete id=%s found=%s", task_id, found)
        return found

    def remove(self, task_id: int) -> bool:
        cur = self._execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
        found = cur.rowcount > 0
        logger.debug("Task remove id=%s found=%s", task_id, found)
        return found
