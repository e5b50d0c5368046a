# tests/test_task_store.py

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

import pytest

from todo_tracker.tasks.errors import StoreError
from todo_tracker.tasks.task_store import SqliteTaskStore


def test_task_add_list_complete_remove(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    with SqliteTaskStore(db) as store:
        assert store.add("Buy milk") == 1
        assert store.add("Write report") == 2
        assert store.count_tasks() == 2

        items = store.list_tasks()
        assert [(t.id, t.description, t.done) for t in items] == [
            (1, "Buy milk", False),
            (2, "Write report", False),
        ]
        assert items[0].created_at == items[0].updated_at

        assert store.complete(1) is True
        assert store.remove(2) is True

    # Every operation was committed: a fresh handle sees the same state.
    with SqliteTaskStore(db) as store:
        items = store.list_tasks()
        assert [(t.id, t.description, t.done) for t in items] == [(1, "Buy milk", True)]
        assert items[0].updated_at >= items[0].created_at


def test_missing_ids_report_not_found(tmp_path: Path) -> None:
    with SqliteTaskStore(tmp_path / "tasks.sqlite3") as store:
        store.add("a")
        assert store.complete(99) is False
        assert store.remove(99) is False
        assert [t.id for t in store.list_tasks()] == [1]


def test_autoincrement_never_reuses_ids(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    with SqliteTaskStore(db) as store:
        store.add("a")
        store.add("b")
        store.remove(2)

    with SqliteTaskStore(db) as store:
        assert store.add("c") == 3


def test_complete_twice_keeps_updated_at(tmp_path: Path) -> None:
    with SqliteTaskStore(tmp_path / "tasks.sqlite3") as store:
        store.add("a")
        store.complete(1)
        first = store.list_tasks()[0].updated_at

        assert store.complete(1) is True
        assert store.list_tasks()[0].updated_at == first


def test_migrates_table_without_timestamp_columns(tmp_path: Path) -> None:
    db = tmp_path / "legacy.sqlite3"
    conn = sqlite3.connect(db)
    conn.execute(
        "CREATE TABLE tasks (id INTEGER PRIMARY KEY AUTOINCREMENT, "
        "description TEXT NOT NULL, done BOOLEAN NOT NULL DEFAULT 0)"
    )
    conn.execute("INSERT INTO tasks(description, done) VALUES ('old one', 0)")
    conn.commit()
    conn.close()

    with SqliteTaskStore(db) as store:
        (old,) = store.list_tasks()
        assert old.description == "old one"
        assert old.created_at is None and old.updated_at is None

        assert store.add("new one") == 2
        assert store.list_tasks()[1].created_at is not None


def test_unreadable_timestamp_becomes_none_with_warning(tmp_path: Path, caplog) -> None:
    db = tmp_path / "tasks.sqlite3"
    with SqliteTaskStore(db) as store:
        store.add("a")

    conn = sqlite3.connect(db)
    conn.execute("UPDATE tasks SET created_at = 'not a date'")
    conn.commit()
    conn.close()

    with SqliteTaskStore(db) as store, caplog.at_level(logging.WARNING, logger="todo_tracker"):
        (task,) = store.list_tasks()

    assert task.created_at is None
    assert task.updated_at is not None
    assert any("unreadable created_at" in r.getMessage() for r in caplog.records)


def test_open_failure_raises_store_error(tmp_path: Path) -> None:
    # A directory cannot be opened as a database file.
    with pytest.raises(StoreError):
        SqliteTaskStore(tmp_path)
