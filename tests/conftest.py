# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.cli import main as cli_main
from todo_tracker.core.ports import TaskRepo
from todo_tracker.tasks.task_file import FileTaskStore
from todo_tracker.tasks.task_store import SqliteTaskStore


@pytest.fixture(params=["sqlite", "jsonl"])
def backend(request: pytest.FixtureRequest) -> str:
    return request.param


@pytest.fixture()
def settings(tmp_path: Path, backend: str) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment and .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        log_file_enabled=False,
        store_backend=backend,
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        tasks_file_path=tmp_path / "tasks.jsonl",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> Iterator[TaskRepo]:
    """
    A real store of each kind (no fakes): persistence is what we want to test.
    """
    repo: TaskRepo
    if settings.store_backend == "sqlite":
        repo = SqliteTaskStore(settings.tasks_db_path)
    else:
        repo = FileTaskStore(settings.tasks_file_path)
    yield repo
    repo.close()


@pytest.fixture()
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep main() from replacing pytest's own logging handlers."""
    monkeypatch.setattr(cli_main, "setup_logging", lambda **_: None)


@pytest.fixture()
def restore_root_logging() -> Iterator[None]:
    """Let a test run the real setup_logging, then put pytest's handlers back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
