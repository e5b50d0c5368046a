# src/todo_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is created on disk at import time (directories are made by the CLI bootstrap).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

STORE_SQLITE = "sqlite"
STORE_JSONL = "jsonl"
STORE_BACKENDS = (STORE_SQLITE, STORE_JSONL)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file_enabled: bool

    # ---- Storage ----
    store_backend: str
    data_dir: Path
    tasks_db_path: Path
    tasks_file_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_file_enabled = _env_bool(_k("LOG_FILE"), True)

        # Validated when the store is opened, so a typo is reported instead of ignored.
        store_backend = _env(_k("STORE"), STORE_SQLITE).strip().lower()

        data_dir = _env_path(_k("DATA_DIR"), Path("~/.todo").expanduser())
        tasks_db_path = _env_path(_k("DB_PATH"), data_dir / "tasks.sqlite3")
        tasks_file_path = _env_path(_k("FILE_PATH"), data_dir / "tasks.jsonl")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file_enabled=log_file_enabled,
            store_backend=store_backend,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            tasks_file_path=tasks_file_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
