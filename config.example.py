# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a
local .env file, which stays gitignored).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name used in logs (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level on stderr (default: WARNING).",
    "TODO_LOG_FILE": "Also write DEBUG logs to <data_dir>/todo.log (true/false, default: true).",
    # Storage
    "TODO_STORE": "Storage backend: sqlite or jsonl (default: sqlite).",
    "TODO_DATA_DIR": "Local data directory (default: ~/.todo).",
    "TODO_DB_PATH": "SQLite database path (default: <data_dir>/tasks.sqlite3).",
    "TODO_FILE_PATH": "JSON Lines task file path (default: <data_dir>/tasks.jsonl).",
}
