# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the configured task store, runs exactly one
command, prints its reply and persists.

Persistence failures are fatal: a store that cannot be opened, a failed
database statement or a failed save prints an error and exits with status 1.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.errors import StoreError
from .bootstrap import open_task_store
from .commands import registry

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    if settings is None:
        settings = get_settings()
    if argv is None:
        argv = sys.argv[1:]

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = settings.data_dir if getattr(settings, "log_file_enabled", False) else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "todo"))

    reply = registry.handle_without_store(argv)
    if reply is not None:
        print(reply)
        return 0

    try:
        with open_task_store(settings=settings) as store:
            reply = registry.handle(store, argv)
            print(reply)
            store.flush()
    except StoreError as e:
        logger.debug("Store failure", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
