# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..core.ports import TaskRepo
from ..tasks.task_ops import render_tasks

CommandHandler = Callable[[TaskRepo | None, list[str]], str]

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "list"
UNKNOWN_COMMAND_TEXT = "Unknown command."
INVALID_ID_TEXT = "Invalid task ID."
NOT_FOUND_TEXT = "Task not found."

# Largest id SQLite can bind as INTEGER.
MAX_TASK_ID = 2**63 - 1


@dataclass(frozen=True, slots=True)
class _Command:
    name: str
    handler: CommandHandler
    usage: str
    help_text: str


class CommandRegistry:
    """Maps the first argv token to exactly one handler."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._commands: list[_Command] = []
        self._storeless: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
        aliases: list[str] | None = None,
        needs_store: bool = True,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._commands.append(_Command(key, handler, usage or key, help_text))
        for n in [key, *(a.lower() for a in aliases)]:
            self._handlers[n] = handler
            if not needs_store:
                self._storeless.add(n)

    @staticmethod
    def _split(argv: Sequence[str]) -> tuple[str, list[str]]:
        if not argv:
            argv = [DEFAULT_COMMAND]
        return argv[0].lower(), list(argv[1:])

    def handle_without_store(self, argv: Sequence[str]) -> str | None:
        """
        Answer commands that never touch the store (help, unknown names).

        Returns None when the command needs an open store.
        """
        name, args = self._split(argv)
        if name not in self._handlers:
            logger.debug("Unknown command %r", name)
            return UNKNOWN_COMMAND_TEXT
        if name in self._storeless:
            return self._handlers[name](None, args)
        return None

    def handle(self, store: TaskRepo, argv: Sequence[str]) -> str:
        """
        Run one command from argv-style tokens (program name already stripped).

        No tokens means `list`. Returns the text to show the user.
        """
        name, args = self._split(argv)
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command %r", argv[0])
            return UNKNOWN_COMMAND_TEXT

        logger.debug("Running command %s args=%s", name, args)
        return handler(store, args)

    def build_help(self) -> str:
        lines = ["Usage: todo <command> [options]", "Commands:"]
        for cmd in self._commands:
            lines.append(f"  {cmd.usage} - {cmd.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_task_id(raw: str) -> int | None:
    """Unsigned decimal id, ASCII digits only, at most MAX_TASK_ID. None otherwise."""
    if not raw.isascii() or not raw.isdigit():
        return None
    task_id = int(raw)
    if task_id > MAX_TASK_ID:
        return None
    return task_id


def cmd_add(store: TaskRepo, args: list[str]) -> str:
    if not args:
        return "Usage: add <task description>"
    task_id = store.add(" ".join(args))
    return f"Added task {task_id}."


def cmd_list(store: TaskRepo, args: list[str]) -> str:
    return render_tasks(store.list_tasks())


def cmd_done(store: TaskRepo, args: list[str]) -> str:
    if not args:
        return "Usage: done <task ID>"
    task_id = parse_task_id(args[0])
    if task_id is None:
        return INVALID_ID_TEXT
    if not store.complete(task_id):
        return NOT_FOUND_TEXT
    return f"Completed task {task_id}."


def cmd_remove(store: TaskRepo, args: list[str]) -> str:
    if not args:
        return "Usage: remove <task ID>"
    task_id = parse_task_id(args[0])
    if task_id is None:
        return INVALID_ID_TEXT
    if not store.remove(task_id):
        return NOT_FOUND_TEXT
    return f"Removed task {task_id}."


def cmd_help(store: TaskRepo | None, args: list[str]) -> str:
    return registry.build_help()


registry.register("add", cmd_add, help_text="Add a new task", usage="add <task description>")
registry.register("list", cmd_list, help_text="List all tasks")
registry.register("done", cmd_done, help_text="Mark a task as done", usage="done <task ID>")
registry.register("remove", cmd_remove, help_text="Remove a task", usage="remove <task ID>")
registry.register(
    "help",
    cmd_help,
    help_text="Show this help",
    aliases=["-h", "--help"],
    needs_store=False,
)
