# src/todo_tracker/tasks/task_ops.py

"""
Operations on an in-memory TaskList.

These never print and never raise for a missing id: callers get a bool and
decide what to tell the user.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .task_models import Task, TaskList

EMPTY_LIST_TEXT = "No tasks in the to-do list."
_DISPLAY_FMT = "%Y-%m-%d %H:%M:%S"


def next_task_id(tasks: TaskList) -> int:
    highest = max((t.id for t in tasks), default=0)
    return max(highest, tasks.last_id) + 1


def add_task(tasks: TaskList, description: str) -> int:
    task_id = next_task_id(tasks)
    tasks.tasks.append(Task.new(task_id, description))
    tasks.last_id = task_id
    return task_id


def find_task(tasks: TaskList, task_id: int) -> Task | None:
    return next((t for t in tasks if t.id == task_id), None)


def complete_task(tasks: TaskList, task_id: int) -> bool:
    task = find_task(tasks, task_id)
    if task is None:
        return False
    task.mark_done()
    return True


def remove_task(tasks: TaskList, task_id: int) -> bool:
    for i, task in enumerate(tasks.tasks):
        if task.id == task_id:
            del tasks.tasks[i]
            return True
    return False


def _ts_local(dt: datetime) -> str:
    return dt.astimezone().strftime(_DISPLAY_FMT)


def format_task(task: Task) -> str:
    line = f"[{'x' if task.done else ' '}] {task.id} - {task.description}"
    if task.created_at is not None and task.updated_at is not None:
        line += f" (Created: {_ts_local(task.created_at)}, Updated: {_ts_local(task.updated_at)})"
    return line


def render_tasks(tasks: Iterable[Task]) -> str:
    lines = [format_task(t) for t in sorted(tasks, key=lambda t: t.id)]
    if not lines:
        return EMPTY_LIST_TEXT
    return "\n".join(lines)
