# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(raw: Any) -> datetime | None:
    """
    Parse an ISO-8601 timestamp as written by `format_timestamp`.

    Naive values are taken as UTC. Raises ValueError for anything that is not
    a string or not ISO-8601.
    """
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ValueError(f"timestamp must be a string, got {type(raw).__name__}")
    dt = datetime.fromisoformat(raw)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_timestamp(dt: datetime | None) -> str | None:
    return dt.isoformat() if dt is not None else None


@dataclass(slots=True)
class Task:
    id: int
    description: str
    done: bool = False

    # Records from the timestamp-less file format load with both set to None.
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def new(cls, task_id: int, description: str) -> Task:
        now = utc_now()
        return cls(id=task_id, description=description, done=False, created_at=now, updated_at=now)

    def mark_done(self) -> bool:
        """Set done=True. Returns False when the task was already done (nothing changes)."""
        if self.done:
            return False
        self.done = True
        now = utc_now()
        if self.updated_at is not None and self.updated_at > now:
            # Clock went backwards; updated_at never does.
            now = self.updated_at
        self.updated_at = now
        return True

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "done": self.done,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_record(cls, data: Any) -> Task:
        """
        Build a Task from a decoded record.

        Raises ValueError describing the first problem found.
        """
        if not isinstance(data, dict):
            raise ValueError("record is not an object")

        task_id = data.get("id")
        # bool is an int subclass; `true` is not an id.
        if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id < 1:
            raise ValueError(f"invalid id {task_id!r}")

        description = data.get("description")
        if not isinstance(description, str):
            raise ValueError("description must be a string")

        done = data.get("done", False)
        if not isinstance(done, bool):
            raise ValueError("done must be true or false")

        return cls(
            id=task_id,
            description=description,
            done=done,
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )


@dataclass(slots=True)
class TaskList:
    """
    In-memory task collection, kept in ascending id order.

    `last_id` is the highest id ever held during this run, so ids freed by a
    removal are not handed out again before the process exits.
    """

    tasks: list[Task] = field(default_factory=list)
    last_id: int = 0

    def __post_init__(self) -> None:
        self.tasks.sort(key=lambda t: t.id)
        self.last_id = max([self.last_id, *(t.id for t in self.tasks)])

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)


@dataclass(frozen=True, slots=True)
class LoadResult:
    tasks: list[Task]
    warnings: list[str]
