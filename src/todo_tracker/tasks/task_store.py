# tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .task_models import InvalidIndexError, SnapshotFormatError, Task, TaskStatus

logger = logging.getLogger(__name__)

IndexedTask = tuple[int, Task]


@dataclass(frozen=True, slots=True)
class TaskListing:
    pending: list[IndexedTask]
    done: list[IndexedTask]


@dataclass(slots=True)
class TaskStore:
    """
    In-memory task list: two ordered sequences, pending and done.

    Tasks are addressed by their 0-based position in the sequence they
    currently belong to. Only pending tasks can be completed or deleted.
    """

    pending: list[Task] = field(default_factory=list)
    done: list[Task] = field(default_factory=list)

    # ---- helpers ----

    def _check_pending_index(self, index: int) -> None:
        if index < 0 or index >= len(self.pending):
            raise InvalidIndexError(index, len(self.pending))

    # ---- operations ----

    def insert(self, title: str, status: str) -> Task:
        # status is stored as given; only complete() forces DONE
        task = Task(title=title, status=status)
        self.pending.append(task)
        logger.debug("Task inserted index=%s status=%s", len(self.pending) - 1, status)
        return task

    def complete(self, index: int) -> Task:
        self._check_pending_index(index)
        task = self.pending.pop(index)
        task.status = TaskStatus.DONE.value
        self.done.append(task)
        logger.debug("Task completed pending_index=%s done_index=%s", index, len(self.done) - 1)
        return task

    def delete(self, index: int) -> Task:
        self._check_pending_index(index)
        task = self.pending.pop(index)
        logger.debug("Task deleted pending_index=%s", index)
        return task

    def list(self) -> TaskListing:
        return TaskListing(
            pending=list(enumerate(self.pending)),
            done=list(enumerate(self.done)),
        )

    def copy(self) -> TaskStore:
        return TaskStore(
            pending=[Task(t.title, t.status) for t in self.pending],
            done=[Task(t.title, t.status) for t in self.done],
        )

    # ---- snapshot (de)serialization ----

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {
            "pending": [t.to_dict() for t in self.pending],
            "done": [t.to_dict() for t in self.done],
        }

    @classmethod
    def from_dict(cls, data: Any) -> TaskStore:
        """
        Build a store from snapshot data.

        Strict about shape: both lists must be present and every entry needs
        string title/status. Unknown keys are ignored.
        """
        if not isinstance(data, dict):
            raise SnapshotFormatError(f"snapshot must be an object, got {type(data).__name__}")

        lists: dict[str, list[Task]] = {}
        for key in ("pending", "done"):
            raw = data.get(key)
            if not isinstance(raw, list):
                raise SnapshotFormatError(f"snapshot field {key!r} must be a list")
            lists[key] = [Task.from_dict(item) for item in raw]

        return cls(pending=lists["pending"], done=lists["done"])


def format_listing(listing: TaskListing) -> str:
    lines = ["Pending tasks:"]
    lines.extend(f"{i}: {t.title}" for i, t in listing.pending)
    lines.append("Done tasks:")
    lines.extend(f"{i}: {t.title}" for i, t in listing.done)
    return "\n".join(lines)
