# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Well-known status labels.

    Notes:
    - Task.status is a free-form string; these are just the labels the app
      itself writes ("add" default and "complete").
    """

    PENDING = "PENDING"
    DONE = "DONE"


class InvalidIndexError(IndexError):
    """Raised when a pending-task index is out of range."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__("Invalid index")
        self.index = index
        self.size = size


class SnapshotFormatError(ValueError):
    """Snapshot data does not have the {"pending": [...], "done": [...]} shape."""


@dataclass(slots=True)
class Task:
    title: str
    status: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "status": self.status}

    @classmethod
    def from_dict(cls, raw: object) -> Task:
        if not isinstance(raw, dict):
            raise SnapshotFormatError(f"task entry must be an object, got {type(raw).__name__}")
        title = raw.get("title")
        status = raw.get("status")
        if not isinstance(title, str) or not isinstance(status, str):
            raise SnapshotFormatError("task entry needs string 'title' and 'status'")
        return cls(title=title, status=status)
