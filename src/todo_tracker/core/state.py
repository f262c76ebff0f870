# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.snapshot import SnapshotFile
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    snapshot: SnapshotFile
    store: TaskStore

    def persist(self) -> None:
        self.snapshot.save(self.store)
