# tasks/snapshot.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from .task_models import SnapshotFormatError
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class SnapshotWriteError(OSError):
    """Saving the snapshot failed; the command that triggered it must abort."""


class SnapshotFile:
    """
    JSON snapshot of a whole TaskStore on local disk.

    Layout: {"pending": [{"title": ..., "status": ...}], "done": [...]}

    - load() never fails: a missing or unusable file yields an empty store
    - save() replaces the file via a temp file + os.replace
    """

    def __init__(self, path: str | Path = "todo.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskStore:
        if not self._path.exists():
            logger.debug("No snapshot at %s, starting empty.", self._path)
            return TaskStore()
        try:
            data = json.loads(self._path.read_text("utf-8"))
            store = TaskStore.from_dict(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, SnapshotFormatError) as e:
            logger.warning("Unusable snapshot %s (%s), starting empty.", self._path, e)
            return TaskStore()
        logger.debug(
            "Loaded snapshot %s: pending=%d done=%d",
            self._path,
            len(store.pending),
            len(store.done),
        )
        return store

    def save(self, store: TaskStore) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(store.to_dict(), ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.error("Failed to save snapshot to %s: %s", self._path, e)
            raise SnapshotWriteError(f"cannot write snapshot {self._path}: {e}") from e
        logger.debug(
            "Saved snapshot %s: pending=%d done=%d",
            self._path,
            len(store.pending),
            len(store.done),
        )
