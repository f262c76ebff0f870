# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- resolves the snapshot path,
- restores the TaskStore into AppState (empty when there is no usable snapshot).
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.snapshot import SnapshotFile

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, data_file: str | Path | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings(). An explicit data_file wins over settings.
    """
    if settings is None:
        settings = get_settings()

    path = Path(data_file) if data_file is not None else Path(settings.data_file)
    snapshot = SnapshotFile(path)
    store = snapshot.load()
    logger.info(
        "State ready snapshot=%s pending=%d done=%d",
        path,
        len(store.pending),
        len(store.done),
    )
    return AppState(settings=settings, snapshot=snapshot, store=store)
