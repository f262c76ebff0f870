# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.cli.bootstrap import create_initial_state
from todo_tracker.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        data_file=tmp_path / "todo.json",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState backed by a real snapshot file under tmp_path (initially absent)."""
    return create_initial_state(settings=settings)
